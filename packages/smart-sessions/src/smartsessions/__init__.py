"""Fuzzy tmux session, window and pane picker.

Type to narrow sessions, a space to move on to windows, another space for
panes. A second mode picks a directory and opens or creates a session there.

PUBLIC API:
  - SessionList: Cascading session -> tab -> pane filter engine
  - CandidateList: Flat candidate filter engine
  - split_query: Split a search string into per-level sub-queries
  - split_command: Split a command line into argv tokens
"""

from .engine import CandidateList, SessionList
from .lexer import split_command
from .query import split_query

__version__ = "0.1.0"
__all__ = ["SessionList", "CandidateList", "split_query", "split_command"]
