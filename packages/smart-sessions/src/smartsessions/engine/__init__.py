"""Filter-and-select engines.

PUBLIC API:
  - SessionList: Cascading session -> tab -> pane filter
  - CandidateList: Flat, windowed candidate filter
  - session_name: Session name derived from a candidate path
"""

from .hierarchical import SessionList
from .flat import CandidateList, session_name

__all__ = ["SessionList", "CandidateList", "session_name"]
