"""Textual screens for smart-sessions.

PUBLIC API:
  - SessionScreen: Filter and attach to sessions, tabs and panes
  - NewSessionScreen: Open or create a session from a directory
"""

from .session_screen import SessionScreen
from .new_session_screen import NewSessionScreen

__all__ = [
    "SessionScreen",
    "NewSessionScreen",
]
