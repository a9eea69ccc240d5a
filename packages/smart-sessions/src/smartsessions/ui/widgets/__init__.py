"""Textual widgets for smart-sessions.

PUBLIC API:
  - SessionListView: Paints display rows with match highlighting
  - SearchLine: Shows the typed query
  - render_rows: Build rich Text from display rows
"""

from .session_list import SessionListView, render_rows
from .search_line import SearchLine

__all__ = ["SessionListView", "SearchLine", "render_rows"]
