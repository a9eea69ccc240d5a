"""Search line widget.

PUBLIC API:
  - SearchLine: Static showing "Search: <query>_"
"""

from rich.text import Text
from textual.widgets import Static

__all__ = ["SearchLine"]


class SearchLine(Static):
    """Typed query with a trailing cursor."""

    def set_query(self, query: str) -> None:
        text = Text()
        text.append("Search:", style="bold green")
        text.append(f" {query}_")
        self.update(text)
