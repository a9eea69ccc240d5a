"""Base screen for the pickers.

PUBLIC API:
  - PickerScreen: Screen forwarding keys to a picker controller
"""

from textual import events
from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Footer, Static

from ..widgets import SearchLine, SessionListView

__all__ = ["PickerScreen"]


class PickerScreen(Screen):
    """Screen that owns a picker and repaints after each handled key.

    Subclasses set `picker` and `title_text`. The picker decides what every key
    does; BINDINGS only feed the footer.
    """

    title_text = ""
    empty_message = "No matches"

    def compose(self) -> ComposeResult:
        yield Static(f"[bold]{self.title_text}[/bold]", id="screen-title")
        yield SearchLine(id="search")
        yield SessionListView(id="session-list")
        yield Footer()

    def on_mount(self) -> None:
        self.redraw()

    def on_key(self, event: events.Key) -> None:
        """Forward the key to the picker."""
        event.stop()
        event.prevent_default()

        if self.picker.handle_key(event.key, event.character):
            self.redraw()

        if self.picker.finished:
            self.app.exit()

    def redraw(self) -> None:
        self.query_one(SearchLine).set_query(self.picker.query)
        self.query_one(SessionListView).show_rows(self.picker.rows(), self.empty_message)

    def action_noop(self) -> None:
        """Placeholder - the picker handles keys in on_key."""
        pass
