"""Session list widget.

PUBLIC API:
  - SessionListView: Static painting engine display rows
  - render_rows: Convert display rows to rich Text
"""

from rich.text import Text
from textual.widgets import Static

from ...types import DisplayRow

__all__ = ["SessionListView", "render_rows"]

INDENT = "  "

KIND_STYLES = {
    "session": "cyan",
    "tab": "green",
    "pane": "",
    "candidate": "cyan",
}
HIGHLIGHT_STYLE = "bold yellow"
SELECTED_STYLE = "reverse"


def render_rows(rows: list[DisplayRow], empty_message: str = "No matches") -> Text:
    """Build one Text block from display rows.

    Args:
        rows: Rows from an engine's produce_display_list.
        empty_message: Shown dimmed when rows is empty.
    """
    if not rows:
        return Text(empty_message, style="dim")

    lines = []
    for row in rows:
        prefix = INDENT * row.indent
        line = Text(prefix)
        line.append(row.label, style=KIND_STYLES.get(row.kind, ""))

        offset = len(prefix)
        for index in sorted(row.highlights):
            if index < len(row.label):
                line.stylize(HIGHLIGHT_STYLE, offset + index, offset + index + 1)

        if row.selected:
            line.stylize(SELECTED_STYLE)
        lines.append(line)

    return Text("\n").join(lines)


class SessionListView(Static):
    """Renders the rows produced by the active picker.

    All styling via smart_sessions.tcss - no DEFAULT_CSS to avoid conflicts.
    """

    def show_rows(self, rows: list[DisplayRow], empty_message: str = "No matches") -> None:
        self.update(render_rows(rows, empty_message))
