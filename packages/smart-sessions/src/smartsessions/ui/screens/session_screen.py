"""Session picker screen.

PUBLIC API:
  - SessionScreen: Filter and attach to sessions, tabs and panes
"""

import logging
from typing import Callable

from textual.binding import Binding

from ...picker import SessionPicker
from ...tmux.exceptions import TmuxError
from ...types import SessionEntity
from ._base import PickerScreen

__all__ = ["SessionScreen"]

logger = logging.getLogger(__name__)


class SessionScreen(PickerScreen):
    """Type to filter; a space moves the query one level down.

    Args:
        picker: Session picker controller.
        load_snapshot: Returns the current session hierarchy.
        refresh_interval: Seconds between snapshot refreshes.
    """

    title_text = "Sessions"
    empty_message = "No sessions"

    BINDINGS = [
        Binding("enter", "noop", "Attach"),
        Binding("delete", "noop", "Kill"),
        Binding("right", "noop", "Expand"),
        Binding("left", "noop", "Collapse"),
        Binding("escape", "noop", "Exit"),
    ]

    def __init__(
        self,
        picker: SessionPicker,
        load_snapshot: Callable[[], list[SessionEntity]],
        refresh_interval: float = 2.0,
    ):
        super().__init__()
        self.picker = picker
        self.load_snapshot = load_snapshot
        self.refresh_interval = refresh_interval

    def on_mount(self) -> None:
        super().on_mount()
        self.refresh_snapshot()
        if self.refresh_interval > 0:
            self.set_interval(self.refresh_interval, self.refresh_snapshot)

    def refresh_snapshot(self) -> None:
        """Load the hierarchy and hand it to the engine when it changed."""
        try:
            snapshot = self.load_snapshot()
        except TmuxError as e:
            logger.warning(f"Snapshot failed: {e}")
            return

        # Re-filtering resets the selection, so skip identical snapshots
        if snapshot == self.picker.engine.sessions:
            return

        self.picker.engine.update_snapshot(snapshot)
        self.redraw()
