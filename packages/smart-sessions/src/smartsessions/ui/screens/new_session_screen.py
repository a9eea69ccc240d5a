"""New-session picker screen.

PUBLIC API:
  - NewSessionScreen: Pick a directory to open or create a session in
"""

import logging
from typing import Callable

from textual import work
from textual.binding import Binding

from ...picker import CandidatePicker
from ...tmux.exceptions import TmuxError
from ...types import SessionEntity
from ._base import PickerScreen

__all__ = ["NewSessionScreen"]

logger = logging.getLogger(__name__)


class NewSessionScreen(PickerScreen):
    """Cached candidates show at once; discovery refreshes them in the background.

    Running sessions are reloaded on a timer so kills show up as plain names.

    Args:
        picker: Candidate picker controller.
        run_command: Runs the discovery argv and returns its stdout.
        load_snapshot: Returns running sessions for annotation.
        refresh_interval: Seconds between running-session reloads.
    """

    title_text = "New Session"

    BINDINGS = [
        Binding("enter", "noop", "Open"),
        Binding("delete", "noop", "Kill"),
        Binding("escape", "noop", "Exit"),
    ]

    def __init__(
        self,
        picker: CandidatePicker,
        run_command: Callable[[list[str]], bytes],
        load_snapshot: Callable[[], list[SessionEntity]],
        refresh_interval: float = 2.0,
    ):
        super().__init__()
        self.picker = picker
        self.run_command = run_command
        self.load_snapshot = load_snapshot
        self.refresh_interval = refresh_interval

    @property
    def empty_message(self) -> str:
        return "No matches" if self.picker.engine.has_list() else "No candidates yet"

    def on_mount(self) -> None:
        self.picker.engine.load_cached_list()
        self.refresh_running_sessions()
        super().on_mount()
        self.discover()
        if self.refresh_interval > 0:
            self.set_interval(self.refresh_interval, self.refresh_running_sessions)

    def refresh_running_sessions(self) -> None:
        """Reload running sessions and redraw when they changed."""
        try:
            sessions = self.load_snapshot()
        except TmuxError as e:
            logger.warning(f"Snapshot failed: {e}")
            return

        engine = self.picker.engine
        if sessions == engine.running_sessions:
            return

        engine.update_running_sessions(sessions)
        self.redraw()

    @work(thread=True, exclusive=True)
    def discover(self) -> None:
        """Run discovery off the UI thread, apply the result on it."""
        raw = self.run_command(self.picker.discovery_argv)
        self.app.call_from_thread(self.apply_discovery, raw)

    def apply_discovery(self, raw: bytes) -> None:
        if self.picker.engine.apply_discovery_output(raw):
            self.redraw()
