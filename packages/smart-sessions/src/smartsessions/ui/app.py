"""smart-sessions Textual application.

PUBLIC API:
  - SmartSessionsApp: Runs either the session picker or the new-session picker
"""

from typing import Callable, Literal, Optional, TypeAlias

from textual.app import App

from ..cache import CandidateCache
from ..config import ConfigManager
from ..engine import CandidateList, SessionList
from ..host import TmuxHost
from ..picker import CandidatePicker, SessionPicker
from ..tmux import load_snapshot
from ..types import SessionEntity
from .screens import NewSessionScreen, SessionScreen

__all__ = ["SmartSessionsApp"]

Mode: TypeAlias = Literal["sessions", "new"]


class SmartSessionsApp(App):
    """Picker application.

    Args:
        config: Loaded configuration.
        mode: "sessions" to pick a running session, "new" to pick a directory.
        host: Action executor, a TmuxHost by default.
        snapshot_loader: Session hierarchy source, tmux by default.
    """

    CSS_PATH = "smart_sessions.tcss"
    TITLE = "smart-sessions"

    def __init__(
        self,
        config: ConfigManager,
        mode: Mode = "sessions",
        host: Optional[TmuxHost] = None,
        snapshot_loader: Optional[Callable[[], list[SessionEntity]]] = None,
    ):
        super().__init__()
        self.config = config
        self.mode = mode
        self.host = host or TmuxHost()
        self.snapshot_loader = snapshot_loader or load_snapshot

    def on_mount(self) -> None:
        if self.mode == "new":
            engine = CandidateList(self.host, CandidateCache(self.config.cache_path))
            picker = CandidatePicker(engine, self.config.discovery_command, self.config.height)
            self.push_screen(
                NewSessionScreen(picker, self.host.run_command, self.snapshot_loader, self.config.refresh_interval)
            )
        else:
            picker = SessionPicker(SessionList(self.host))
            self.push_screen(SessionScreen(picker, self.snapshot_loader, self.config.refresh_interval))
