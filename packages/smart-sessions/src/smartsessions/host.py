"""Host collaborator that executes picker actions.

Engines only signal intent through the Host protocol. Results of an action
(a killed session, a new session) come back later as a fresh snapshot.

PUBLIC API:
  - Host: Protocol consumed by the engines
  - TmuxHost: Host backed by a tmux server
"""

import logging
from typing import Optional, Protocol

from .discovery import run_discovery
from .tmux import (
    attach_session,
    inside_tmux,
    kill_session,
    new_session,
    select_pane,
    session_exists,
    switch_client,
)
from .tmux.exceptions import TmuxError
from .types import PaneID, TabPosition

__all__ = ["Host", "TmuxHost"]

logger = logging.getLogger(__name__)


class Host(Protocol):
    def switch_focus(
        self, session: str, tab_position: Optional[TabPosition] = None, pane_id: Optional[PaneID] = None
    ) -> None: ...

    def terminate(self, session: str) -> None: ...

    def switch_or_create(self, session: str, working_directory: str) -> None: ...

    def run_command(self, argv: list[str]) -> bytes: ...


class TmuxHost:
    """Execute actions against the tmux server.

    Inside tmux the current client is switched directly. Outside tmux the target
    is remembered in attach_target and attached once the UI has exited.
    """

    def __init__(self):
        self.attach_target: Optional[str] = None

    def _focus(self, session: str, target: str) -> None:
        if inside_tmux():
            switch_client(f"={session}")
        else:
            self.attach_target = target

    def switch_focus(
        self, session: str, tab_position: Optional[TabPosition] = None, pane_id: Optional[PaneID] = None
    ) -> None:
        """Make session (and optionally window/pane) the focused target."""
        if pane_id is not None:
            target = pane_id
        elif tab_position is not None:
            target = f"={session}:{tab_position}"
        else:
            target = f"={session}"

        try:
            if target != f"={session}":
                select_pane(target)
            self._focus(session, target)
        except TmuxError as e:
            logger.warning(f"Switch to {target} failed: {e}")
            return
        logger.info(f"Focused {session} ({target})")

    def terminate(self, session: str) -> None:
        try:
            killed = kill_session(session)
        except TmuxError as e:
            logger.warning(f"Kill {session} failed: {e}")
            return
        if not killed:
            logger.warning(f"Session {session} was not killed")

    def switch_or_create(self, session: str, working_directory: str) -> None:
        """Switch to session, creating it rooted at working_directory if absent."""
        try:
            if not session_exists(session):
                new_session(session, working_directory)
                logger.info(f"Created session {session} in {working_directory}")
            self._focus(session, f"={session}")
        except TmuxError as e:
            logger.warning(f"Switch or create {session} failed: {e}")

    def run_command(self, argv: list[str]) -> bytes:
        return run_discovery(argv)

    def attach_pending(self) -> bool:
        """Attach the terminal to the remembered target, if any."""
        if self.attach_target is None:
            return False
        try:
            return attach_session(self.attach_target)
        except TmuxError as e:
            logger.warning(f"Attach to {self.attach_target} failed: {e}")
            return False
