"""Snapshot of the tmux session -> window -> pane hierarchy.

PUBLIC API:
  - WindowInfo: Window record from list-windows
  - PaneInfo: Pane record from list-panes
  - list_windows: All windows of all sessions
  - list_panes: All panes of all sessions
  - build_snapshot: Assemble SessionEntity records from raw listings
  - load_snapshot: Query tmux and return the current snapshot
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from ..types import PaneEntity, SessionEntity, TabEntity
from .core import get_current_pane, run_tmux
from .session import SEPARATOR, SessionInfo, list_sessions

logger = logging.getLogger(__name__)


@dataclass
class WindowInfo:
    """Window as reported by tmux."""

    session: str
    window_index: int
    window_name: str


@dataclass
class PaneInfo:
    """Pane as reported by tmux."""

    pane_id: str  # %42
    session: str
    window_index: int
    pane_index: int
    pane_title: str


def _format(fields: list[str]) -> str:
    """Tab-separated format; the free-text field goes last."""
    return SEPARATOR.join(f"#{{{field}}}" for field in fields)


def _rows(stdout: str, field_count: int) -> List[list[str]]:
    """Split output lines into exactly field_count fields.

    Splitting stops before the last field, so a tab inside a title survives.
    """
    rows = []
    for line in stdout.split("\n"):
        if not line:
            continue
        parts = line.split(SEPARATOR, field_count - 1)
        if len(parts) != field_count:
            logger.debug(f"Skipping malformed tmux line: {line!r}")
            continue
        rows.append(parts)
    return rows


def list_windows() -> List[WindowInfo]:
    """List windows of every session."""
    fields = ["session_name", "window_index", "window_name"]
    code, stdout, _ = run_tmux(["list-windows", "-a", "-F", _format(fields)])
    if code != 0:
        return []

    windows = []
    for session, index, name in _rows(stdout, len(fields)):
        try:
            window_idx = int(index)
        except ValueError:
            continue
        windows.append(WindowInfo(session=session, window_index=window_idx, window_name=name or str(window_idx)))
    return windows


def list_panes() -> List[PaneInfo]:
    """List panes of every session."""
    fields = ["pane_id", "session_name", "window_index", "pane_index", "pane_title"]
    code, stdout, _ = run_tmux(["list-panes", "-a", "-F", _format(fields)])
    if code != 0:
        return []

    panes = []
    for pane_id, session, window_index, pane_index, title in _rows(stdout, len(fields)):
        try:
            panes.append(
                PaneInfo(
                    pane_id=pane_id,
                    session=session,
                    window_index=int(window_index),
                    pane_index=int(pane_index),
                    pane_title=title,
                )
            )
        except ValueError:
            continue
    return panes


def build_snapshot(
    sessions: List[SessionInfo],
    windows: List[WindowInfo],
    panes: List[PaneInfo],
    current_pane: Optional[str] = None,
) -> list[SessionEntity]:
    """Assemble session entities from raw tmux listings.

    Session order follows sessions, tabs and panes are ordered by index. The
    pane we run in is not selectable.

    Args:
        sessions: Output of list_sessions.
        windows: Output of list_windows.
        panes: Output of list_panes.
        current_pane: Pane ID of the picker itself.
    """
    tabs_by_session: dict[str, list[TabEntity]] = {}
    for window in sorted(windows, key=lambda w: w.window_index):
        tabs_by_session.setdefault(window.session, []).append(
            TabEntity(name=window.window_name, position=window.window_index)
        )

    panes_by_session: dict[str, dict[int, list[PaneEntity]]] = {}
    for pane in sorted(panes, key=lambda p: (p.window_index, p.pane_index)):
        owned = panes_by_session.setdefault(pane.session, {}).setdefault(pane.window_index, [])
        owned.append(
            PaneEntity(
                title=pane.pane_title or pane.pane_id,
                pane_id=pane.pane_id,
                index=pane.pane_index,
                is_selectable=pane.pane_id != current_pane,
            )
        )

    snapshot = []
    for info in sessions:
        session_panes = panes_by_session.get(info.name, {})
        snapshot.append(
            SessionEntity(
                name=info.name,
                tabs=tuple(tabs_by_session.get(info.name, [])),
                panes={position: tuple(owned) for position, owned in session_panes.items()},
                connected_clients=info.attached,
            )
        )
    return snapshot


def load_snapshot() -> list[SessionEntity]:
    """Query tmux for the full session hierarchy."""
    snapshot = build_snapshot(list_sessions(), list_windows(), list_panes(), get_current_pane())
    logger.debug(f"Loaded snapshot with {len(snapshot)} sessions")
    return snapshot
