"""Pure tmux operations used by the tmux host.

PUBLIC API:
  - run_tmux: Run tmux command and return result
  - inside_tmux: Check if running inside a tmux client
  - get_current_pane: Pane ID we run in
  - session_exists: Check if session exists
  - new_session: Create detached session
  - kill_session: Kill tmux session
  - switch_client: Switch current client to a target
  - select_pane: Activate a window and pane
  - attach_session: Attach terminal to a target
  - list_sessions: List sessions
  - load_snapshot: Session -> window -> pane snapshot
"""

# Core tmux operations
from .core import run_tmux, inside_tmux, get_current_pane

from .session import (
    session_exists,
    new_session,
    kill_session,
    switch_client,
    select_pane,
    attach_session,
    list_sessions,
)

from .snapshot import load_snapshot

__all__ = [
    "run_tmux",
    "inside_tmux",
    "get_current_pane",
    "session_exists",
    "new_session",
    "kill_session",
    "switch_client",
    "select_pane",
    "attach_session",
    "list_sessions",
    "load_snapshot",
]
