"""Session management for tmux.

PUBLIC API:
  - SessionInfo: Session information named tuple
  - session_exists: Check if session exists
  - kill_session: Kill a tmux session
  - new_session: Create a detached session rooted at a directory
  - switch_client: Point the current client at a target
  - attach_session: Attach the terminal to a target
  - list_sessions: Get all tmux sessions
"""

from typing import Optional, NamedTuple, List

from .core import run_tmux
from .exceptions import SessionNotFoundError, TmuxError

SEPARATOR = "\t"


class SessionInfo(NamedTuple):
    """Session information named tuple.

    Attributes:
        name: Session name.
        created: Creation timestamp.
        attached: Number of attached clients.
    """

    name: str
    created: str
    attached: int

    @classmethod
    def from_format_line(cls, line: str) -> "SessionInfo":
        """Parse from tmux format string."""
        parts = line.split(SEPARATOR)
        try:
            attached = int(parts[2]) if len(parts) > 2 else 0
        except ValueError:
            attached = 0
        return cls(name=parts[0], created=parts[1] if len(parts) > 1 else "", attached=attached)


def session_exists(name: str) -> bool:
    """Check if session exists.

    Args:
        name: Session name to check.

    Returns:
        True if session exists, False otherwise.
    """
    # "=" forces an exact match instead of tmux's prefix matching
    code, _, _ = run_tmux(["has-session", "-t", f"={name}"])
    return code == 0


def new_session(name: str, start_dir: Optional[str] = None) -> str:
    """Create a new detached tmux session.

    Args:
        name: Session name.
        start_dir: Starting directory for the session.

    Returns:
        Pane ID of the session's first pane.

    Raises:
        TmuxError: If tmux refuses to create the session.
    """
    args = ["new-session", "-d", "-s", name, "-P", "-F", "#{pane_id}"]
    if start_dir:
        args.extend(["-c", start_dir])
    code, stdout, stderr = run_tmux(args)
    if code != 0:
        raise TmuxError(f"Failed to create session {name}: {stderr.strip()}")
    return stdout.strip()


def switch_client(target: str) -> None:
    """Switch the current client to target (session, session:window or pane).

    Raises:
        SessionNotFoundError: If tmux cannot resolve target.
    """
    code, _, stderr = run_tmux(["switch-client", "-t", target])
    if code != 0:
        raise SessionNotFoundError(f"Cannot switch to {target}: {stderr.strip()}")


def select_pane(target: str) -> bool:
    """Make target the active window and pane of its session."""
    code, _, _ = run_tmux(["select-window", "-t", target])
    if code != 0:
        return False
    code, _, _ = run_tmux(["select-pane", "-t", target])
    return code == 0


def attach_session(target: str) -> bool:
    """Attach the terminal to an existing tmux target.

    Args:
        target: Session name or pane target.

    Returns:
        True if attached successfully.
    """
    code, _, _ = run_tmux(["attach-session", "-t", target])
    return code == 0


def kill_session(name: str) -> bool:
    """Kill a tmux session.

    Args:
        name: Session name to kill.

    Returns:
        True if session was killed successfully, False otherwise.
    """
    code, _, _ = run_tmux(["kill-session", "-t", f"={name}"])
    return code == 0


def list_sessions() -> List[SessionInfo]:
    """Get all tmux sessions.

    Returns:
        List of SessionInfo objects for all active sessions.
    """
    code, out, _ = run_tmux(
        [
            "list-sessions",
            "-F",
            SEPARATOR.join(["#{session_name}", "#{session_created}", "#{session_attached}"]),
        ]
    )

    if code != 0 or not out.strip():
        return []

    sessions = []
    for line in out.strip().split("\n"):
        info = SessionInfo.from_format_line(line)
        sessions.append(info)

    return sessions
