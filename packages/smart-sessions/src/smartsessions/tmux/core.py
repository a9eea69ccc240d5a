"""Core tmux operations - shared utilities for all tmux modules.

PUBLIC API:
  - run_tmux: Execute tmux command and return result
  - inside_tmux: Check whether we run inside a tmux client
  - get_current_pane: Get the pane ID we are running in
"""

import os
import subprocess
from typing import Optional, Tuple, List

from .exceptions import TmuxUnavailableError


def run_tmux(args: List[str]) -> Tuple[int, str, str]:
    """Run tmux command, return (returncode, stdout, stderr).

    Raises:
        TmuxUnavailableError: If the tmux binary cannot be executed.
    """
    cmd = ["tmux"] + args
    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except OSError as e:
        raise TmuxUnavailableError(f"Cannot run tmux: {e}") from e
    return result.returncode, result.stdout, result.stderr


def inside_tmux() -> bool:
    """Check whether the process runs inside a tmux client."""
    return bool(os.environ.get("TMUX"))


def get_current_pane() -> Optional[str]:
    """Get current tmux pane ID if inside tmux."""
    if not inside_tmux():
        return None

    # TMUX_PANE is set per pane and survives nested shells
    pane = os.environ.get("TMUX_PANE")
    if pane:
        return pane

    code, stdout, _ = run_tmux(["display", "-p", "#{pane_id}"])
    if code == 0:
        return stdout.strip()
    return None
