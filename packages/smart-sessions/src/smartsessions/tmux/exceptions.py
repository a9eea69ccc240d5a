"""Tmux-specific exceptions.

PUBLIC API:
  - TmuxError: Base exception for all tmux operations
  - TmuxUnavailableError: tmux binary missing or no server running
  - SessionNotFoundError: Session not found exception
"""


class TmuxError(Exception):
    """Base exception for all tmux operations."""

    pass


class TmuxUnavailableError(TmuxError):
    """Raised when tmux cannot be executed."""

    pass


class SessionNotFoundError(TmuxError):
    """Raised when a tmux session cannot be found."""

    pass
