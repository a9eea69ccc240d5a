"""Exceptions for smart-sessions.

None of these reach the user: the engines catch them, log, and leave the list
unchanged.

PUBLIC API:
  - SmartSessionsError: Base exception
  - CacheError: Candidate cache could not be read or written
  - DiscoveryOutputError: Discovery command produced undecodable output
"""

__all__ = ["SmartSessionsError", "CacheError", "DiscoveryOutputError"]


class SmartSessionsError(Exception):
    """Base exception for smart-sessions."""

    pass


class CacheError(SmartSessionsError):
    """Raised when the candidate cache cannot be read or written."""

    pass


class DiscoveryOutputError(SmartSessionsError):
    """Raised when discovery output is not valid UTF-8."""

    pass
