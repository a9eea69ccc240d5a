"""Shared index helpers for the engines."""

from typing import Optional, Sequence, TypeVar

from ..types import Match

T = TypeVar("T")


def clamp_index(index: int, length: int) -> int:
    """Clamp index into [0, length), 0 for an empty view."""
    if length <= 0:
        return 0
    return max(0, min(index, length - 1))


def lookup(view: Sequence[Match[T]], index: int) -> Optional[T]:
    """Item at index of a filtered view, None when out of range."""
    if 0 <= index < len(view):
        return view[index].item
    return None
