"""Search query tokenizer.

PUBLIC API:
  - QueryTokens: Per-level sub-queries of a raw search string
  - split_query: Split a raw search string into session/tab/pane sub-queries
"""

from typing import NamedTuple

__all__ = ["QueryTokens", "split_query"]

SEPARATOR = " "


class QueryTokens(NamedTuple):
    """Sub-queries for each hierarchy level.

    Attributes:
        session: Query for session names.
        tab: Query for tab names.
        pane: Query for pane titles, may itself contain spaces.
        levels: How many levels the user typed (1-3).
    """

    session: str
    tab: str = ""
    pane: str = ""
    levels: int = 1


def split_query(query: str) -> QueryTokens:
    """Split query on its first space, then the remainder on its first space.

    No escaping: a literal space always separates levels, so "a  b" gives an
    empty tab query and "b" as pane query.

    Args:
        query: Raw search string as typed.

    Returns:
        QueryTokens with the per-level sub-queries.
    """
    session, sep, remainder = query.partition(SEPARATOR)
    if not sep:
        return QueryTokens(session)

    tab, sep, pane = remainder.partition(SEPARATOR)
    if not sep:
        return QueryTokens(session, tab, levels=2)

    return QueryTokens(session, tab, pane, levels=3)
