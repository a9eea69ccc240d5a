"""Fuzzy matching of queries against labels.

PUBLIC API:
  - FuzzyResult: Score plus matched character positions
  - fuzzy_match: Score one label against a query
  - fuzzy_filter: Match, drop non-positive scores and sort a collection
"""

from typing import Callable, Iterable, NamedTuple, TypeVar

from .types import Match

T = TypeVar("T")

__all__ = ["FuzzyResult", "fuzzy_match", "fuzzy_filter"]

WORD_BOUNDARIES = "/_- .:"


class FuzzyResult(NamedTuple):
    score: int
    indices: frozenset[int]


def fuzzy_match(query: str, label: str) -> FuzzyResult | None:
    """Score label against query as a case-insensitive subsequence.

    Contiguous runs and hits at word boundaries score up, gaps and long labels
    score down. A scattered match can end up at zero or below.

    Args:
        query: Text typed by the user.
        label: Candidate label.

    Returns:
        FuzzyResult, or None when a query character is missing from label.
    """
    if not query:
        return FuzzyResult(0, frozenset())

    query_folded = query.casefold()
    label_folded = label.casefold()

    score = 0
    prev_idx = -1
    run = 0
    indices = []
    for needle in query_folded:
        idx = label_folded.find(needle, prev_idx + 1)
        if idx < 0:
            return None
        if idx == prev_idx + 1:
            run += 1
            score += 20 + min(16, run * 4)
        else:
            gap = idx - prev_idx - 1
            run = 0
            score -= min(40, gap * 2)
        if idx == 0 or label_folded[idx - 1] in WORD_BOUNDARIES:
            score += 35
        indices.append(idx)
        prev_idx = idx

    score -= len(label_folded) // 5
    return FuzzyResult(score, frozenset(indices))


def fuzzy_filter(query: str, items: Iterable[T], key: Callable[[T], str]) -> list[Match[T]]:
    """Filter items by fuzzy score, best first.

    Items with no match or a non-positive score are dropped. Equal scores keep
    their input order.

    Args:
        query: Non-empty query.
        items: Candidates.
        key: Returns the label to match for an item.
    """
    scored: list[tuple[int, Match[T]]] = []
    for item in items:
        result = fuzzy_match(query, key(item))
        if result is None or result.score <= 0:
            continue
        scored.append((result.score, Match(item, result.indices)))

    scored.sort(key=lambda entry: -entry[0])
    return [match for _, match in scored]
