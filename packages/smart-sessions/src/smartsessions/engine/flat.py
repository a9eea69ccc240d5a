"""Flat candidate filter for creating sessions from directories.

PUBLIC API:
  - CandidateList: Filter, window and act on a flat list of path candidates
  - session_name: Derive a session name from a candidate path
"""

import logging
from typing import Optional, Sequence

from ..cache import CandidateCache
from ..discovery import decode_candidates
from ..errors import CacheError, DiscoveryOutputError
from ..fuzzy import fuzzy_filter
from ..host import Host
from ..types import DisplayRow, Match, SessionEntity
from ._util import lookup

__all__ = ["CandidateList", "session_name"]

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "/"


def _split_candidate(candidate: str) -> tuple[str, str, int]:
    """Return (path without trailing separator, session name, name offset).

    The offset is where the last path segment starts inside candidate, so
    match positions on the candidate can be shifted onto the name.
    """
    path = candidate.removesuffix(PATH_SEPARATOR)
    segment = path.rsplit(PATH_SEPARATOR, 1)[-1]
    # tmux rejects "." in session names; "_" keeps the length for highlighting
    return path, segment.replace(".", "_"), len(path) - len(segment)


def session_name(candidate: str) -> str:
    """Session name for candidate: last path segment with "." replaced by "_"."""
    return _split_candidate(candidate)[1]


class CandidateList:
    """Filtered, windowed list of directories that can become sessions.

    Unlike SessionList, navigation does not wrap: the list grows downward up to
    the last rendered row.

    Args:
        host: Collaborator that creates, focuses and kills sessions.
        cache: Where the last discovered list is kept between runs.
    """

    def __init__(self, host: Host, cache: Optional[CandidateCache] = None):
        self.host = host
        self.cache = cache
        self.candidates: list[str] = []
        self.running_sessions: list[SessionEntity] = []
        self.filtered: list[Match[str]] = []
        self.selected_index = 0
        self.search_query = ""
        self.max_items: Optional[int] = None

    def selected_candidate(self) -> Optional[str]:
        return lookup(self.filtered, self.selected_index)

    def has_list(self) -> bool:
        """True once both candidates and running sessions are known."""
        return bool(self.candidates) and bool(self.running_sessions)

    # Data updates

    def load_cached_list(self) -> bool:
        """Populate candidates from the cache, if it can be read."""
        if self.cache is None:
            return False

        try:
            candidates = self.cache.read()
        except CacheError as e:
            logger.debug(f"No cached candidates: {e}")
            return False

        self.candidates = candidates
        logger.debug(f"Loaded {len(candidates)} cached candidates")
        return self.filter("")

    def save_cache(self) -> None:
        if self.cache is None:
            return
        try:
            self.cache.write(self.candidates)
        except CacheError as e:
            logger.warning(f"Cache not updated: {e}")

    def update_list(self, candidates: Sequence[str]) -> bool:
        """Replace candidates, re-filter with the last query and rewrite the cache."""
        self.candidates = list(candidates)
        self.filter(self.search_query)
        self.save_cache()
        return True

    def apply_discovery_output(self, raw: bytes) -> bool:
        """Apply raw discovery output; undecodable output is discarded."""
        try:
            candidates = decode_candidates(raw)
        except DiscoveryOutputError as e:
            logger.warning(f"Discarding discovery result: {e}")
            return False

        return self.update_list(candidates)

    def update_running_sessions(self, sessions: Sequence[SessionEntity]) -> bool:
        """Replace the sessions used to annotate already running candidates."""
        self.running_sessions = list(sessions)
        return True

    def filter(self, query: str) -> bool:
        """Filter candidates by query, best match first.

        Args:
            query: Search string; empty keeps the original order.
        """
        self.search_query = query

        if query:
            self.filtered = fuzzy_filter(query, self.candidates, key=lambda c: c)
        else:
            self.filtered = [Match(c) for c in self.candidates]

        if self.selected_index >= len(self.filtered):
            self.selected_index = 0
        return True

    # Navigation

    def select_next(self) -> bool:
        """Move down, stopping at the last item or the last rendered row."""
        if not self.filtered:
            return False

        upper = len(self.filtered) - 1
        if self.max_items is not None:
            upper = min(upper, self.max_items)

        logger.debug(f"select_next {self.selected_index} of {len(self.filtered)} (cap {self.max_items})")
        self.selected_index = min(self.selected_index + 1, upper)
        return True

    def select_prev(self) -> bool:
        if not self.filtered:
            return False

        self.selected_index = max(0, self.selected_index - 1)
        return True

    def windowed_view(self, height: int) -> list[Match[str]]:
        """Leading entries for a window of the given height.

        Returns height + 1 entries so that the navigation cap (an index of at
        most height) always lands on a rendered row. Records height as that cap.
        """
        height = max(0, height)
        self.max_items = height
        return self.filtered[: height + 1]

    # Actions

    def create_or_attach(self) -> bool:
        """Switch to the selected candidate's session, creating it if needed."""
        candidate = self.selected_candidate()
        if candidate is None:
            return False

        path, name, _ = _split_candidate(candidate)
        if not name:
            logger.debug(f"No session name derivable from {candidate!r}")
            return False

        self.host.switch_or_create(name, path)
        return True

    def delete_selected(self) -> bool:
        """Kill the selected candidate's session if it is running."""
        candidate = self.selected_candidate()
        if candidate is None:
            return False

        name = session_name(candidate)
        logger.debug(f"Delete {name}")
        if not any(s.name == name for s in self.running_sessions):
            return False

        self.host.terminate(name)
        return True

    # Rendering

    def produce_display_list(self, height: int) -> list[DisplayRow]:
        """Rows for the visible window.

        Candidates already running as a session show that session's summary.
        """
        running = {s.name: s for s in self.running_sessions}
        selected = min(self.selected_index, height)

        rows: list[DisplayRow] = []
        for index, match in enumerate(self.windowed_view(height)):
            _, name, offset = _split_candidate(match.item)
            highlights = frozenset(i - offset for i in match.indices if offset <= i < offset + len(name))

            session = running.get(name)
            label = session.summary if session else name

            rows.append(
                DisplayRow(
                    label=label,
                    highlights=highlights,
                    indent=0,
                    selected=index == selected,
                    kind="candidate",
                )
            )

        return rows
