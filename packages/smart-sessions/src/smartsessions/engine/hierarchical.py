"""Cascading session -> tab -> pane filter with per-level selection.

PUBLIC API:
  - SessionList: Filter, navigate and act on the session hierarchy
"""

import logging
from typing import Optional, Sequence

from ..fuzzy import fuzzy_filter
from ..host import Host
from ..query import QueryTokens, split_query
from ..types import DisplayRow, Match, PaneEntity, SessionEntity, TabEntity
from ._util import clamp_index, lookup

__all__ = ["SessionList"]

logger = logging.getLogger(__name__)


class SessionList:
    """Filtered, navigable view over a session snapshot.

    One query string drives all three levels: "work edi ma" filters sessions by
    "work", the selected session's tabs by "edi" and the selected tab's panes by
    "ma". Typing a space expands the level above it.

    Selection indices always point into the filtered views, never into the raw
    snapshot. Every operation returns True when the display needs a redraw.

    Args:
        host: Collaborator that executes focus and kill actions.
    """

    def __init__(self, host: Host):
        self.host = host
        self.sessions: list[SessionEntity] = []
        self.filtered_sessions: list[Match[SessionEntity]] = []
        self.filtered_tabs: list[Match[TabEntity]] = []
        self.filtered_panes: list[Match[PaneEntity]] = []
        self.selected_session_index = 0
        self.selected_tab_index = 0
        self.selected_pane_index = 0
        self.search_query = ""
        self.tokens = QueryTokens("")
        self.session_expanded = False
        self.tab_expanded = False

    # Lookups

    def selected_session(self) -> Optional[SessionEntity]:
        return lookup(self.filtered_sessions, self.selected_session_index)

    def selected_tab(self) -> Optional[TabEntity]:
        return lookup(self.filtered_tabs, self.selected_tab_index)

    def selected_pane(self) -> Optional[PaneEntity]:
        return lookup(self.filtered_panes, self.selected_pane_index)

    # Data and query updates

    def update_snapshot(self, sessions: Sequence[SessionEntity]) -> bool:
        """Replace the snapshot and re-filter with the current query."""
        self.sessions = list(sessions)
        logger.debug(f"Snapshot updated: {len(self.sessions)} sessions")
        return self.filter(self.search_query)

    def filter(self, query: str) -> bool:
        """Recompute every level for query.

        A non-empty query decides expansion: a space expands sessions, a second
        space expands tabs as well. Clearing the query collapses once; an empty
        query that stays empty leaves expansion to expand() and shrink().

        Args:
            query: Raw search string.

        Returns:
            True, the view always needs a redraw.
        """
        previous = self.search_query
        self.search_query = query
        self.tokens = split_query(query)

        if query:
            self.session_expanded = self.tokens.levels > 1
            self.tab_expanded = self.tokens.levels > 2
        elif previous:
            self.session_expanded = False
            self.tab_expanded = False

        if not self.sessions:
            self.filtered_sessions = []
            self.filtered_tabs = []
            self.filtered_panes = []
            return True

        if self.tokens.session:
            self.filtered_sessions = fuzzy_filter(self.tokens.session, self.sessions, key=lambda s: s.name)
            self.selected_session_index = 0
            logger.debug(f"Sessions matching {self.tokens.session!r}: {[m.item.name for m in self.filtered_sessions]}")
        else:
            self.filtered_sessions = [Match(s) for s in self.sessions]
            self.selected_session_index = clamp_index(self.selected_session_index, len(self.filtered_sessions))

        self._filter_tabs()
        return True

    def _filter_tabs(self) -> None:
        """Recompute tabs of the selected session, then its panes."""
        session = self.selected_session()
        if session is None:
            self.filtered_tabs = []
            self.filtered_panes = []
            return

        if self.tokens.tab:
            self.filtered_tabs = fuzzy_filter(self.tokens.tab, session.tabs, key=lambda t: t.name)
            self.selected_tab_index = 0
        else:
            self.filtered_tabs = [Match(t) for t in session.tabs]
            self.selected_tab_index = clamp_index(self.selected_tab_index, len(self.filtered_tabs))

        self._filter_panes()

    def _filter_panes(self) -> None:
        """Recompute selectable panes of the selected tab."""
        session = self.selected_session()
        tab = self.selected_tab()
        if session is None or tab is None:
            self.filtered_panes = []
            return

        panes = session.selectable_panes_for(tab.position)
        if self.tokens.pane:
            self.filtered_panes = fuzzy_filter(self.tokens.pane, panes, key=lambda p: p.title)
            self.selected_pane_index = 0
        else:
            self.filtered_panes = [Match(p) for p in panes]
            self.selected_pane_index = clamp_index(self.selected_pane_index, len(self.filtered_panes))

    # Navigation

    def select_next(self) -> bool:
        return self._move(1)

    def select_prev(self) -> bool:
        return self._move(-1)

    def _move(self, step: int) -> bool:
        """Move the deepest expanded level's selection, wrapping around."""
        if not self.sessions:
            return False

        if self.tab_expanded:
            if not self.filtered_panes:
                return False
            self.selected_pane_index = (self.selected_pane_index + step) % len(self.filtered_panes)
            return True

        if self.session_expanded:
            if not self.filtered_tabs:
                return False
            self.selected_tab_index = (self.selected_tab_index + step) % len(self.filtered_tabs)
            self.selected_pane_index = 0
            self._filter_panes()
            return True

        if not self.filtered_sessions:
            return False
        self.selected_session_index = (self.selected_session_index + step) % len(self.filtered_sessions)
        self.selected_tab_index = 0
        self.selected_pane_index = 0
        self._filter_tabs()
        return True

    def expand(self) -> bool:
        """Enter the next level down, selecting its first entry."""
        if not self.session_expanded:
            self.session_expanded = True
            self.selected_tab_index = 0
            self.selected_pane_index = 0
            self._filter_panes()
        else:
            self.tab_expanded = True
            self.selected_pane_index = 0
        return True

    def shrink(self) -> bool:
        """Leave the deepest expanded level, keeping indices."""
        if self.tab_expanded:
            self.tab_expanded = False
            return True

        self.session_expanded = False
        return True

    # Actions

    def attach_selected(self) -> bool:
        """Focus the selected session, tab and pane.

        Returns:
            False when any level has nothing selected.
        """
        session = self.selected_session()
        tab = self.selected_tab()
        pane = self.selected_pane()
        if session is None or tab is None or pane is None:
            logger.debug("Attach skipped: selection does not resolve")
            return False

        logger.debug(f"Attach session {session.name} tab {tab.name} pane {pane.title}")
        self.host.switch_focus(session.name, tab.position, pane.pane_id)
        return True

    def delete_selected(self) -> bool:
        """Terminate the selected session."""
        session = self.selected_session()
        if session is None:
            return False

        logger.debug(f"Delete session {session.name}")
        self.host.terminate(session.name)
        return True

    # Rendering

    def produce_display_list(self) -> list[DisplayRow]:
        """Flatten filtered views into indented rows.

        Tabs are listed under the selected session only when it is expanded,
        panes under the selected tab only when it is expanded.
        """
        rows: list[DisplayRow] = []

        for index, match in enumerate(self.filtered_sessions):
            session = match.item
            is_selected = index == self.selected_session_index
            rows.append(
                DisplayRow(
                    label=session.summary,
                    highlights=match.indices,
                    indent=0,
                    selected=is_selected and not self.session_expanded,
                    kind="session",
                )
            )

            if not (is_selected and self.session_expanded):
                continue

            for tab_index, tab_match in enumerate(self.filtered_tabs):
                tab = tab_match.item
                tab_selected = tab_index == self.selected_tab_index
                pane_count = len(session.selectable_panes_for(tab.position))
                rows.append(
                    DisplayRow(
                        label=f"{tab.name} ({pane_count} panes)",
                        highlights=tab_match.indices,
                        indent=1,
                        selected=tab_selected and not self.tab_expanded,
                        kind="tab",
                    )
                )

                if not (tab_selected and self.tab_expanded):
                    continue

                for pane_index, pane_match in enumerate(self.filtered_panes):
                    rows.append(
                        DisplayRow(
                            label=pane_match.item.title,
                            highlights=pane_match.indices,
                            indent=2,
                            selected=pane_index == self.selected_pane_index,
                            kind="pane",
                        )
                    )

        return rows
