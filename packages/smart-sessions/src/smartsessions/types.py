"""Type definitions for smart-sessions.

Sessions hold tabs, tabs own panes. Every record is an immutable snapshot of
host state; a new snapshot replaces the previous one wholesale.
"""

from dataclasses import dataclass, field
from typing import Generic, Literal, Mapping, NamedTuple, TypeAlias, TypeVar

# Tab position is the tmux window index, pane id the native "%42" form
TabPosition: TypeAlias = int
PaneID: TypeAlias = str

RowKind: TypeAlias = Literal["session", "tab", "pane", "candidate"]

T = TypeVar("T")


@dataclass(frozen=True)
class PaneEntity:
    """A pane inside a tab."""

    title: str
    pane_id: PaneID
    index: int = 0
    is_selectable: bool = True


@dataclass(frozen=True)
class TabEntity:
    """A tab (tmux window) inside a session."""

    name: str
    position: TabPosition


@dataclass(frozen=True)
class SessionEntity:
    """A session with its tabs and the panes each tab owns.

    Attributes:
        name: Session name, unique per host.
        tabs: Tabs in display order.
        panes: Tab position -> panes owned by that tab.
        connected_clients: Number of attached clients.
    """

    name: str
    tabs: tuple[TabEntity, ...] = ()
    panes: Mapping[TabPosition, tuple[PaneEntity, ...]] = field(default_factory=dict)
    connected_clients: int = 0

    def panes_for(self, position: TabPosition) -> tuple[PaneEntity, ...]:
        """Panes owned by the tab at position, empty when unknown."""
        return tuple(self.panes.get(position, ()))

    def selectable_panes_for(self, position: TabPosition) -> tuple[PaneEntity, ...]:
        return tuple(p for p in self.panes_for(position) if p.is_selectable)

    @property
    def pane_count(self) -> int:
        return sum(len(self.selectable_panes_for(tab.position)) for tab in self.tabs)

    @property
    def summary(self) -> str:
        """Label used for session rows."""
        return f"{self.name} ({len(self.tabs)} tabs, {self.pane_count} panes) [{self.connected_clients} connected users]"


class Match(NamedTuple, Generic[T]):
    """One entry of a filtered view with its highlighted label positions."""

    item: T
    indices: frozenset[int] = frozenset()


@dataclass(frozen=True)
class DisplayRow:
    """Abstract row handed to the presentation layer.

    Attributes:
        label: Text to paint.
        highlights: 0-based character offsets in label to emphasise.
        indent: Nesting level (0 session, 1 tab, 2 pane).
        selected: Whether the row carries the selection marker.
        kind: What the row represents, for styling.
    """

    label: str
    highlights: frozenset[int] = frozenset()
    indent: int = 0
    selected: bool = False
    kind: RowKind = "session"
