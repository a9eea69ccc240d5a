"""Shared fixtures: a recording host and a small session snapshot."""

import pytest

from smartsessions.types import PaneEntity, SessionEntity, TabEntity


class RecordingHost:
    """Host that records every action instead of touching tmux."""

    def __init__(self, output: bytes = b""):
        self.calls: list[tuple] = []
        self.output = output

    def switch_focus(self, session, tab_position=None, pane_id=None):
        self.calls.append(("switch_focus", session, tab_position, pane_id))

    def terminate(self, session):
        self.calls.append(("terminate", session))

    def switch_or_create(self, session, working_directory):
        self.calls.append(("switch_or_create", session, working_directory))

    def run_command(self, argv):
        self.calls.append(("run_command", list(argv)))
        return self.output


def make_session(name, tabs, clients=0):
    """Build a session from {tab_name: [pane titles]}; titles starting with "!" are not selectable."""
    tab_entities = []
    panes = {}
    pane_counter = 0
    for position, (tab_name, titles) in enumerate(tabs.items()):
        tab_entities.append(TabEntity(name=tab_name, position=position))
        owned = []
        for index, title in enumerate(titles):
            pane_counter += 1
            owned.append(
                PaneEntity(
                    title=title.lstrip("!"),
                    pane_id=f"%{name}{pane_counter}",
                    index=index,
                    is_selectable=not title.startswith("!"),
                )
            )
        panes[position] = tuple(owned)
    return SessionEntity(name=name, tabs=tuple(tab_entities), panes=panes, connected_clients=clients)


@pytest.fixture
def host():
    return RecordingHost()


@pytest.fixture
def snapshot():
    return [
        make_session("alpha", {"xterm": ["shell", "vim"], "ytab": ["logs"]}, clients=1),
        make_session("beta", {"main": ["build"]}),
        make_session("gamma", {"code": ["editor", "!picker"], "docs": ["server"]}),
    ]
