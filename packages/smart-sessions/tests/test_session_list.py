import pytest

from smartsessions.engine import SessionList
from smartsessions.fuzzy import fuzzy_match

from conftest import make_session


@pytest.fixture
def engine(host, snapshot):
    engine = SessionList(host)
    engine.update_snapshot(snapshot)
    return engine


def names(view):
    return [m.item.name for m in view]


def test_empty_query_is_identity_without_highlights(engine, snapshot):
    assert [m.item for m in engine.filtered_sessions] == snapshot
    assert all(m.indices == frozenset() for m in engine.filtered_sessions)
    assert names(engine.filtered_tabs) == ["xterm", "ytab"]


def test_single_char_query_drops_weak_matches(engine):
    engine.filter("a")

    assert names(engine.filtered_sessions) == ["alpha"]
    assert engine.filtered_sessions[0].indices == frozenset({0})
    assert engine.session_expanded is False


def test_filtered_view_has_positive_non_increasing_scores(host):
    engine = SessionList(host)
    engine.update_snapshot([make_session(n, {}) for n in ["web", "backend-web", "w_e_b", "api", "webapp"]])

    engine.filter("web")

    scores = [fuzzy_match("web", m.item.name).score for m in engine.filtered_sessions]
    assert scores
    assert all(score > 0 for score in scores)
    assert scores == sorted(scores, reverse=True)
    assert "api" not in names(engine.filtered_sessions)


def test_space_expands_sessions_and_filters_tabs(engine):
    engine.filter("al x")

    assert names(engine.filtered_sessions) == ["alpha"]
    assert engine.session_expanded is True
    assert names(engine.filtered_tabs) == ["xterm"]
    assert engine.tab_expanded is False
    assert [m.item.title for m in engine.filtered_panes] == ["shell", "vim"]


def test_three_levels_expand_tabs_and_filter_panes(engine, host):
    engine.filter("gam co ed")

    assert names(engine.filtered_sessions) == ["gamma"]
    assert names(engine.filtered_tabs) == ["code"]
    assert [m.item.title for m in engine.filtered_panes] == ["editor"]
    assert engine.session_expanded and engine.tab_expanded

    assert engine.attach_selected() is True
    assert host.calls == [("switch_focus", "gamma", 0, "%gamma1")]


def test_clearing_query_collapses_once(engine):
    engine.filter("al x")
    engine.filter("")

    assert engine.session_expanded is False
    assert engine.tab_expanded is False

    engine.expand()
    engine.filter("")

    assert engine.session_expanded is True


def test_single_level_query_forces_collapse(engine):
    engine.expand()
    engine.filter("b")

    assert engine.session_expanded is False
    assert names(engine.filtered_sessions) == ["beta"]


def test_non_empty_query_resets_session_index(engine):
    engine.select_next()
    engine.select_next()
    assert engine.selected_session_index == 2

    engine.filter("g")

    assert engine.selected_session_index == 0


def test_select_next_wraps_around(engine):
    for _ in range(len(engine.filtered_sessions)):
        engine.select_next()

    assert engine.selected_session_index == 0

    engine.select_prev()
    assert engine.selected_session_index == 2


def test_session_navigation_refilters_tabs(engine):
    engine.select_next()

    assert engine.selected_session().name == "beta"
    assert names(engine.filtered_tabs) == ["main"]
    assert [m.item.title for m in engine.filtered_panes] == ["build"]


def test_tab_navigation_wraps_and_refilters_panes(engine):
    engine.expand()
    engine.select_next()

    assert engine.selected_tab().name == "ytab"
    assert [m.item.title for m in engine.filtered_panes] == ["logs"]

    engine.select_next()
    assert engine.selected_tab().name == "xterm"


def test_pane_navigation_skips_unselectable_panes(engine):
    engine.select_next()
    engine.select_next()
    engine.expand()
    engine.expand()

    assert [m.item.title for m in engine.filtered_panes] == ["editor"]

    engine.select_next()
    assert engine.selected_pane_index == 0


def test_expand_resets_entered_level_and_shrink_keeps_indices(engine):
    engine.expand()
    engine.select_next()
    assert engine.selected_tab_index == 1

    engine.shrink()
    assert engine.session_expanded is False
    assert engine.selected_tab_index == 1

    engine.expand()
    assert engine.selected_tab_index == 0
    engine.shrink()
    engine.expand()
    assert engine.selected_tab_index == 0


def test_shrink_collapses_tab_before_session(engine):
    engine.expand()
    engine.expand()

    engine.shrink()
    assert engine.session_expanded is True
    assert engine.tab_expanded is False

    engine.shrink()
    assert engine.session_expanded is False


def test_attach_resolves_filtered_coordinates(engine, host):
    engine.expand()
    engine.select_next()
    engine.expand()

    assert engine.attach_selected() is True
    assert host.calls == [("switch_focus", "alpha", 1, "%alpha3")]


def test_attach_and_delete_are_noops_without_matches(engine, host):
    engine.filter("zzz")

    assert engine.filtered_sessions == []
    assert engine.select_next() is False
    assert engine.attach_selected() is False
    assert engine.delete_selected() is False
    assert engine.produce_display_list() == []
    assert host.calls == []


def test_delete_terminates_selected_session(engine, host):
    engine.select_next()

    assert engine.delete_selected() is True
    assert host.calls == [("terminate", "beta")]


def test_update_snapshot_keeps_query(engine):
    engine.filter("be")

    engine.update_snapshot([make_session("beta", {}), make_session("bert", {}), make_session("zed", {})])

    assert engine.search_query == "be"
    assert names(engine.filtered_sessions) == ["beta", "bert"]


def test_shrunk_snapshot_clamps_selection(engine):
    engine.select_prev()
    assert engine.selected_session_index == 2

    engine.update_snapshot([make_session("solo", {"one": ["p"]})])

    assert engine.selected_session_index == 0
    assert engine.selected_session().name == "solo"


def test_empty_snapshot_clears_views(engine, host):
    engine.update_snapshot([])

    assert engine.filtered_sessions == []
    assert engine.filtered_tabs == []
    assert engine.filtered_panes == []
    assert engine.select_next() is False
    assert engine.attach_selected() is False


def test_display_list_collapsed(engine):
    rows = engine.produce_display_list()

    assert [r.label for r in rows] == [
        "alpha (2 tabs, 3 panes) [1 connected users]",
        "beta (1 tabs, 1 panes) [0 connected users]",
        "gamma (2 tabs, 2 panes) [0 connected users]",
    ]
    assert [r.selected for r in rows] == [True, False, False]
    assert all(r.indent == 0 and r.kind == "session" for r in rows)


def test_display_list_nests_expanded_levels(engine):
    engine.filter("al x")
    engine.expand()

    rows = engine.produce_display_list()

    assert [(r.indent, r.kind) for r in rows] == [(0, "session"), (1, "tab"), (2, "pane"), (2, "pane")]
    assert rows[1].label == "xterm (2 panes)"
    assert rows[1].highlights == frozenset({0})
    assert [r.label for r in rows[2:]] == ["shell", "vim"]
    assert [r.selected for r in rows] == [False, False, True, False]


def test_display_list_marks_exactly_one_selected_row(engine):
    engine.expand()
    engine.select_next()

    rows = engine.produce_display_list()

    selected = [r for r in rows if r.selected]
    assert len(selected) == 1
    assert selected[0].label == "ytab (1 panes)"


def test_session_highlights_follow_match(engine):
    engine.filter("al")

    rows = engine.produce_display_list()

    assert rows[0].highlights == frozenset({0, 1})
