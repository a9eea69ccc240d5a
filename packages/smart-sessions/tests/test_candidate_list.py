import pytest

from smartsessions.cache import CandidateCache
from smartsessions.engine import CandidateList, session_name
from smartsessions.types import SessionEntity

from conftest import make_session


@pytest.fixture
def cache(tmp_path):
    return CandidateCache(tmp_path / "store")


@pytest.fixture
def engine(host, cache):
    return CandidateList(host, cache)


def items(engine):
    return [m.item for m in engine.filtered]


def test_session_name_uses_last_segment():
    assert session_name("proj/a/") == "a"
    assert session_name("src/my.app/") == "my_app"
    assert session_name("plain") == "plain"


def test_create_or_attach_derives_name_and_directory(engine, host):
    engine.update_list(["proj/a/", "proj/b/"])

    assert engine.create_or_attach() is True
    assert host.calls == [("switch_or_create", "a", "proj/a")]


def test_create_or_attach_without_candidates_is_noop(engine, host):
    assert engine.create_or_attach() is False
    assert host.calls == []


def test_missing_cache_leaves_list_empty(engine):
    assert engine.load_cached_list() is False
    assert engine.candidates == []

    engine.filter("")
    assert engine.filtered == []


def test_load_cached_list_filters_with_empty_query(tmp_path, host):
    path = tmp_path / "store"
    path.write_text("src/one/\nsrc/two/\n", encoding="utf-8")
    engine = CandidateList(host, CandidateCache(path))

    assert engine.load_cached_list() is True
    assert items(engine) == ["src/one/", "src/two/"]
    assert all(m.indices == frozenset() for m in engine.filtered)


def test_update_list_rewrites_cache_and_keeps_query(engine, cache):
    engine.filter("two")

    engine.update_list(["src/one/", "src/two/"])

    assert items(engine) == ["src/two/"]
    assert cache.read() == ["src/one/", "src/two/"]


def test_filter_sorts_by_score(engine):
    engine.update_list(["x/docs-api/", "x/api/", "x/zzz/"])

    engine.filter("api")

    assert items(engine) == ["x/api/", "x/docs-api/"]


def test_filter_resets_selection_past_new_length(engine):
    engine.update_list([f"d/p{i}/" for i in range(5)])
    engine.windowed_view(10)
    for _ in range(3):
        engine.select_next()
    assert engine.selected_index == 3

    engine.filter("p1")

    assert items(engine) == ["d/p1/"]
    assert engine.selected_index == 0


def test_select_next_stops_at_last_item(engine):
    engine.update_list(["a/", "b/", "c/"])

    for _ in range(10):
        engine.select_next()

    assert engine.selected_index == 2


def test_select_next_stops_at_window_height(engine):
    engine.update_list([f"d/p{i}/" for i in range(10)])
    engine.windowed_view(3)

    for _ in range(10):
        engine.select_next()

    assert engine.selected_index == 3


def test_select_prev_saturates_at_zero(engine):
    engine.update_list(["a/", "b/"])
    engine.select_next()

    engine.select_prev()
    engine.select_prev()

    assert engine.selected_index == 0


def test_navigation_on_empty_list_is_noop(engine):
    assert engine.select_next() is False
    assert engine.select_prev() is False


def test_windowed_view_returns_one_row_past_height(engine):
    engine.update_list([f"d/p{i}/" for i in range(10)])

    assert len(engine.windowed_view(3)) == 4
    assert engine.max_items == 3
    assert len(engine.windowed_view(20)) == 10


def test_delete_selected_only_kills_running_sessions(engine, host):
    engine.update_list(["proj/a/", "proj/b/"])

    assert engine.delete_selected() is False
    assert host.calls == []

    engine.update_running_sessions([SessionEntity("a")])
    assert engine.delete_selected() is True
    assert host.calls == [("terminate", "a")]


def test_running_sessions_do_not_affect_filtering(engine):
    engine.update_list(["proj/a/", "proj/b/"])

    engine.update_running_sessions([SessionEntity("b")])

    assert items(engine) == ["proj/a/", "proj/b/"]


def test_has_list_needs_candidates_and_sessions(engine):
    assert engine.has_list() is False
    engine.update_list(["a/"])
    assert engine.has_list() is False
    engine.update_running_sessions([SessionEntity("a")])
    assert engine.has_list() is True


def test_undecodable_discovery_output_is_discarded(engine):
    engine.update_list(["keep/"])

    assert engine.apply_discovery_output(b"\xff\xfe/bad\n") is False
    assert engine.candidates == ["keep/"]


def test_discovery_output_replaces_candidates(engine, cache):
    assert engine.apply_discovery_output(b"/home/u/src/\n/home/u/notes/\n") is True

    assert engine.candidates == ["/home/u/src/", "/home/u/notes/"]
    assert cache.read() == ["/home/u/src/", "/home/u/notes/"]


def test_display_list_shifts_highlights_onto_name(engine):
    engine.update_list(["proj/alpha/", "proj/beta/"])
    engine.filter("alp")

    rows = engine.produce_display_list(5)

    assert [r.label for r in rows] == ["alpha"]
    assert rows[0].highlights == frozenset({0, 1, 2})
    assert rows[0].selected is True
    assert rows[0].kind == "candidate"


def test_display_list_annotates_running_sessions(engine):
    engine.update_list(["proj/a/", "proj/b/"])
    engine.update_running_sessions([make_session("b", {"main": ["sh"]}, clients=2)])

    rows = engine.produce_display_list(5)

    assert [r.label for r in rows] == ["a", "b (1 tabs, 1 panes) [2 connected users]"]
    assert [r.selected for r in rows] == [True, False]


def test_display_list_selects_last_row_at_cap(engine):
    engine.update_list([f"d/p{i}/" for i in range(10)])
    engine.windowed_view(2)
    for _ in range(5):
        engine.select_next()

    rows = engine.produce_display_list(2)

    assert len(rows) == 3
    assert [r.selected for r in rows] == [False, False, True]
