import pytest

from smartsessions.engine import CandidateList, SessionList
from smartsessions.picker import CandidatePicker, SessionPicker, _Picker


def type_text(picker, text):
    for char in text:
        if char == " ":
            picker.handle_key("space", " ")
        else:
            picker.handle_key(char, char)


@pytest.fixture
def session_picker(host, snapshot):
    engine = SessionList(host)
    engine.update_snapshot(snapshot)
    return SessionPicker(engine)


def test_typing_filters_and_expands(session_picker):
    type_text(session_picker, "al x")

    assert session_picker.query == "al x"
    assert session_picker.engine.session_expanded is True
    assert [m.item.name for m in session_picker.engine.filtered_tabs] == ["xterm"]


def test_backspace_edits_query(session_picker):
    type_text(session_picker, "al ")

    assert session_picker.handle_key("backspace") is True
    assert session_picker.query == "al"
    assert session_picker.engine.session_expanded is False


def test_backspace_on_empty_query_needs_no_redraw(session_picker):
    assert session_picker.handle_key("backspace") is False


def test_arrows_navigate_and_expand(session_picker):
    assert session_picker.handle_key("right") is True
    assert session_picker.handle_key("down") is True
    assert session_picker.engine.selected_tab().name == "ytab"

    assert session_picker.handle_key("left") is True
    assert session_picker.handle_key("up") is True
    assert session_picker.engine.selected_session().name == "gamma"


def test_enter_attaches_and_finishes(session_picker, host):
    session_picker.handle_key("enter")

    assert session_picker.finished is True
    assert host.calls == [("switch_focus", "alpha", 0, "%alpha1")]


def test_enter_without_selection_keeps_picker_open(session_picker, host):
    type_text(session_picker, "zzz")

    session_picker.handle_key("enter")

    assert session_picker.finished is False
    assert host.calls == []


def test_escape_finishes(session_picker):
    session_picker.handle_key("escape")

    assert session_picker.finished is True


def test_unknown_key_is_ignored(session_picker):
    assert session_picker.handle_key("f5") is False
    assert session_picker.query == ""


def test_candidate_picker_creates_selected(host):
    engine = CandidateList(host)
    engine.update_list(["proj/api/", "proj/web/"])
    picker = CandidatePicker(engine, "fd -t d . '~/My Projects'", height=10)

    type_text(picker, "web")
    picker.handle_key("enter")

    assert picker.finished is True
    assert host.calls == [("switch_or_create", "web", "proj/web")]
    assert picker.discovery_argv == ["fd", "-t", "d", ".", "~/My Projects"]


def test_candidate_picker_rows_use_height(host):
    engine = CandidateList(host)
    engine.update_list([f"d/p{i}/" for i in range(10)])
    picker = CandidatePicker(engine, "true", height=4)

    assert len(picker.rows()) == 5


def test_base_picker_cannot_be_instantiated():
    with pytest.raises(TypeError):
        _Picker()
