import pytest

from queuestack.filter_overlay import (
    FilterFocus,
    FilterOverlay,
    FilterOverlayResult,
    FilterState,
)
from queuestack.keys import KeyCode, KeyEvent, Rect


def key(code):
    return KeyEvent(code)


def make_overlay(state=None):
    return FilterOverlay(
        ["bug", "feature", "urgent"], ["bugs", "features"], state or FilterState()
    )


def test_filter_state_is_empty():
    assert FilterState().is_empty()
    assert not FilterState(search="test").is_empty()


def test_filter_state_clear():
    state = FilterState(search="test", labels=["bug"], category="features")
    state.clear()
    assert state.is_empty()
    assert state == FilterState()


@pytest.mark.parametrize(
    "focus, nxt, prv",
    [
        (FilterFocus.SEARCH, FilterFocus.LABELS, FilterFocus.CATEGORY),
        (FilterFocus.LABELS, FilterFocus.CATEGORY, FilterFocus.SEARCH),
        (FilterFocus.CATEGORY, FilterFocus.SEARCH, FilterFocus.LABELS),
    ],
)
def test_focus_navigation(focus, nxt, prv):
    assert focus.next() is nxt
    assert focus.prev() is prv


def test_initial_state_round_trips():
    initial = FilterState(search="login", labels=["urgent", "bug"], category="features")
    overlay = make_overlay(initial)
    assert overlay.state() == FilterState("login", ["bug", "urgent"], "features")


def test_unknown_initial_category_means_all():
    overlay = make_overlay(FilterState(category="missing"))
    assert overlay.state().category is None


def test_typing_into_search():
    overlay = make_overlay()
    for ch in "ab j":
        overlay.handle_key(KeyEvent.char(ch))
    assert overlay.state().search == "ab j"
    assert overlay.state().category is None


def test_insert_search_text_flattens_newlines():
    overlay = make_overlay()
    overlay.insert_search_text("one\ntwo")
    assert overlay.state().search == "one two"


def test_tab_and_backtab_move_focus():
    overlay = make_overlay()
    assert overlay.focus is FilterFocus.SEARCH
    overlay.handle_key(key(KeyCode.TAB))
    assert overlay.focus is FilterFocus.LABELS
    overlay.handle_key(key(KeyCode.BACK_TAB))
    overlay.handle_key(key(KeyCode.BACK_TAB))
    assert overlay.focus is FilterFocus.CATEGORY


def test_labels_toggle_with_space():
    overlay = make_overlay()
    overlay.handle_key(key(KeyCode.TAB))
    overlay.handle_key(KeyEvent.char(" "))
    overlay.handle_key(KeyEvent.char("j"))
    overlay.handle_key(KeyEvent.char("j"))
    overlay.handle_key(KeyEvent.char(" "))
    assert overlay.state().labels == ["bug", "urgent"]
    assert overlay.state().search == ""


def test_category_navigation():
    overlay = make_overlay()
    overlay.handle_key(key(KeyCode.BACK_TAB))
    overlay.handle_key(key(KeyCode.DOWN))
    assert overlay.state().category == "bugs"
    overlay.handle_key(KeyEvent.char("j"))
    assert overlay.state().category == "features"
    overlay.handle_key(KeyEvent.char("j"))
    assert overlay.state().category is None
    overlay.handle_key(key(KeyCode.UP))
    assert overlay.state().category == "features"


def test_enter_applies_and_esc_cancels():
    overlay = make_overlay()
    overlay.handle_key(KeyEvent.char("x"))
    result = overlay.handle_key(key(KeyCode.ENTER))
    assert result == FilterOverlayResult.applied(FilterState(search="x"))
    assert not result.is_cancelled
    cancelled = overlay.handle_key(key(KeyCode.ESC))
    assert cancelled.is_cancelled


def test_no_labels_reports_none_and_ignores_keys():
    overlay = FilterOverlay([], ["bugs"], FilterState(labels=["ghost"]))
    overlay.handle_key(key(KeyCode.TAB))
    overlay.handle_key(KeyEvent.char(" "))
    assert overlay.state().labels == []
    view = overlay.render_lines(Rect(0, 0, 80, 24))
    assert view.labels == [[("(no labels)", "muted")]]


def test_other_keys_return_none():
    overlay = make_overlay()
    assert overlay.handle_key(key(KeyCode.LEFT)) is None


@pytest.mark.parametrize(
    "labels, categories, size",
    [
        (["bug", "feature"], ["bugs"], (50, 12)),
        ([], [], (50, 12)),
        (["x" * 60], [], (98, 12)),
        (["x" * 200], [], (100, 12)),
        ([], [f"c{i}" for i in range(10)], (50, 16)),
    ],
)
def test_overlay_size(labels, categories, size):
    assert FilterOverlay(labels, categories, FilterState()).overlay_size() == size


def test_render_lines_layout():
    overlay = make_overlay(FilterState(labels=["feature"], category="bugs"))
    view = overlay.render_lines(Rect(0, 0, 80, 24))
    assert view.area == Rect(15, 6, 50, 12)
    assert view.search[0] == [(" Search ", "")]
    assert [row[1][0] for row in view.labels] == ["[ ] ", "[x] ", "[ ] "]
    assert [row[0][0] for row in view.labels] == ["  ", "  ", "  "]
    assert view.categories[1] == [("  ", "bold"), ("(•) ", "bold"), ("bugs", "bold")]
    assert view.categories[0][1][0] == "( ) "
    assert view.help[0][0] == ("Enter", "key")


def test_render_lines_focus_highlight():
    overlay = make_overlay()
    overlay.handle_key(key(KeyCode.TAB))
    view = overlay.render_lines(Rect(0, 0, 80, 24))
    assert view.labels[0][0] == ("> ", "highlight")
    assert view.search[1] == [("", "")]