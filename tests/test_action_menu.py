import pytest

from queuestack.action_menu import ActionMenu, ActionMenuResult, MenuAction, MenuSeparator
from queuestack.keys import KeyCode, KeyEvent, Rect, centered_rect
from queuestack.ui import display_width


def key_event(code):
    return KeyEvent(code)


@pytest.fixture
def menu_items():
    return [
        MenuAction("A", "desc a", 0),
        MenuAction("B", "desc b", 1),
        MenuAction("C", "desc c", 2),
    ]


def test_navigation_down(menu_items):
    menu = ActionMenu("Test", menu_items)
    assert menu.selected_action_index() == 0
    menu.handle_key(key_event(KeyCode.DOWN))
    assert menu.selected_action_index() == 1
    menu.handle_key(key_event(KeyCode.DOWN))
    assert menu.selected_action_index() == 2
    menu.handle_key(key_event(KeyCode.DOWN))
    assert menu.selected_action_index() == 0


def test_navigation_up(menu_items):
    menu = ActionMenu("Test", menu_items)
    menu.handle_key(key_event(KeyCode.UP))
    assert menu.selected_action_index() == 2
    menu.handle_key(key_event(KeyCode.UP))
    assert menu.selected_action_index() == 1


def test_vim_keys(menu_items):
    menu = ActionMenu("Test", menu_items)
    menu.handle_key(KeyEvent.char("j"))
    assert menu.selected_action_index() == 1
    menu.handle_key(KeyEvent.char("k"))
    assert menu.selected_action_index() == 0


def test_separator_skipped():
    items = [MenuAction("A", "", 0), MenuSeparator(), MenuAction("B", "", 1)]
    menu = ActionMenu("Test", items)
    assert menu.selected_action_index() == 0
    menu.handle_key(key_event(KeyCode.DOWN))
    assert menu.selected_action_index() == 1


def test_confirm(menu_items):
    menu = ActionMenu("Test", menu_items)
    menu.handle_key(key_event(KeyCode.DOWN))
    result = menu.handle_key(key_event(KeyCode.ENTER))
    assert result == ActionMenuResult.selected(1)
    assert not result.is_cancelled


def test_cancel():
    menu = ActionMenu("Test", [MenuAction("A", "", 0)])
    result = menu.handle_key(key_event(KeyCode.ESC))
    assert result == ActionMenuResult.cancelled()
    assert result.is_cancelled


def test_other_key_does_nothing(menu_items):
    menu = ActionMenu("Test", menu_items)
    assert menu.handle_key(KeyEvent.char("x")) is None
    assert menu.selected_action_index() == 0


def test_empty_menu_enter_returns_none():
    menu = ActionMenu("Test", [MenuSeparator()])
    assert menu.selected_action_index() is None
    menu.select_next()
    assert menu.handle_key(key_event(KeyCode.ENTER)) is None


def test_item_widths():
    assert MenuAction("A", "", 0).width() == 1
    assert MenuAction("A", "desc a", 0).width() == 10
    assert MenuSeparator().width() == 3


def test_popup_size_minimum(menu_items):
    menu = ActionMenu("Test", menu_items)
    assert menu.popup_size() == (24, 5)


def test_popup_size_grows_with_title():
    title = "T" * 40
    menu = ActionMenu(title, [MenuAction("A", "", 0)])
    width, height = menu.popup_size()
    assert width == display_width(title) + 4 + 2
    assert height == 4


def test_render_lines(menu_items):
    menu = ActionMenu("Test", menu_items + [MenuSeparator()])
    area = Rect(0, 0, 80, 24)
    popup, rows = menu.render_lines(area)
    assert popup == centered_rect(*menu.popup_size(), area)
    assert len(rows) == 4
    assert rows[0][0][0] == "> "
    assert rows[1][0][0] == "  "
    inner = popup.width - 2
    for row in rows[:3]:
        assert sum(display_width(text) for text, _ in row) == inner
        assert row[-1] == (row[-1][0], "muted")
    assert rows[3] == [("─" * inner, "muted")]


def test_render_lines_colored_selected():
    menu = ActionMenu("Test", [MenuAction("Delete", "", 0, color="red")])
    _, rows = menu.render_lines(Rect(0, 0, 80, 24))
    assert rows[0] == [("> ", "bold red"), ("Delete", "bold red")]