# queuestack

Keyboard-driven terminal widgets and display-width text helpers for a small
task and issue tracker. Text helpers measure strings in terminal columns, so
columns stay aligned even with CJK text and emoji.

The widgets keep their own state, take key events and return what they would
show as rows of `(text, style)` segments. The style is a short name such as
`""`, `"muted"`, `"highlight"`, `"bold"`, `"cursor"`, `"warning"` or `"key"`,
or a colour name given to a menu entry. A front end maps these names to real
terminal attributes.

## Installation

```
pip install queuestack
```

The `test` extra installs pytest for running the test suite in `tests/`.

## Modules

- `queuestack.ui`
  - `display_width(text)`: the number of terminal columns the text takes.
  - `truncate(text, max_width)`: cuts the text to at most `max_width`
    columns and ends it with `…` when it was cut.
  - `pad_to_width(text, width)`: pads the text with spaces to `width`
    columns. Longer text is returned unchanged.
  - `count_by(items, key_fn)` and `count_by_many(items, keys_fn)`: count
    items by one key each, or by every key each item yields. Both return a
    `dict`.
  - `InteractiveArgs(interactive, no_interactive)`: `resolve(config_default)`
    returns `True` if `interactive` is set, `False` if `no_interactive` is
    set, and `config_default` otherwise.
- `queuestack.keys`
  - `KeyCode`, `KeyModifiers` and `KeyEvent` describe a key press.
    `KeyEvent.char(c)`, `KeyEvent.ctrl(c)` and `is_char(*chars)` are helpers
    for character keys.
  - `Rect` and `centered_rect(width, height, area)` place overlays on the
    screen.
- `queuestack.text_input`: `TextInput` is a single-line editor. Its cursor
  counts characters, not bytes. It handles Left/Right, Home/End,
  Backspace/Delete, Ctrl+U (clear) and Ctrl+W (delete word backward).
  `insert_text` pastes text and turns line breaks into spaces.
- `queuestack.select_list`: `SelectList` is a single-choice list. It can have
  disabled entries, which the highlight skips. Up/Down or `k`/`j` move the
  highlight, Enter returns `SelectAction.CONFIRM` and Esc returns
  `SelectAction.CANCEL`.
- `queuestack.multi_select`: `MultiSelect` is a checkbox list. Space toggles
  an entry. `with_action_item_last()` turns the last entry into an action
  entry without a checkbox. `add_item` inserts a checked entry before the
  action entry.
- `queuestack.action_menu`: `ActionMenu` is a centred pop-up menu built from
  `MenuAction` and `MenuSeparator` entries. The highlight skips separators.
  Enter returns `ActionMenuResult.selected(index)` and Esc returns
  `ActionMenuResult.cancelled()`.
- `queuestack.filter_overlay`: `FilterOverlay` edits a `FilterState`, which
  holds a search string, labels and a category. Tab and Shift+Tab move
  between sections, in the order given by `FilterFocus`. Enter returns
  `FilterOverlayResult.applied(state)` and Esc returns
  `FilterOverlayResult.cancelled()`. `render_lines(area)` returns an
  `OverlayView`.

## Example

```python
from queuestack.keys import KeyCode, KeyEvent
from queuestack.action_menu import ActionMenu, MenuAction, MenuSeparator
from queuestack.ui import truncate, pad_to_width

menu = ActionMenu("Item", [
    MenuAction("View", "v", 0),
    MenuAction("Edit", "e", 1),
    MenuSeparator(),
    MenuAction("Delete", "d", 2),
])
menu.handle_key(KeyEvent(KeyCode.DOWN))
result = menu.handle_key(KeyEvent(KeyCode.ENTER))
print(result.action_index)            # 1

print(truncate("日本語中文", 5))      # "日本…"
print(pad_to_width("日本", 6) + "|")  # "日本  |"
```

## What this package does not do

- It does not draw to the terminal or read key presses from it. You need a
  front end that turns real input into `KeyEvent`s and draws the rows the
  widgets return.
- It has no command-line program.
- It does not store tasks or issues, read configuration or open an editor.
  It only provides the interactive pieces and text helpers.