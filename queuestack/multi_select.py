"""Multi-select list with checkboxes and an optional trailing action entry."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

from .keys import KeyCode, KeyEvent

__all__ = ["MultiSelectAction", "MultiSelect"]

Segment = tuple[str, str]


class MultiSelectAction(enum.Enum):
    """Outcome of a key press on a multi-select list."""

    NONE = enum.auto()
    CONFIRM = enum.auto()
    CANCEL = enum.auto()


@dataclass
class _Entry:
    label: str
    checked: bool = False


class MultiSelect:
    """A list of strings, each with a checkbox, and one highlighted entry.

    One entry may be marked as an action entry (such as "+ Add new..."):
    it has no checkbox and never counts as selected.
    """

    def __init__(self, items: Iterable[object]) -> None:
        self._entries: list[_Entry] = [_Entry(str(item)) for item in items]
        self._cursor: int | None = 0 if self._entries else None
        self.title = ""
        self._action_index: int | None = None

    def with_action_item_last(self) -> MultiSelect:
        """Mark the last entry as the action entry."""
        if self._entries:
            self._action_index = len(self._entries) - 1
        return self

    def with_title(self, title: str) -> MultiSelect:
        """Set the title shown above the list."""
        self.title = title
        return self

    def with_selected(self, labels: Iterable[str]) -> MultiSelect:
        """Check exactly the entries whose labels are in ``labels``."""
        wanted = set(labels)
        for entry in self._entries:
            entry.checked = entry.label in wanted
        return self

    @property
    def items(self) -> list[str]:
        """All entry labels in display order."""
        return [entry.label for entry in self._entries]

    @property
    def action_item_index(self) -> int | None:
        return self._action_index

    def selected_items(self) -> list[str]:
        """Labels of the checked entries, excluding the action entry."""
        return [
            entry.label
            for index, entry in enumerate(self._entries)
            if entry.checked and index != self._action_index
        ]

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def selected_index(self) -> int | None:
        """Index of the highlighted entry (the cursor), or None."""
        return self._cursor

    def toggle_current(self) -> None:
        """Flip the checkbox of the highlighted entry unless it is the action entry."""
        if self._cursor is None or self._cursor == self._action_index:
            return
        if self._cursor < len(self._entries):
            entry = self._entries[self._cursor]
            entry.checked = not entry.checked

    def select_previous(self) -> None:
        """Move the cursor up, wrapping to the last entry."""
        if not self._entries:
            return
        if self._cursor is None:
            self._cursor = 0
        elif self._cursor == 0:
            self._cursor = len(self._entries) - 1
        else:
            self._cursor -= 1

    def select_next(self) -> None:
        """Move the cursor down, wrapping to the first entry."""
        if not self._entries:
            return
        if self._cursor is None or self._cursor >= len(self._entries) - 1:
            self._cursor = 0
        else:
            self._cursor += 1

    def add_item(self, item: str) -> None:
        """Add a checked entry before the action entry and highlight it.

        An entry whose label is already present is not added again.
        """
        if any(entry.label == item for entry in self._entries):
            return
        position = (
            self._action_index if self._action_index is not None else len(self._entries)
        )
        self._entries.insert(position, _Entry(item, True))
        if self._action_index is not None:
            self._action_index += 1
        self._cursor = position

    def handle_key(self, key: KeyEvent) -> MultiSelectAction:
        """Apply a key press and report whether the list was confirmed or cancelled."""
        if key.code is KeyCode.UP or key.is_char("k"):
            self.select_previous()
            return MultiSelectAction.NONE
        if key.code is KeyCode.DOWN or key.is_char("j"):
            self.select_next()
            return MultiSelectAction.NONE
        if key.is_char(" "):
            self.toggle_current()
            return MultiSelectAction.NONE
        if key.code is KeyCode.ENTER:
            return MultiSelectAction.CONFIRM
        if key.code is KeyCode.ESC:
            return MultiSelectAction.CANCEL
        return MultiSelectAction.NONE

    def render_lines(self, focused: bool) -> list[list[Segment]]:
        """One line per entry as ``(text, style)`` segments: cursor, checkbox, label."""
        lines = []
        for index, entry in enumerate(self._entries):
            is_cursor = index == self._cursor
            if not focused:
                style = "muted"
            elif is_cursor:
                style = "highlight"
            else:
                style = ""
            if index == self._action_index:
                checkbox = "    "
            elif entry.checked:
                checkbox = "[x] "
            else:
                checkbox = "[ ] "
            prefix = "> " if is_cursor and focused else "  "
            lines.append([(prefix, style), (checkbox, style), (entry.label, style)])
        return lines

    def copy(self) -> MultiSelect:
        """An independent list with the same entries, checks, title and cursor."""
        duplicate = MultiSelect([])
        duplicate._entries = [_Entry(e.label, e.checked) for e in self._entries]
        duplicate._cursor = self._cursor
        duplicate.title = self.title
        duplicate._action_index = self._action_index
        return duplicate