"""Single-select list with optional disabled entries."""

from __future__ import annotations

import enum
from collections.abc import Iterable

from .keys import KeyCode, KeyEvent

__all__ = ["SelectAction", "SelectList"]

Segment = tuple[str, str]


class SelectAction(enum.Enum):
    """Outcome of a key press on a list."""

    NONE = enum.auto()
    CONFIRM = enum.auto()
    CANCEL = enum.auto()


class SelectList:
    """A list of strings with one highlighted entry.

    Disabled entries are shown but the highlight skips them.
    """

    def __init__(self, items: Iterable[object]) -> None:
        self.items: list[str] = [str(item) for item in items]
        self.title = ""
        self._disabled: frozenset[int] = frozenset()
        self._selected: int | None = 0 if self.items else None

    def with_title(self, title: str) -> SelectList:
        """Set the title shown above the list."""
        self.title = title
        return self

    def with_disabled(self, disabled: Iterable[int]) -> SelectList:
        """Mark entries as disabled, moving the highlight off them if needed."""
        self._disabled = frozenset(disabled)
        if self._selected is not None and self._selected in self._disabled:
            self._selected = next(
                (i for i in range(len(self.items)) if self._is_enabled(i)), None
            )
        return self

    @property
    def disabled(self) -> frozenset[int]:
        return self._disabled

    def selected_index(self) -> int | None:
        """Index of the highlighted entry, or None if there is none."""
        return self._selected

    def is_empty(self) -> bool:
        return not self.items

    def __len__(self) -> int:
        return len(self.items)

    def select_previous(self) -> None:
        """Move the highlight up to the previous enabled entry, wrapping."""
        self._step(-1)

    def select_next(self) -> None:
        """Move the highlight down to the next enabled entry, wrapping."""
        self._step(1)

    def handle_key(self, key: KeyEvent) -> SelectAction:
        """Apply a key press and report whether the list was confirmed or cancelled."""
        if key.code is KeyCode.UP or key.is_char("k"):
            self.select_previous()
            return SelectAction.NONE
        if key.code is KeyCode.DOWN or key.is_char("j"):
            self.select_next()
            return SelectAction.NONE
        if key.code is KeyCode.ENTER:
            if self._selected is not None and self._is_enabled(self._selected):
                return SelectAction.CONFIRM
            return SelectAction.NONE
        if key.code is KeyCode.ESC:
            return SelectAction.CANCEL
        return SelectAction.NONE

    def render_lines(self, focused: bool) -> list[list[Segment]]:
        """One line per entry as ``(text, style)`` segments: prefix, then the entry."""
        lines = []
        for index, item in enumerate(self.items):
            is_selected = index == self._selected
            is_disabled = index in self._disabled
            if not focused or is_disabled:
                style = "muted"
            elif is_selected:
                style = "highlight"
            else:
                style = ""
            prefix = "> " if is_selected and not is_disabled and focused else "  "
            lines.append([(prefix, style), (item, style)])
        return lines

    def copy(self) -> SelectList:
        """An independent list with the same entries, title, disabled set and highlight."""
        duplicate = SelectList(self.items)
        duplicate.title = self.title
        duplicate._disabled = self._disabled
        duplicate._selected = self._selected
        return duplicate

    def _is_enabled(self, index: int) -> bool:
        return index not in self._disabled

    def _step(self, direction: int) -> None:
        if not self.items:
            return
        current = self._selected if self._selected is not None else 0
        count = len(self.items)
        for offset in range(1, count + 1):
            candidate = (current + direction * offset) % count
            if self._is_enabled(candidate):
                self._selected = candidate
                return