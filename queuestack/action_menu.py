"""Centred modal popup menu."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union

from .keys import KeyCode, KeyEvent, Rect, centered_rect
from .ui import display_width

__all__ = ["ActionMenuResult", "MenuAction", "MenuSeparator", "ActionMenu"]

Segment = tuple[str, str]


@dataclass(frozen=True)
class ActionMenuResult:
    """How a menu interaction ended: an action was chosen, or it was cancelled."""

    action_index: int | None = None

    @classmethod
    def selected(cls, action_index: int) -> ActionMenuResult:
        return cls(action_index)

    @classmethod
    def cancelled(cls) -> ActionMenuResult:
        return cls(None)

    @property
    def is_cancelled(self) -> bool:
        return self.action_index is None


@dataclass(frozen=True)
class MenuAction:
    """A selectable menu entry mapping back to an action by ``action_index``."""

    label: str
    description: str = ""
    action_index: int = 0
    color: str | None = None

    def width(self) -> int:
        """Columns needed for "label - description"."""
        if not self.description:
            return display_width(self.label)
        return display_width(self.label) + 3 + display_width(self.description)


@dataclass(frozen=True)
class MenuSeparator:
    """A horizontal line between groups of entries."""

    def width(self) -> int:
        return 3


MenuItem = Union[MenuAction, MenuSeparator]


class ActionMenu:
    """A popup menu whose highlight moves only over action entries."""

    def __init__(self, title: str, items: Iterable[MenuItem]) -> None:
        self.title = title
        self.items: list[MenuItem] = list(items)
        self._selectable = [
            index for index, item in enumerate(self.items) if isinstance(item, MenuAction)
        ]
        self._selected = 0

    def selected_action_index(self) -> int | None:
        """The ``action_index`` of the highlighted entry, or None if there is none."""
        if self._selected >= len(self._selectable):
            return None
        item = self.items[self._selectable[self._selected]]
        return item.action_index if isinstance(item, MenuAction) else None

    def select_previous(self) -> None:
        """Move the highlight up, wrapping."""
        if self._selectable:
            self._selected = (self._selected - 1) % len(self._selectable)

    def select_next(self) -> None:
        """Move the highlight down, wrapping."""
        if self._selectable:
            self._selected = (self._selected + 1) % len(self._selectable)

    def handle_key(self, key: KeyEvent) -> ActionMenuResult | None:
        """Apply a key press; return a result once the interaction is over."""
        if key.code is KeyCode.UP or key.is_char("k"):
            self.select_previous()
            return None
        if key.code is KeyCode.DOWN or key.is_char("j"):
            self.select_next()
            return None
        if key.code is KeyCode.ENTER:
            index = self.selected_action_index()
            return None if index is None else ActionMenuResult.selected(index)
        if key.code is KeyCode.ESC:
            return ActionMenuResult.cancelled()
        return None

    def popup_size(self) -> tuple[int, int]:
        """Width and height of the popup including its border."""
        max_item_width = max((item.width() for item in self.items), default=10)
        title_width = display_width(self.title) + 4
        content_width = max_item_width + 4
        width = max(content_width, title_width) + 2
        height = len(self.items) + 2
        return max(width, 24), max(height, 4)

    def render_lines(self, area: Rect) -> tuple[Rect, list[list[Segment]]]:
        """The popup rectangle within ``area`` and the rows inside its border.

        Each row is a list of ``(text, style)`` segments; descriptions are
        right-aligned to the inner width.
        """
        width, height = self.popup_size()
        popup = centered_rect(width, height, area)
        inner_width = max(popup.width - 2, 0)
        inner_height = max(popup.height - 2, 0)
        highlighted = (
            self._selectable[self._selected]
            if self._selected < len(self._selectable)
            else None
        )

        rows: list[list[Segment]] = []
        for index, item in enumerate(self.items[:inner_height]):
            if isinstance(item, MenuSeparator):
                rows.append([("─" * inner_width, "muted")])
                continue
            if index == highlighted:
                prefix = "> "
                label_style = f"bold {item.color}" if item.color else "highlight"
            else:
                prefix = "  "
                label_style = item.color or ""
            row: list[Segment] = [(prefix, label_style), (item.label, label_style)]
            if item.description:
                used = (
                    display_width(prefix)
                    + display_width(item.label)
                    + display_width(item.description)
                )
                row.append((" " * max(inner_width - used, 0), ""))
                row.append((item.description, "muted"))
            rows.append(row)
        return popup, rows