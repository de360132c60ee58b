"""Filter overlay combining a search box, a label checklist and a category chooser."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field

from .keys import KeyCode, KeyEvent, Rect, centered_rect
from .multi_select import MultiSelect
from .select_list import SelectList
from .text_input import TextInput
from .ui import display_width

__all__ = [
    "FilterState",
    "FilterOverlayResult",
    "FilterFocus",
    "FilterOverlay",
    "OverlayView",
]

Segment = tuple[str, str]

ALL_CATEGORIES = "(all)"
NO_LABELS = "(no labels)"


@dataclass
class FilterState:
    """Filter applied to a list of items."""

    search: str = ""
    labels: list[str] = field(default_factory=list)
    category: str | None = None

    def is_empty(self) -> bool:
        """True when nothing is filtered."""
        return not self.search and not self.labels and self.category is None

    def clear(self) -> None:
        """Remove every filter."""
        self.search = ""
        self.labels.clear()
        self.category = None


@dataclass(frozen=True)
class FilterOverlayResult:
    """How the overlay closed: with a filter applied, or cancelled."""

    state: FilterState | None = None

    @classmethod
    def applied(cls, state: FilterState) -> FilterOverlayResult:
        return cls(state)

    @classmethod
    def cancelled(cls) -> FilterOverlayResult:
        return cls(None)

    @property
    def is_cancelled(self) -> bool:
        return self.state is None


class FilterFocus(enum.Enum):
    """Which section of the overlay receives keys."""

    SEARCH = "search"
    LABELS = "labels"
    CATEGORY = "category"

    def next(self) -> FilterFocus:
        """The section after this one, wrapping."""
        order = list(FilterFocus)
        return order[(order.index(self) + 1) % len(order)]

    def prev(self) -> FilterFocus:
        """The section before this one, wrapping."""
        order = list(FilterFocus)
        return order[(order.index(self) - 1) % len(order)]


@dataclass(frozen=True)
class OverlayView:
    """What the overlay shows, as ``(text, style)`` segment rows per section."""

    area: Rect
    search: list[list[Segment]]
    labels: list[list[Segment]]
    categories: list[list[Segment]]
    help: list[list[Segment]]


class FilterOverlay:
    """Interactive editor for a :class:`FilterState`."""

    def __init__(
        self,
        available_labels: Iterable[str],
        available_categories: Iterable[str],
        initial_state: FilterState,
    ) -> None:
        self.available_labels: list[str] = list(available_labels)
        self.available_categories: list[str] = list(available_categories)
        self._focus = FilterFocus.SEARCH

        self._search = TextInput("Search").with_initial(initial_state.search)
        if self.available_labels:
            self._labels = MultiSelect(self.available_labels).with_selected(
                initial_state.labels
            )
        else:
            self._labels = MultiSelect([NO_LABELS])

        self._categories = SelectList([ALL_CATEGORIES, *self.available_categories])
        if initial_state.category in self.available_categories:
            position = self.available_categories.index(initial_state.category)
            for _ in range(position + 1):
                self._categories.select_next()

    @property
    def focus(self) -> FilterFocus:
        """The section that currently has focus."""
        return self._focus

    def state(self) -> FilterState:
        """The filter as currently set in the overlay."""
        labels = self._labels.selected_items() if self.available_labels else []
        index = self._categories.selected_index()
        category = None
        if index is not None and 0 < index <= len(self.available_categories):
            category = self.available_categories[index - 1]
        return FilterState(self._search.content, list(labels), category)

    def insert_search_text(self, text: str) -> None:
        """Paste text into the search box."""
        self._search.insert_text(text)

    def handle_key(self, key: KeyEvent) -> FilterOverlayResult | None:
        """Apply a key press; return a result once the overlay closes."""
        code = key.code
        if code is KeyCode.TAB:
            self._focus = self._focus.next()
            return None
        if code is KeyCode.BACK_TAB:
            self._focus = self._focus.prev()
            return None
        if code is KeyCode.ENTER:
            return FilterOverlayResult.applied(self.state())
        if code is KeyCode.ESC:
            return FilterOverlayResult.cancelled()

        if self._focus is FilterFocus.SEARCH:
            self._search.handle_key(key)
        elif self._focus is FilterFocus.LABELS:
            if self.available_labels:
                self._labels.handle_key(key)
        elif code is KeyCode.UP or key.is_char("k"):
            self._categories.select_previous()
        elif code is KeyCode.DOWN or key.is_char("j"):
            self._categories.select_next()
        return None

    def overlay_size(self) -> tuple[int, int]:
        """Width and height of the overlay including its border."""
        max_label = max((display_width(l) for l in self.available_labels), default=10)
        max_cat = max((display_width(c) for c in self.available_categories), default=10)
        content_width = (max_label + 12) + (max_cat + 12) + 4
        width = min(max(content_width, 50), 100)
        list_height = min(
            max(len(self.available_labels), len(self.available_categories) + 1), 8
        )
        height = 3 + list_height + 3 + 2
        return width, max(height, 12)

    def render_lines(self, area: Rect) -> OverlayView:
        """The overlay rectangle within ``area`` and the rows of each section."""
        width, height = self.overlay_size()
        overlay = centered_rect(width, height, area)
        inner_height = max(overlay.height - 2, 0)
        # Search box takes 3 rows and help 1; the lists get the rest, at least 4.
        middle_height = max(inner_height - 4, 4)
        list_rows = max(middle_height - 2, 0)

        return OverlayView(
            area=overlay,
            search=self._search.render_lines(self._focus is FilterFocus.SEARCH),
            labels=self._label_rows(list_rows),
            categories=self._category_rows(list_rows),
            help=[
                [
                    ("Enter", "key"),
                    (" Apply  ", ""),
                    ("Esc", "key"),
                    (" Cancel", ""),
                ],
                [
                    ("Tab", "key"),
                    (" Switch  ", ""),
                    ("Space", "key"),
                    (" Toggle", ""),
                ],
            ],
        )

    def _label_rows(self, limit: int) -> list[list[Segment]]:
        if not self.available_labels:
            return [[(NO_LABELS, "muted")]]
        focused = self._focus is FilterFocus.LABELS
        cursor = self._labels.selected_index()
        checked = set(self._labels.selected_items())
        rows = []
        for index, label in enumerate(self.available_labels[:limit]):
            active = index == cursor and focused
            style = "highlight" if active else ""
            rows.append(
                [
                    ("> " if active else "  ", style),
                    ("[x] " if label in checked else "[ ] ", style),
                    (label, style),
                ]
            )
        return rows

    def _category_rows(self, limit: int) -> list[list[Segment]]:
        focused = self._focus is FilterFocus.CATEGORY
        selected = self._categories.selected_index()
        rows = []
        for index, name in enumerate(
            [ALL_CATEGORIES, *self.available_categories][:limit]
        ):
            is_selected = index == selected
            if is_selected and focused:
                style = "highlight"
            elif is_selected:
                style = "bold"
            else:
                style = ""
            rows.append(
                [
                    ("> " if is_selected and focused else "  ", style),
                    ("(•) " if is_selected else "( ) ", style),
                    (name, style),
                ]
            )
        return rows