"""Shared UI helpers: aggregation, interactive-mode resolution and width-aware text."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass
from typing import TypeVar

from wcwidth import wcwidth

__all__ = [
    "count_by",
    "count_by_many",
    "InteractiveArgs",
    "display_width",
    "truncate",
    "pad_to_width",
]

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)

ELLIPSIS = "…"


def count_by(items: Iterable[T], key_fn: Callable[[T], K]) -> dict[K, int]:
    """Count items by the single key each one maps to."""
    return dict(Counter(key_fn(item) for item in items))


def count_by_many(
    items: Iterable[T], keys_fn: Callable[[T], Iterable[K]]
) -> dict[K, int]:
    """Count items by every key each one maps to."""
    return dict(Counter(key for item in items for key in keys_fn(item)))


@dataclass(frozen=True)
class InteractiveArgs:
    """The ``--interactive`` / ``--no-interactive`` flag pair."""

    interactive: bool = False
    no_interactive: bool = False

    def resolve(self, config_default: bool) -> bool:
        """Explicit ``interactive`` wins, then ``no_interactive``, then the default."""
        if self.interactive:
            return True
        if self.no_interactive:
            return False
        return config_default


def _char_width(char: str) -> int:
    return max(wcwidth(char), 0)


def display_width(text: str) -> int:
    """Number of terminal columns the text occupies."""
    return sum(_char_width(char) for char in text)


def truncate(text: str, max_width: int) -> str:
    """Cut text to at most ``max_width`` columns, ending with an ellipsis if cut."""
    if display_width(text) <= max_width:
        return text

    target = max(max_width - 1, 0)
    used = 0
    end = 0
    for index, char in enumerate(text):
        width = _char_width(char)
        if used + width > target:
            end = index
            break
        used += width
        end = index + 1
    return text[:end] + ELLIPSIS


def pad_to_width(text: str, width: int) -> str:
    """Pad text with spaces to ``width`` columns; longer text is returned as is."""
    current = display_width(text)
    if current >= width:
        return text
    return text + " " * (width - current)