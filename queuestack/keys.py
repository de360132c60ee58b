"""Key events and screen rectangles shared by the interactive widgets."""

from __future__ import annotations

import enum
from dataclasses import dataclass

__all__ = ["KeyCode", "KeyModifiers", "KeyEvent", "Rect", "centered_rect"]


class KeyCode(enum.Enum):
    """Which key was pressed."""

    CHAR = enum.auto()
    ENTER = enum.auto()
    ESC = enum.auto()
    TAB = enum.auto()
    BACK_TAB = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    HOME = enum.auto()
    END = enum.auto()
    BACKSPACE = enum.auto()
    DELETE = enum.auto()


class KeyModifiers(enum.Flag):
    """Modifier keys held during a key press."""

    NONE = 0
    SHIFT = enum.auto()
    CONTROL = enum.auto()
    ALT = enum.auto()


@dataclass(frozen=True)
class KeyEvent:
    """A single key press; ``character`` is set only for ``KeyCode.CHAR``."""

    code: KeyCode
    character: str | None = None
    modifiers: KeyModifiers = KeyModifiers.NONE

    def __post_init__(self) -> None:
        if self.code is KeyCode.CHAR:
            if self.character is None or len(self.character) != 1:
                raise ValueError("a character key needs exactly one character")
        elif self.character is not None:
            raise ValueError(f"{self.code.name} carries no character")

    @classmethod
    def char(cls, char: str, modifiers: KeyModifiers = KeyModifiers.NONE) -> KeyEvent:
        """A character key press."""
        return cls(KeyCode.CHAR, char, modifiers)

    @classmethod
    def ctrl(cls, char: str) -> KeyEvent:
        """A character key pressed with Control held."""
        return cls(KeyCode.CHAR, char, KeyModifiers.CONTROL)

    @property
    def has_control(self) -> bool:
        return KeyModifiers.CONTROL in self.modifiers

    def is_char(self, *args: str) -> bool:
        """True for a character key, restricted to ``args`` when any are given."""
        if self.code is not KeyCode.CHAR:
            return False
        return not args or self.character in args


@dataclass(frozen=True)
class Rect:
    """A rectangle of terminal cells."""

    x: int
    y: int
    width: int
    height: int

    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height


def centered_rect(width: int, height: int, area: Rect) -> Rect:
    """A ``width`` x ``height`` rectangle centred in ``area``, clipped to it."""
    x = area.x + max(area.width - width, 0) // 2
    y = area.y + max(area.height - height, 0) // 2
    return Rect(x, y, min(width, area.width), min(height, area.height))