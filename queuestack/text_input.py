"""Single-line text input with a character-indexed cursor."""

from __future__ import annotations

from .keys import KeyCode, KeyEvent

__all__ = ["TextInput"]

Segment = tuple[str, str]


class TextInput:
    """Single-line text input.

    The cursor is a character index: 0 is before the first character and
    ``len(content)`` is after the last one.
    """

    def __init__(self, label: str) -> None:
        self._content = ""
        self._cursor = 0
        self.label = label
        self.warning: str | None = None

    def with_initial(self, value: str) -> TextInput:
        """Set the content and put the cursor at its end."""
        self._content = value
        self._cursor = len(value)
        return self

    def with_label(self, label: str) -> TextInput:
        """Set the label shown as the title."""
        self.label = label
        return self

    def with_warning(self, warning: str) -> TextInput:
        """Set a warning shown after the label."""
        self.warning = warning
        return self

    @property
    def content(self) -> str:
        """The text entered so far."""
        return self._content

    @property
    def cursor(self) -> int:
        """The cursor position as a character index."""
        return self._cursor

    def is_empty(self) -> bool:
        return not self._content

    def insert_text(self, text: str) -> None:
        """Insert pasted text at the cursor; line breaks become spaces."""
        flattened = text.replace("\r", " ").replace("\n", " ")
        self._insert(flattened)

    def handle_key(self, key: KeyEvent) -> bool:
        """Apply a key press; return whether the input handled it."""
        code = key.code
        if code is KeyCode.CHAR:
            if key.has_control:
                if key.character == "u":
                    self._content = ""
                    self._cursor = 0
                    return True
                if key.character == "w":
                    self._delete_word_backward()
                    return True
                return False
            self._insert(key.character or "")
            return True
        if code is KeyCode.BACKSPACE:
            self._delete_before_cursor()
            return True
        if code is KeyCode.DELETE:
            if self._cursor < len(self._content):
                self._content = (
                    self._content[: self._cursor] + self._content[self._cursor + 1 :]
                )
            return True
        if code is KeyCode.LEFT:
            self._cursor = max(self._cursor - 1, 0)
            return True
        if code is KeyCode.RIGHT:
            self._cursor = min(self._cursor + 1, len(self._content))
            return True
        if code is KeyCode.HOME:
            self._cursor = 0
            return True
        if code is KeyCode.END:
            self._cursor = len(self._content)
            return True
        return False

    def render_lines(self, focused: bool) -> list[list[Segment]]:
        """Title line and content line as ``(text, style)`` segments.

        When focused, the character under the cursor (a space at the end)
        is its own segment with style ``"cursor"``.
        """
        if self.warning is None:
            title: list[Segment] = [(f" {self.label} ", "")]
        else:
            title = [
                (f" {self.label} (", ""),
                (self.warning, "warning"),
                (") ", ""),
            ]

        if not focused:
            return [title, [(self._content, "")]]

        before = self._content[: self._cursor]
        under = self._content[self._cursor : self._cursor + 1] or " "
        after = self._content[self._cursor + 1 :]
        return [title, [(before, ""), (under, "cursor"), (after, "")]]

    def _insert(self, text: str) -> None:
        self._content = (
            self._content[: self._cursor] + text + self._content[self._cursor :]
        )
        self._cursor += len(text)

    def _delete_before_cursor(self) -> None:
        if self._cursor > 0:
            self._cursor -= 1
            self._content = (
                self._content[: self._cursor] + self._content[self._cursor + 1 :]
            )

    def _delete_word_backward(self) -> None:
        while self._cursor > 0 and self._content[self._cursor - 1] == " ":
            self._delete_before_cursor()
        while self._cursor > 0 and self._content[self._cursor - 1] != " ":
            self._delete_before_cursor()