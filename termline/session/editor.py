# session/editor.py

import unicodedata
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class InputState:
    """Snapshot of the input line and the cursor offset within it."""
    buffer: str = ""
    cursor: int = 0


def is_control(char: str) -> bool:
    """Return True for control characters (newline, tab, escape, ...)."""
    return unicodedata.category(char) == "Cc"


class InputEditor:
    """
    Owns the raw input line and a cursor offset.

    Every operation leaves 0 <= cursor <= len(buffer).
    """

    def __init__(self, text: str = ""):
        self._chars: list = []
        self._cursor = 0
        if text:
            self.set_text(text)

    @property
    def text(self) -> str:
        return "".join(self._chars)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def state(self) -> InputState:
        return InputState(self.text, self._cursor)

    def __len__(self) -> int:
        return len(self._chars)

    def _clamp(self) -> None:
        self._cursor = max(0, min(self._cursor, len(self._chars)))

    def insert(self, text: str) -> None:
        """Insert text at the cursor, dropping control characters."""
        for char in text:
            if is_control(char):
                continue
            self._chars.insert(self._cursor, char)
            self._cursor += 1
        self._clamp()

    def delete_before(self) -> None:
        """Backspace."""
        if self._cursor > 0:
            self._chars.pop(self._cursor - 1)
            self._cursor -= 1
        self._clamp()

    def delete_at(self) -> None:
        """Forward delete."""
        if self._cursor < len(self._chars):
            self._chars.pop(self._cursor)
        self._clamp()

    def delete_word_before(self) -> None:
        """Remove the word before the cursor along with trailing whitespace."""
        start = self._word_boundary(-1)
        del self._chars[start:self._cursor]
        self._cursor = start
        self._clamp()

    def move_cursor(self, target: Union[int, str]) -> None:
        """Move by a signed delta, or to "home"/"end". Always clamped."""
        if target == "home":
            self._cursor = 0
        elif target == "end":
            self._cursor = len(self._chars)
        elif isinstance(target, int):
            self._cursor += target
        else:
            raise ValueError(f"Unknown cursor target: {target!r}")
        self._clamp()

    def move_word(self, direction: int) -> None:
        """Jump to the previous (-1) or next (+1) word boundary."""
        self._cursor = self._word_boundary(direction)
        self._clamp()

    def _word_boundary(self, direction: int) -> int:
        chars, pos = self._chars, self._cursor
        if direction < 0:
            while pos > 0 and chars[pos - 1].isspace():
                pos -= 1
            while pos > 0 and not chars[pos - 1].isspace():
                pos -= 1
        else:
            while pos < len(chars) and not chars[pos].isspace():
                pos += 1
            while pos < len(chars) and chars[pos].isspace():
                pos += 1
        return pos

    def current_word_span(self) -> tuple:
        """
        Return (start, end) of the word under or before the cursor.

        The word is the maximal run of non-whitespace that ends at or contains
        the cursor. With whitespace on both sides of the cursor the span is
        empty and sits at the cursor.
        """
        chars, start, end = self._chars, self._cursor, self._cursor
        while start > 0 and not chars[start - 1].isspace():
            start -= 1
        while end < len(chars) and not chars[end].isspace():
            end += 1
        return start, end

    def replace_current_word(self, new_word: str) -> None:
        """
        Substitute the current word and leave the cursor after it plus one
        trailing space.
        """
        start, end = self.current_word_span()
        replacement = [c for c in new_word if not is_control(c)]
        tail = self._chars[end:]
        if tail and tail[0] == " ":
            tail = tail[1:]
        self._chars = self._chars[:start] + replacement + [" "] + tail
        self._cursor = start + len(replacement) + 1
        self._clamp()

    def set_text(self, text: str) -> None:
        """Replace the whole line; the cursor goes to the end."""
        self._chars = [c for c in text if not is_control(c)]
        self._cursor = len(self._chars)

    def restore(self, state: InputState) -> None:
        self.set_text(state.buffer)
        self._cursor = state.cursor
        self._clamp()

    def clear(self) -> None:
        self._chars = []
        self._cursor = 0
