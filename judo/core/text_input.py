"""Cursor-addressed single-line text editing (UI-agnostic)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

CURSOR_BLOCK = "█"


class CursorEditable(ABC):
    """Editing behaviour for any buffer that exposes text and a cursor.

    Subclasses provide storage for the text and the cursor offset; all
    editing operations are implemented here in terms of those accessors.
    Offsets count characters, not bytes, and every operation keeps the
    cursor within ``[0, len(text)]``. Out-of-range requests are no-ops.
    """

    @abstractmethod
    def get_text(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def set_text(self, text: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def get_cursor(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def set_cursor(self, position: int) -> None:
        raise NotImplementedError

    def _clamped_cursor(self) -> int:
        return max(0, min(self.get_cursor(), len(self.get_text())))

    def insert(self, char: str) -> None:
        """Insert text at the cursor and move past it."""
        if not char:
            return
        text = self.get_text()
        pos = self._clamped_cursor()
        self.set_text(text[:pos] + char + text[pos:])
        self.set_cursor(pos + len(char))

    def delete_before(self) -> None:
        """Remove the character before the cursor (backspace)."""
        pos = self._clamped_cursor()
        if pos == 0:
            return
        text = self.get_text()
        self.set_text(text[: pos - 1] + text[pos:])
        self.set_cursor(pos - 1)

    def delete_after(self) -> None:
        """Remove the character under the cursor (forward delete)."""
        text = self.get_text()
        pos = self._clamped_cursor()
        if pos >= len(text):
            return
        self.set_text(text[:pos] + text[pos + 1 :])
        self.set_cursor(pos)

    def move_left(self) -> None:
        self.set_cursor(max(0, self._clamped_cursor() - 1))

    def move_right(self) -> None:
        self.set_cursor(min(len(self.get_text()), self._clamped_cursor() + 1))

    def move_home(self) -> None:
        self.set_cursor(0)

    def move_end(self) -> None:
        self.set_cursor(len(self.get_text()))

    def clear(self) -> None:
        self.set_text("")
        self.set_cursor(0)

    def cursor_segments(self) -> tuple[str, str, str]:
        """Split the text around the cursor for display.

        Returns ``(before, at_cursor, after)``. At end of text the middle
        segment is a block glyph standing in for the cursor.
        """
        text = self.get_text()
        pos = self._clamped_cursor()
        if pos >= len(text):
            return text, CURSOR_BLOCK, ""
        return text[:pos], text[pos], text[pos + 1 :]


@dataclass
class InputState(CursorEditable):
    """Text being typed into an add/modify popup."""

    text: str = ""
    cursor_pos: int = 0
    is_modifying: bool = False
    subject_id: int | str | None = None

    def get_text(self) -> str:
        return self.text

    def set_text(self, text: str) -> None:
        self.text = text

    def get_cursor(self) -> int:
        return self.cursor_pos

    def set_cursor(self, position: int) -> None:
        self.cursor_pos = position

    def begin_create(self) -> None:
        self.reset()

    def begin_modify(self, subject_id: int | str, current_text: str) -> None:
        """Pre-fill with an existing name, cursor at the end."""
        self.text = current_text
        self.cursor_pos = len(current_text)
        self.is_modifying = True
        self.subject_id = subject_id

    def reset(self) -> None:
        self.clear()
        self.is_modifying = False
        self.subject_id = None

    @property
    def value(self) -> str:
        """Submitted value: the text with surrounding whitespace removed."""
        return self.text.strip()
