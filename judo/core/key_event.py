"""UI-agnostic key press representation."""

from __future__ import annotations

from dataclasses import dataclass

# Textual reports shifted letters by their character ("J") rather than "shift+j".
_CHARACTER_ALIASES: dict[str, str] = {
    " ": "space",
    "?": "question_mark",
    "/": "slash",
}


@dataclass(frozen=True)
class KeyPress:
    """A single key event.

    ``key`` uses Textual key names ("j", "J", "shift+down", "ctrl+h",
    "escape", "space"); ``character`` is the printable character produced,
    if any.
    """

    key: str
    character: str | None = None

    @classmethod
    def from_char(cls, char: str) -> KeyPress:
        """Build a key press for a typed character."""
        return cls(_CHARACTER_ALIASES.get(char, char), char)

    @property
    def modifiers(self) -> set[str]:
        parts = self.key.split("+")
        return set(parts[:-1])

    @property
    def shift(self) -> bool:
        if "shift" in self.modifiers:
            return True
        base = self.key.split("+")[-1]
        return len(base) == 1 and base.isalpha() and base.isupper()

    @property
    def ctrl(self) -> bool:
        return "ctrl" in self.modifiers

    @property
    def is_digit(self) -> bool:
        return len(self.key) == 1 and self.key.isdigit()

    @property
    def digit(self) -> int | None:
        return int(self.key) if self.is_digit else None

    @property
    def is_printable(self) -> bool:
        return (
            self.character is not None
            and len(self.character) == 1
            and self.character.isprintable()
            and not self.ctrl
        )

    @property
    def label(self) -> str:
        """Short label for the recent-keys display."""
        if self.character and self.is_printable and self.character != " ":
            return self.character
        from judo.core.keymap import format_key

        return format_key(self.key)
