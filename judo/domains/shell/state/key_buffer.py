"""Recent keystrokes and the numeric repeat count."""

from __future__ import annotations

from dataclasses import dataclass, field

from judo.core.key_event import KeyPress

# Keys that may continue a counted or repeated motion.
REPEATABLE_KEYS = frozenset({"j", "k", "J", "K", "g", "G", "up", "down", "shift+up", "shift+down"})

MAX_BUFFERED_KEYS = 12


@dataclass
class KeyBuffer:
    """Trailing keystrokes of the command being typed, for display.

    Holds ``(label, is_digit)`` pairs. Digits start a new run after a
    completed motion, repeatable keys extend the run, and any other key
    clears it.
    """

    entries: list[tuple[str, bool]] = field(default_factory=list)

    def push(self, press: KeyPress) -> None:
        if press.is_digit:
            if self.entries and not self.entries[-1][1]:
                self.entries.clear()
            self.entries.append((press.key, True))
        elif press.key in REPEATABLE_KEYS:
            self.entries.append((press.label, False))
        else:
            self.entries.clear()
            return
        del self.entries[:-MAX_BUFFERED_KEYS]

    def reset(self) -> None:
        self.entries.clear()

    @property
    def labels(self) -> list[str]:
        return [label for label, _ in self.entries]

    def __len__(self) -> int:
        return len(self.entries)


@dataclass
class NumberModifier:
    """Repeat count typed before a command."""

    value: int = 0

    def push_digit(self, digit: int, limit: int) -> None:
        """Append a digit, never exceeding ``limit`` (the active collection size)."""
        self.value = max(0, min(self.value * 10 + digit, limit))

    def take(self) -> int:
        """Return the count and reset it."""
        value = self.value
        self.value = 0
        return value

    def reset(self) -> None:
        self.value = 0

    def __bool__(self) -> bool:
        return self.value > 0
