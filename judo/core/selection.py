"""Selection index bookkeeping for ordered, navigable collections."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    UP = "up"
    DOWN = "down"


@dataclass
class SelectionState:
    """Optional selected index over a collection of known length.

    Invariant: when ``length`` is zero ``index`` is None; otherwise
    ``index`` is None or ``0 <= index < length``.
    """

    index: int | None = None
    length: int = 0

    @property
    def has_selection(self) -> bool:
        return self.index is not None

    def resize(self, length: int) -> None:
        """Update the collection length and clamp the index into range."""
        self.length = max(0, length)
        if self.length == 0:
            self.index = None
        elif self.index is not None and self.index >= self.length:
            self.index = self.length - 1

    def select(self, index: int | None) -> None:
        if index is None or self.length == 0:
            self.index = None
            return
        self.index = max(0, min(index, self.length - 1))

    def deselect(self) -> None:
        self.index = None

    def select_next(self) -> None:
        if self.length == 0:
            return
        if self.index is None:
            self.index = 0
        else:
            self.index = (self.index + 1) % self.length

    def select_previous(self) -> None:
        if self.length == 0:
            return
        if self.index is None:
            self.index = self.length - 1
        else:
            self.index = (self.index - 1) % self.length

    def select_first(self, *, keep_existing: bool = False) -> None:
        if self.length == 0 or (keep_existing and self.index is not None):
            return
        self.index = 0

    def select_last(self) -> None:
        if self.length == 0:
            return
        self.index = self.length - 1

    def scroll_by(self, amount: int, direction: Direction) -> None:
        """Move by ``amount`` steps, stopping at the first or last entry.

        With nothing selected, moving down counts from just above the first
        entry and moving up from just below the last one.
        """
        if amount <= 0 or self.length == 0:
            return
        if direction is Direction.DOWN:
            start = -1 if self.index is None else self.index
            self.index = min(start + amount, self.length - 1)
        else:
            start = self.length if self.index is None else self.index
            self.index = max(start - amount, 0)
