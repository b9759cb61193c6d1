"""Domain types for todo lists and their items."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any


class Priority(Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @classmethod
    def parse(cls, value: str | None) -> Priority | None:
        if value is None:
            return None
        return cls(value.lower())


def _parse_timestamp(value: str | None) -> datetime | None:
    if not value:
        return None
    return datetime.fromisoformat(value)


@dataclass
class TodoList:
    """A named list; ``ordering`` positions it among all lists."""

    id: int
    name: str
    ordering: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_row(cls, row: Any) -> TodoList:
        return cls(
            id=row["id"],
            name=row["name"],
            ordering=row["ordering"],
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )


@dataclass
class TodoItem:
    """An entry of a list; ``ordering`` positions it within its list."""

    id: int
    list_id: int
    name: str
    is_done: bool
    ordering: int
    created_at: datetime
    updated_at: datetime
    priority: Priority | None = None
    due_date: datetime | None = None

    @classmethod
    def from_row(cls, row: Any) -> TodoItem:
        return cls(
            id=row["id"],
            list_id=row["list_id"],
            name=row["name"],
            is_done=bool(row["is_done"]),
            ordering=row["ordering"],
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
            priority=Priority.parse(row["priority"]),
            due_date=_parse_timestamp(row["due_date"]),
        )
