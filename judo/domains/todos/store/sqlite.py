"""SQLite persistence for todo lists and items."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path

from judo.domains.todos.domain.models import Priority, TodoItem, TodoList
from judo.shared.core.debug_events import emit_debug_event

MEMORY_PATH = ":memory:"

# Applied in order; PRAGMA user_version records how many have run.
MIGRATIONS: tuple[str, ...] = (
    """
    CREATE TABLE todo_lists (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL
    );
    CREATE TABLE todo_items (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        list_id INTEGER NOT NULL,
        name TEXT NOT NULL,
        is_done BOOLEAN NOT NULL DEFAULT FALSE,
        priority TEXT CHECK (priority IN ('high', 'medium', 'low') OR priority IS NULL),
        due_date TEXT,
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL,
        FOREIGN KEY (list_id) REFERENCES todo_lists (id) ON DELETE CASCADE
    );
    CREATE INDEX idx_todo_items_list_id ON todo_items(list_id);
    CREATE INDEX idx_todo_items_is_done ON todo_items(is_done);
    """,
    """
    ALTER TABLE todo_lists ADD COLUMN ordering INTEGER NOT NULL DEFAULT 0;
    UPDATE todo_lists SET ordering = (
        SELECT COUNT(*) FROM todo_lists t2 WHERE t2.created_at <= todo_lists.created_at
    );
    ALTER TABLE todo_items ADD COLUMN ordering INTEGER NOT NULL DEFAULT 0;
    UPDATE todo_items SET ordering = (
        SELECT COUNT(*) FROM todo_items t2
        WHERE t2.list_id = todo_items.list_id AND t2.created_at <= todo_items.created_at
    );
    CREATE INDEX idx_todo_lists_ordering ON todo_lists(ordering);
    CREATE INDEX idx_todo_items_list_ordering ON todo_items(list_id, ordering);
    """,
)

_LIST_COLUMNS = "id, name, ordering, created_at, updated_at"
_ITEM_COLUMNS = "id, list_id, name, is_done, priority, due_date, ordering, created_at, updated_at"


class StorageError(Exception):
    """Raised when a storage operation cannot be completed."""


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class TodoStore:
    """Todo lists and items stored in a single SQLite database.

    Lists are ordered globally and items are ordered within their list by
    the ``ordering`` column. New entries are appended at the end of their
    scope; reordering renumbers the whole scope inside one transaction.
    Every failure surfaces as :class:`StorageError`.
    """

    def __init__(self, path: str | Path = MEMORY_PATH) -> None:
        self.path = str(path)
        try:
            self._conn = sqlite3.connect(self.path)
            self._conn.row_factory = sqlite3.Row
            self._conn.execute("PRAGMA foreign_keys = ON")
            self._migrate()
        except sqlite3.Error as exc:
            raise StorageError(f"Could not open database {self.path}: {exc}") from exc
        emit_debug_event("store.opened", path=self.path)

    @classmethod
    def open(cls, path: str | Path) -> TodoStore:
        """Open a file-backed store, creating parent directories as needed."""
        if str(path) != MEMORY_PATH:
            try:
                Path(path).parent.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise StorageError(f"Could not create directory for {path}: {exc}") from exc
        return cls(path)

    def close(self) -> None:
        self._conn.close()

    @property
    def schema_version(self) -> int:
        return int(self._conn.execute("PRAGMA user_version").fetchone()[0])

    def _migrate(self) -> None:
        current = self.schema_version
        for version, script in enumerate(MIGRATIONS[current:], start=current + 1):
            self._conn.executescript(f"BEGIN;\n{script}\nPRAGMA user_version = {version};\nCOMMIT;")
            emit_debug_event("store.migrated", path=self.path, version=version)

    @contextmanager
    def _transaction(self, operation: str) -> Iterator[sqlite3.Connection]:
        try:
            with self._conn:
                yield self._conn
        except sqlite3.Error as exc:
            emit_debug_event("store.error", operation=operation, error=str(exc))
            raise StorageError(f"{operation} failed: {exc}") from exc

    def _read(self, operation: str, sql: str, params: tuple = ()) -> list[sqlite3.Row]:
        try:
            return self._conn.execute(sql, params).fetchall()
        except sqlite3.Error as exc:
            emit_debug_event("store.error", operation=operation, error=str(exc))
            raise StorageError(f"{operation} failed: {exc}") from exc

    # Lists

    def create_list(self, name: str) -> TodoList:
        now = _now()
        with self._transaction("create list") as conn:
            cursor = conn.execute(
                "INSERT INTO todo_lists (name, ordering, created_at, updated_at) "
                "VALUES (?, (SELECT COALESCE(MAX(ordering), 0) + 1 FROM todo_lists), ?, ?)",
                (name, now, now),
            )
            list_id = cursor.lastrowid
        return self.get_list(list_id)

    def get_list(self, list_id: int) -> TodoList:
        rows = self._read("get list", f"SELECT {_LIST_COLUMNS} FROM todo_lists WHERE id = ?", (list_id,))
        if not rows:
            raise StorageError(f"List {list_id} not found")
        return TodoList.from_row(rows[0])

    def list_all_lists(self) -> list[TodoList]:
        rows = self._read("load lists", f"SELECT {_LIST_COLUMNS} FROM todo_lists ORDER BY ordering, id")
        return [TodoList.from_row(row) for row in rows]

    def rename_list(self, list_id: int, name: str) -> None:
        with self._transaction("rename list") as conn:
            cursor = conn.execute(
                "UPDATE todo_lists SET name = ?, updated_at = ? WHERE id = ?",
                (name, _now(), list_id),
            )
            if cursor.rowcount == 0:
                raise StorageError(f"List {list_id} not found")

    def delete_list(self, list_id: int) -> None:
        """Delete a list together with all of its items."""
        with self._transaction("delete list") as conn:
            cursor = conn.execute("DELETE FROM todo_lists WHERE id = ?", (list_id,))
            if cursor.rowcount == 0:
                raise StorageError(f"List {list_id} not found")

    def move_list(self, list_id: int, delta: int) -> None:
        """Shift a list ``delta`` positions (negative is up), clamped to the ends."""
        with self._transaction("move list") as conn:
            ids = [row["id"] for row in conn.execute("SELECT id FROM todo_lists ORDER BY ordering, id")]
            self._resequence(conn, "todo_lists", ids, list_id, delta)

    # Items

    def create_item(
        self,
        list_id: int,
        name: str,
        priority: Priority | None = None,
        due_date: datetime | None = None,
    ) -> TodoItem:
        now = _now()
        with self._transaction("create item") as conn:
            cursor = conn.execute(
                "INSERT INTO todo_items "
                "(list_id, name, is_done, priority, due_date, ordering, created_at, updated_at) "
                "VALUES (?, ?, 0, ?, ?, "
                "(SELECT COALESCE(MAX(ordering), 0) + 1 FROM todo_items WHERE list_id = ?), ?, ?)",
                (
                    list_id,
                    name,
                    priority.value if priority else None,
                    due_date.isoformat() if due_date else None,
                    list_id,
                    now,
                    now,
                ),
            )
            item_id = cursor.lastrowid
        return self.get_item(item_id)

    def get_item(self, item_id: int) -> TodoItem:
        rows = self._read("get item", f"SELECT {_ITEM_COLUMNS} FROM todo_items WHERE id = ?", (item_id,))
        if not rows:
            raise StorageError(f"Item {item_id} not found")
        return TodoItem.from_row(rows[0])

    def list_items(self, list_id: int) -> list[TodoItem]:
        rows = self._read(
            "load items",
            f"SELECT {_ITEM_COLUMNS} FROM todo_items WHERE list_id = ? ORDER BY ordering, id",
            (list_id,),
        )
        return [TodoItem.from_row(row) for row in rows]

    def rename_item(self, item_id: int, name: str) -> None:
        self._update_item("rename item", item_id, "name = ?", (name,))

    def toggle_item_done(self, item_id: int) -> None:
        self._update_item("toggle item", item_id, "is_done = NOT is_done", ())

    def set_item_priority(self, item_id: int, priority: Priority | None) -> None:
        self._update_item("set priority", item_id, "priority = ?", (priority.value if priority else None,))

    def set_item_due_date(self, item_id: int, due_date: datetime | None) -> None:
        self._update_item("set due date", item_id, "due_date = ?", (due_date.isoformat() if due_date else None,))

    def delete_item(self, item_id: int) -> None:
        with self._transaction("delete item") as conn:
            cursor = conn.execute("DELETE FROM todo_items WHERE id = ?", (item_id,))
            if cursor.rowcount == 0:
                raise StorageError(f"Item {item_id} not found")

    def move_item(self, item_id: int, delta: int) -> None:
        """Shift an item ``delta`` positions within its list, clamped to the ends."""
        with self._transaction("move item") as conn:
            row = conn.execute("SELECT list_id FROM todo_items WHERE id = ?", (item_id,)).fetchone()
            if row is None:
                raise StorageError(f"Item {item_id} not found")
            ids = [
                r["id"]
                for r in conn.execute(
                    "SELECT id FROM todo_items WHERE list_id = ? ORDER BY ordering, id",
                    (row["list_id"],),
                )
            ]
            self._resequence(conn, "todo_items", ids, item_id, delta)

    def _update_item(self, operation: str, item_id: int, assignment: str, params: tuple) -> None:
        with self._transaction(operation) as conn:
            cursor = conn.execute(
                f"UPDATE todo_items SET {assignment}, updated_at = ? WHERE id = ?",
                (*params, _now(), item_id),
            )
            if cursor.rowcount == 0:
                raise StorageError(f"Item {item_id} not found")

    @staticmethod
    def _resequence(conn: sqlite3.Connection, table: str, ids: list[int], target_id: int, delta: int) -> None:
        if target_id not in ids:
            raise StorageError(f"{table} row {target_id} not found")
        position = ids.index(target_id)
        new_position = max(0, min(position + delta, len(ids) - 1))
        ids.insert(new_position, ids.pop(position))
        now = _now()
        conn.executemany(
            f"UPDATE {table} SET ordering = ?, updated_at = CASE WHEN id = ? THEN ? ELSE updated_at END WHERE id = ?",
            [(ordering, target_id, now, row_id) for ordering, row_id in enumerate(ids, start=1)],
        )
