"""Selection-aware ordered collections of lists and items."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from judo.core.selection import Direction, SelectionState
from judo.domains.todos.domain.models import TodoItem, TodoList
from judo.domains.todos.store.sqlite import TodoStore

EntityT = TypeVar("EntityT", TodoList, TodoItem)


class OrderedCollection(ABC, Generic[EntityT]):
    """In-memory mirror of one persisted, ordered scope plus its selection.

    Every mutation goes to the store first and then reloads, so the
    entries always reflect persisted order. Store failures propagate as
    ``StorageError`` with the in-memory state untouched.
    """

    def __init__(self, store: TodoStore) -> None:
        self._store = store
        self.entries: list[EntityT] = []
        self.selection = SelectionState()

    @abstractmethod
    def _fetch(self) -> list[EntityT]: ...

    @abstractmethod
    def _create(self, name: str) -> EntityT: ...

    @abstractmethod
    def _rename(self, entity_id: int, name: str) -> None: ...

    @abstractmethod
    def _delete(self, entity_id: int) -> None: ...

    @abstractmethod
    def _move(self, entity_id: int, delta: int) -> None: ...

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def selected_index(self) -> int | None:
        return self.selection.index

    @property
    def selected(self) -> EntityT | None:
        if self.selection.index is None:
            return None
        return self.entries[self.selection.index]

    def reload(self) -> None:
        self.entries = self._fetch()
        self.selection.resize(len(self.entries))

    def select_next(self) -> None:
        self.selection.select_next()

    def select_previous(self) -> None:
        self.selection.select_previous()

    def select_first(self, *, keep_existing: bool = False) -> None:
        self.selection.select_first(keep_existing=keep_existing)

    def select_last(self) -> None:
        self.selection.select_last()

    def select_index(self, index: int) -> None:
        self.selection.select(index)

    def scroll_by(self, amount: int, direction: Direction) -> None:
        self.selection.scroll_by(amount, direction)

    def deselect(self) -> None:
        self.selection.deselect()

    def create(self, name: str) -> EntityT:
        entity = self._create(name)
        self.reload()
        return entity

    def update_name(self, name: str) -> bool:
        entity = self.selected
        if entity is None:
            return False
        self._rename(entity.id, name)
        self.reload()
        return True

    def delete_selected(self) -> bool:
        """Delete the selected entry; the selection stays in place or moves to the new last entry."""
        entity = self.selected
        if entity is None:
            return False
        self._delete(entity.id)
        self.reload()
        return True

    def move_selected_up_by(self, amount: int = 1) -> int:
        """Move the selected entry up; returns how many positions it actually moved."""
        index = self.selection.index
        if index is None:
            return 0
        steps = min(amount, index)
        return self._shift_selected(index, -steps)

    def move_selected_down_by(self, amount: int = 1) -> int:
        index = self.selection.index
        if index is None:
            return 0
        steps = min(amount, len(self.entries) - 1 - index)
        return self._shift_selected(index, steps)

    def _shift_selected(self, index: int, delta: int) -> int:
        if delta == 0:
            return 0
        self._move(self.entries[index].id, delta)
        self.reload()
        self.selection.select(index + delta)
        return abs(delta)


class ItemCollection(OrderedCollection[TodoItem]):
    """Items of a single list."""

    def __init__(self, store: TodoStore, list_id: int) -> None:
        super().__init__(store)
        self.list_id = list_id

    def _fetch(self) -> list[TodoItem]:
        return self._store.list_items(self.list_id)

    def _create(self, name: str) -> TodoItem:
        return self._store.create_item(self.list_id, name)

    def _rename(self, entity_id: int, name: str) -> None:
        self._store.rename_item(entity_id, name)

    def _delete(self, entity_id: int) -> None:
        self._store.delete_item(entity_id)

    def _move(self, entity_id: int, delta: int) -> None:
        self._store.move_item(entity_id, delta)

    def toggle_selected_done(self) -> bool:
        item = self.selected
        if item is None:
            return False
        self._store.toggle_item_done(item.id)
        self.reload()
        return True


class ListCollection(OrderedCollection[TodoList]):
    """All lists of the active database, each with its own item collection."""

    def __init__(self, store: TodoStore) -> None:
        super().__init__(store)
        self._items: dict[int, ItemCollection] = {}

    def _fetch(self) -> list[TodoList]:
        return self._store.list_all_lists()

    def _create(self, name: str) -> TodoList:
        return self._store.create_list(name)

    def _rename(self, entity_id: int, name: str) -> None:
        self._store.rename_list(entity_id, name)

    def _delete(self, entity_id: int) -> None:
        self._store.delete_list(entity_id)

    def _move(self, entity_id: int, delta: int) -> None:
        self._store.move_list(entity_id, delta)

    def reload(self) -> None:
        super().reload()
        live_ids = {entry.id for entry in self.entries}
        for list_id in list(self._items):
            if list_id not in live_ids:
                del self._items[list_id]

    def items_for(self, list_id: int) -> ItemCollection:
        """Item collection of a list, loaded on first access."""
        items = self._items.get(list_id)
        if items is None:
            items = ItemCollection(self._store, list_id)
            items.reload()
            self._items[list_id] = items
        return items

    @property
    def selected_items(self) -> ItemCollection | None:
        selected = self.selected
        if selected is None:
            return None
        return self.items_for(selected.id)
