"""Tests for selection-aware ordered collections."""

from __future__ import annotations

import pytest

from judo.domains.todos.app.collection import ListCollection
from judo.domains.todos.store.sqlite import StorageError


def make_lists(store, names: list[str]) -> ListCollection:
    for name in names:
        store.create_list(name)
    lists = ListCollection(store)
    lists.reload()
    return lists


def names(collection) -> list[str]:
    return [entry.name for entry in collection.entries]


class TestCreateAndRename:
    def test_create_appends_and_keeps_selection(self, store):
        lists = make_lists(store, ["A"])
        lists.select_first()
        lists.create("B")
        assert names(lists) == ["A", "B"]
        assert lists.selected_index == 0

    def test_rename_updates_store_and_memory(self, store):
        lists = make_lists(store, [])
        lists.create("X")
        lists.select_first()
        assert lists.update_name("Y") is True
        assert names(lists) == ["Y"]
        assert [todo_list.name for todo_list in store.list_all_lists()] == ["Y"]

    def test_rename_without_selection_is_noop(self, store):
        lists = make_lists(store, ["A"])
        assert lists.update_name("B") is False
        assert names(lists) == ["A"]

    def test_create_then_delete_keeps_length(self, store):
        lists = make_lists(store, ["A", "B"])
        lists.create("C")
        lists.select_last()
        lists.delete_selected()
        assert len(lists) == 2


class TestDeleteSelected:
    @pytest.mark.parametrize(
        ("count", "index", "expected"),
        [
            (1, 0, None),
            (3, 0, 0),
            (3, 1, 1),
            (3, 2, 1),
        ],
    )
    def test_selection_after_delete(self, store, count, index, expected):
        lists = make_lists(store, [f"L{i}" for i in range(count)])
        lists.select_index(index)
        lists.delete_selected()
        assert lists.selected_index == expected

    def test_delete_without_selection_is_noop(self, store):
        lists = make_lists(store, ["A"])
        assert lists.delete_selected() is False
        assert len(lists) == 1


class TestReorder:
    def test_move_down_follows_entry(self, store):
        lists = make_lists(store, ["A", "B", "C"])
        lists.select_index(1)
        assert lists.move_selected_down_by(1) == 1
        assert names(lists) == ["A", "C", "B"]
        assert lists.selected_index == 2

    def test_move_up_is_clamped_to_index(self, store):
        lists = make_lists(store, ["A", "B", "C", "D"])
        lists.select_index(2)
        assert lists.move_selected_up_by(5) == 2
        assert names(lists) == ["C", "A", "B", "D"]
        assert lists.selected_index == 0

    def test_move_at_boundary_is_noop(self, store):
        lists = make_lists(store, ["A", "B"])
        lists.select_last()
        assert lists.move_selected_down_by(3) == 0
        assert names(lists) == ["A", "B"]
        assert lists.selected_index == 1

    def test_store_failure_leaves_memory_untouched(self, store):
        lists = make_lists(store, ["A", "B"])
        lists.select_first()
        store.close()
        with pytest.raises(StorageError):
            lists.move_selected_down_by(1)
        assert names(lists) == ["A", "B"]
        assert lists.selected_index == 0


class TestItems:
    def test_items_loaded_per_selected_list(self, store):
        groceries = store.create_list("Groceries")
        store.create_list("Chores")
        store.create_item(groceries.id, "Milk")
        lists = ListCollection(store)
        lists.reload()

        assert lists.selected_items is None
        lists.select_first()
        items = lists.selected_items
        assert [item.name for item in items.entries] == ["Milk"]
        lists.select_next()
        assert lists.selected_items.entries == []

    def test_toggle_selected_done(self, store):
        todo_list = store.create_list("L")
        store.create_item(todo_list.id, "task")
        lists = ListCollection(store)
        lists.reload()
        items = lists.items_for(todo_list.id)
        items.select_first()
        items.toggle_selected_done()
        assert items.selected.is_done is True

    def test_reload_prunes_items_of_deleted_lists(self, store):
        lists = make_lists(store, ["A", "B"])
        lists.select_first()
        first_id = lists.selected.id
        lists.selected_items
        lists.delete_selected()
        assert first_id not in lists._items
