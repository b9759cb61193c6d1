"""Tests for navigation and screen switching keys."""

from __future__ import annotations

from judo.domains.shell.app.interpreter import KeyInterpreter
from judo.domains.shell.state import Screen


def list_names(state) -> list[str]:
    return [entry.name for entry in state.lists.entries]


class TestListNavigation:
    def test_j_and_k_wrap(self, make_state, press):
        state = make_state({"A": [], "B": [], "C": []}, select=0)
        interpreter = KeyInterpreter(state)

        press(interpreter, "k")
        assert state.lists.selected_index == 2
        press(interpreter, "j")
        assert state.lists.selected_index == 0
        press(interpreter, "down", "down")
        assert state.lists.selected_index == 2

    def test_G_selects_last(self, make_state, press):
        state = make_state({"A": [], "B": [], "C": []}, select=0)
        press(KeyInterpreter(state), "G")
        assert state.lists.selected_index == 2

    def test_h_deselects(self, make_state, press):
        state = make_state({"A": []}, select=0)
        press(KeyInterpreter(state), "h")
        assert state.lists.selected is None


class TestReorderKeys:
    def test_shift_down_moves_selected_list(self, make_state, press):
        state = make_state({"A": [], "B": [], "C": []}, select=1)
        press(KeyInterpreter(state), "shift+down")

        assert list_names(state) == ["A", "C", "B"]
        assert [todo_list.name for todo_list in state.store.list_all_lists()] == ["A", "C", "B"]
        assert state.lists.selected_index == 2

    def test_K_moves_up(self, make_state, press):
        state = make_state({"A": [], "B": [], "C": []}, select=2)
        press(KeyInterpreter(state), "K")
        assert list_names(state) == ["A", "C", "B"]
        assert state.lists.selected_index == 1

    def test_reorder_items(self, make_state, press):
        state = make_state({"L": ["one", "two", "three"]}, select=0)
        interpreter = KeyInterpreter(state)
        press(interpreter, "enter", "J")
        assert [item.name for item in state.items.entries] == ["two", "one", "three"]
        assert state.items.selected_index == 1


class TestScreenSwitching:
    def test_enter_opens_items_and_selects_first(self, make_state, press):
        state = make_state({"L": ["one", "two"]}, select=0)
        press(KeyInterpreter(state), "enter")
        assert state.screen is Screen.ITEMS
        assert state.items.selected_index == 0

    def test_enter_without_selected_list_stays(self, make_state, press):
        state = make_state({"L": ["one"]})
        press(KeyInterpreter(state), "enter")
        assert state.screen is Screen.LISTS

    def test_h_on_items_returns_to_lists(self, make_state, press):
        state = make_state({"L": ["one"]}, select=0)
        interpreter = KeyInterpreter(state)
        press(interpreter, "enter", "h")
        assert state.screen is Screen.LISTS
        assert state.lists.selected_index == 0
        assert state.lists.items_for(state.lists.selected.id).selected is None

    def test_tab_cycles_primary_screens(self, make_state, press):
        state = make_state({"L": []}, select=0)
        interpreter = KeyInterpreter(state)
        press(interpreter, "tab")
        assert state.screen is Screen.ITEMS
        press(interpreter, "tab")
        assert state.screen is Screen.DATABASES
        press(interpreter, "tab")
        assert state.screen is Screen.LISTS
        press(interpreter, "shift+tab")
        assert state.screen is Screen.DATABASES

    def test_tab_skips_items_without_selection(self, make_state, press):
        state = make_state({"L": []})
        press(KeyInterpreter(state), "tab")
        assert state.screen is Screen.DATABASES

    def test_entering_databases_selects_active(self, make_state, press):
        state = make_state()
        state.registry.select_last()
        press(KeyInterpreter(state), "tab")
        assert state.screen is Screen.DATABASES
        assert state.registry.selected.name == "dojo"

    def test_q_sets_exit_flag(self, make_state, press):
        state = make_state()
        press(KeyInterpreter(state), "q")
        assert state.should_exit is True


class TestItemKeys:
    def test_toggle_done_with_x(self, make_state, press):
        state = make_state({"L": ["task"]}, select=0)
        interpreter = KeyInterpreter(state)
        press(interpreter, "enter", "x")
        assert state.items.selected.is_done is True
        press(interpreter, "enter")
        assert state.items.selected.is_done is False

    def test_delete_item_is_immediate(self, make_state, press):
        state = make_state({"L": ["one", "two"]}, select=0)
        interpreter = KeyInterpreter(state)
        press(interpreter, "enter", "G", "d")
        assert [item.name for item in state.items.entries] == ["one"]
        assert state.items.selected_index == 0
        assert state.screen is Screen.ITEMS
