"""Tests for the delete confirmation popups."""

from __future__ import annotations

import pytest

from judo.domains.shell.app.interpreter import KeyInterpreter
from judo.domains.shell.state import ConfirmDelete, NoConfirmation, Screen


def list_names(state):
    return [entry.name for entry in state.lists.entries]


class TestDeleteList:
    def test_d_asks_for_confirmation(self, make_state, press):
        state = make_state({"A": [], "B": ["x"], "C": []}, select=1)
        press(KeyInterpreter(state), "d")
        assert state.screen is Screen.DELETE_LIST_CONFIRMATION
        assert isinstance(state.confirmation, ConfirmDelete)
        assert state.confirmation.name == "B"
        assert list_names(state) == ["A", "B", "C"]

    def test_y_deletes_list_and_its_items(self, make_state, press):
        state = make_state({"A": [], "B": ["x"], "C": []}, select=1)
        doomed = state.lists.selected.id
        press(KeyInterpreter(state), "d", "y")
        assert list_names(state) == ["A", "C"]
        assert state.lists.selected.name == "C"
        assert state.store.list_items(doomed) == []
        assert state.screen is Screen.LISTS
        assert isinstance(state.confirmation, NoConfirmation)

    @pytest.mark.parametrize("key", ["n", "escape"])
    def test_decline_keeps_list(self, make_state, press, key):
        state = make_state({"A": [], "B": []}, select=0)
        press(KeyInterpreter(state), "d", key)
        assert list_names(state) == ["A", "B"]
        assert state.screen is Screen.LISTS
        assert isinstance(state.confirmation, NoConfirmation)

    def test_other_keys_are_ignored(self, make_state, press):
        state = make_state({"A": [], "B": []}, select=0)
        press(KeyInterpreter(state), "d", "j", "q", "3", "x", "enter")
        assert state.screen is Screen.DELETE_LIST_CONFIRMATION
        assert state.should_exit is False
        assert state.lists.selected_index == 0

    def test_nothing_selected_does_nothing(self, make_state, press):
        state = make_state({"A": []})
        press(KeyInterpreter(state), "d")
        assert state.screen is Screen.LISTS
        assert isinstance(state.confirmation, NoConfirmation)

    def test_deleting_last_entry_moves_selection_up(self, make_state, press):
        state = make_state({"A": [], "B": []}, select=1)
        press(KeyInterpreter(state), "d", "y")
        assert state.lists.selected_index == 0
        press(KeyInterpreter(state), "d", "y")
        assert state.lists.selected is None
        assert state.items is None
