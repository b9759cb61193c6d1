"""Key actions for the list and item screens."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from judo.domains.shell.state import ConfirmDelete, Screen

if TYPE_CHECKING:
    from judo.domains.shell.app.state import AppState


class ListActionsMixin:
    """Actions available on the list-selection screen."""

    state: AppState
    _enter_primary: Callable[[Screen], bool]

    def action_open_list(self) -> None:
        self._enter_primary(Screen.ITEMS)

    def action_deselect_list(self) -> None:
        self.state.lists.deselect()

    def action_add_list(self) -> None:
        self.state.input.begin_create()
        self.state.change_screen(Screen.ADD_LIST)

    def action_modify_list(self) -> None:
        selected = self.state.lists.selected
        if selected is None:
            return
        self.state.input.begin_modify(selected.id, selected.name)
        self.state.change_screen(Screen.MODIFY_LIST)

    def action_delete_list(self) -> None:
        selected = self.state.lists.selected
        if selected is None:
            return
        self.state.confirmation = ConfirmDelete("list", selected.name, selected.id)
        self.state.change_screen(Screen.DELETE_LIST_CONFIRMATION)

    def action_add_item(self) -> None:
        # Items always belong to the selected list.
        if self.state.lists.selected is None:
            return
        self.state.input.begin_create()
        self.state.change_screen(Screen.ADD_ITEM)


class ItemActionsMixin:
    """Actions available on the item-selection screen."""

    state: AppState

    def action_toggle_done(self) -> None:
        items = self.state.items
        if items is not None:
            items.toggle_selected_done()

    def action_modify_item(self) -> None:
        items = self.state.items
        selected = items.selected if items is not None else None
        if selected is None:
            return
        self.state.input.begin_modify(selected.id, selected.name)
        self.state.change_screen(Screen.MODIFY_ITEM)

    def action_delete_item(self) -> None:
        items = self.state.items
        if items is not None:
            items.delete_selected()

    def action_leave_items(self) -> None:
        items = self.state.items
        if items is not None:
            items.deselect()
        self.state.change_screen(Screen.LISTS)

    def action_enter_items(self) -> None:
        items = self.state.items
        if items is not None:
            items.select_first(keep_existing=True)
