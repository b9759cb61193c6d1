"""Key actions for the database-selection screen."""

from __future__ import annotations

from typing import TYPE_CHECKING

from judo.domains.shell.state import ConfirmDelete, Screen

if TYPE_CHECKING:
    from judo.domains.shell.app.state import AppState


class DatabaseActionsMixin:
    """Switch between, add, rename and remove todo databases."""

    state: AppState

    def action_switch_database(self) -> None:
        registry = self.state.registry
        selected = registry.selected
        if selected is None:
            return
        if selected.name != registry.active_name:
            store = registry.open(selected.name)
            self.state.replace_store(store)
            self.state.notify(f"Using database '{selected.name}'")
        self.state.change_screen(Screen.LISTS)

    def action_add_database(self) -> None:
        self.state.input.begin_create()
        self.state.change_screen(Screen.ADD_DATABASE)

    def action_modify_database(self) -> None:
        selected = self.state.registry.selected
        if selected is None:
            return
        self.state.input.begin_modify(selected.name, selected.name)
        self.state.change_screen(Screen.MODIFY_DATABASE)

    def action_delete_database(self) -> None:
        registry = self.state.registry
        selected = registry.selected
        if selected is None:
            return
        if selected.name == registry.active_name:
            self.state.notify(f"'{selected.name}' is in use and cannot be deleted", severity="warning")
            return
        self.state.confirmation = ConfirmDelete("database", selected.name, selected.name)
        self.state.change_screen(Screen.DELETE_DATABASE_CONFIRMATION)

    def action_set_default_database(self) -> None:
        registry = self.state.registry
        if registry.set_selected_as_default():
            self.state.notify(f"'{registry.default_name}' is now the default database")
