"""Global, navigation, text-entry and confirmation actions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from judo.core.selection import Direction
from judo.domains.databases.app.registry import DatabaseRegistry
from judo.domains.shell.state import AwaitingLeader, AwaitingSecondKey, ConfirmDelete, NoConfirmation, Screen
from judo.domains.todos.app.collection import ItemCollection, ListCollection

if TYPE_CHECKING:
    from judo.domains.shell.app.state import AppState

Navigable = Union[ListCollection, ItemCollection, DatabaseRegistry]


class ShellActionsMixin:
    """Screen switching, help, leader menu and quitting."""

    state: AppState

    def _enter_primary(self, screen: Screen) -> bool:
        """Switch to a primary screen, preparing its selection.

        The items screen needs a selected list and selects its first item
        when none is selected; the database screen selects the database in use.
        """
        if screen is Screen.ITEMS:
            items = self.state.items
            if items is None:
                return False
            items.select_first(keep_existing=True)
        elif screen is Screen.DATABASES:
            self.state.registry.sync_selection()
        self.state.change_screen(screen)
        return True

    def action_cycle_next(self) -> None:
        self._cycle(1)

    def action_cycle_previous(self) -> None:
        self._cycle(-1)

    def _cycle(self, step: int) -> None:
        target = self.state.screens.cycle(step, items_available=self.state.lists.selected is not None)
        self._enter_primary(target)

    def action_show_lists(self) -> None:
        self._enter_primary(Screen.LISTS)

    def action_show_items(self) -> None:
        self._enter_primary(Screen.ITEMS)

    def action_show_databases(self) -> None:
        self._enter_primary(Screen.DATABASES)

    def action_show_help(self) -> None:
        self.state.change_screen(Screen.HELP)

    def action_close_help(self) -> None:
        self.state.go_back()

    def action_leader_key(self) -> None:
        self.state.change_screen(Screen.LEADER_HELP)
        self.state.pending = AwaitingLeader()

    def action_cancel_pending(self) -> None:
        self.state.reset_sequence()

    def action_quit(self) -> None:
        self.state.should_exit = True


class NavigationActionsMixin:
    """Cursor motion and reordering on the primary screens.

    Counted variants consume the pending repeat count.
    """

    state: AppState

    def _navigable(self) -> Navigable | None:
        screen = self.state.screen
        if screen is Screen.LISTS:
            return self.state.lists
        if screen is Screen.ITEMS:
            return self.state.items
        if screen is Screen.DATABASES:
            return self.state.registry
        return None

    def _reorderable(self) -> ListCollection | ItemCollection | None:
        if self.state.screen is Screen.LISTS:
            return self.state.lists
        if self.state.screen is Screen.ITEMS:
            return self.state.items
        return None

    def action_cursor_down(self) -> None:
        count = self.state.count.take()
        target = self._navigable()
        if target is None:
            return
        if count:
            target.scroll_by(count, Direction.DOWN)
        else:
            target.select_next()

    def action_cursor_up(self) -> None:
        count = self.state.count.take()
        target = self._navigable()
        if target is None:
            return
        if count:
            target.scroll_by(count, Direction.UP)
        else:
            target.select_previous()

    def action_goto_prefix(self) -> None:
        self.state.pending = AwaitingSecondKey("g")

    def action_goto_first(self) -> None:
        count = self.state.count.take()
        target = self._navigable()
        if target is None:
            return
        if count:
            target.select_index(count - 1)
        else:
            target.select_first()

    def action_goto_last(self) -> None:
        count = self.state.count.take()
        target = self._navigable()
        if target is None:
            return
        if count:
            target.select_index(count - 1)
        else:
            target.select_last()

    def action_reorder_down(self) -> None:
        count = self.state.count.take() or 1
        target = self._reorderable()
        if target is not None:
            target.move_selected_down_by(count)

    def action_reorder_up(self) -> None:
        count = self.state.count.take() or 1
        target = self._reorderable()
        if target is not None:
            target.move_selected_up_by(count)


class TextInputActionsMixin:
    """Editing and submitting the name popups."""

    state: AppState

    def action_insert_char(self, char: str) -> None:
        self.state.input.insert(char)

    def action_delete_before(self) -> None:
        self.state.input.delete_before()

    def action_delete_after(self) -> None:
        self.state.input.delete_after()

    def action_cursor_left(self) -> None:
        self.state.input.move_left()

    def action_cursor_right(self) -> None:
        self.state.input.move_right()

    def action_cursor_home(self) -> None:
        self.state.input.move_home()

    def action_cursor_end(self) -> None:
        self.state.input.move_end()

    def action_cancel_input(self) -> None:
        self.state.input.reset()
        self.state.go_back()

    def action_submit_input(self) -> None:
        """Create or rename from the typed name.

        A storage or config failure propagates before the popup closes, so
        the typed text survives for another attempt.
        """
        name = self.state.input.value
        if not name:
            self.state.notify("Name cannot be empty", severity="warning")
            return
        self._apply_input(self.state.screen, name)
        self.state.input.reset()
        self.state.go_back()

    def _apply_input(self, screen: Screen, name: str) -> None:
        state = self.state
        if screen is Screen.ADD_LIST:
            created = state.lists.create(name)
            _select_entity(state.lists, created.id)
        elif screen is Screen.MODIFY_LIST:
            if _select_entity(state.lists, state.input.subject_id):
                state.lists.update_name(name)
        elif screen is Screen.ADD_ITEM:
            items = state.items
            if items is None:
                return
            created_item = items.create(name)
            _select_entity(items, created_item.id)
        elif screen is Screen.MODIFY_ITEM:
            items = state.items
            if items is not None and _select_entity(items, state.input.subject_id):
                items.update_name(name)
        elif screen is Screen.ADD_DATABASE:
            state.registry.create_database(name)
        elif screen is Screen.MODIFY_DATABASE:
            index = state.registry.config.index_of(str(state.input.subject_id))
            if index is not None:
                state.registry.select_index(index)
                state.registry.rename_selected(name)


class ConfirmActionsMixin:
    """Answering a delete confirmation."""

    state: AppState

    def action_confirm_delete(self) -> None:
        confirmation = self.state.confirmation
        if isinstance(confirmation, ConfirmDelete):
            if confirmation.kind == "list":
                lists = self.state.lists
                if _select_entity(lists, confirmation.target_id):
                    lists.delete_selected()
            else:
                registry = self.state.registry
                index = registry.config.index_of(str(confirmation.target_id))
                if index is not None:
                    registry.select_index(index)
                    registry.delete_selected()
        self.state.confirmation = NoConfirmation()
        self.state.go_back()

    def action_decline_delete(self) -> None:
        self.state.confirmation = NoConfirmation()
        self.state.go_back()


def _select_entity(collection: ListCollection | ItemCollection, entity_id: int | str | None) -> bool:
    for index, entity in enumerate(collection.entries):
        if entity.id == entity_id:
            collection.select_index(index)
            return True
    return False
