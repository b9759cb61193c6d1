"""Aggregate application state shared by the interpreter and the renderer."""

from __future__ import annotations

from dataclasses import dataclass

from judo.core.input_context import InputContext
from judo.core.text_input import InputState
from judo.domains.databases.app.registry import DatabaseRegistry
from judo.domains.shell.state import (
    AwaitingLeader,
    Idle,
    KeyBuffer,
    NoConfirmation,
    NumberModifier,
    PendingConfirmation,
    PendingSequence,
    Screen,
    ScreenMachine,
)
from judo.domains.todos.app.collection import ItemCollection, ListCollection
from judo.domains.todos.store.sqlite import TodoStore
from judo.shared.core.debug_events import emit_debug_event


@dataclass
class Notification:
    message: str
    severity: str = "information"


class AppState:
    """Everything one key press may read or change."""

    def __init__(self, registry: DatabaseRegistry, store: TodoStore) -> None:
        self.registry = registry
        self.store = store
        self.lists = ListCollection(store)
        self.lists.reload()
        self.screens = ScreenMachine()
        self.input = InputState()
        self.keys = KeyBuffer()
        self.count = NumberModifier()
        self.pending: PendingSequence = Idle()
        self.confirmation: PendingConfirmation = NoConfirmation()
        self.should_exit = False
        self.notifications: list[Notification] = []

    @property
    def screen(self) -> Screen:
        return self.screens.current

    @property
    def items(self) -> ItemCollection | None:
        """Items of the selected list, if a list is selected."""
        return self.lists.selected_items

    def active_length(self) -> int:
        """Size of the collection shown on the current primary screen."""
        screen = self.screen if self.screen.is_primary else self.screens.last_primary
        if screen is Screen.ITEMS:
            items = self.items
            return len(items) if items is not None else 0
        if screen is Screen.DATABASES:
            return len(self.registry)
        return len(self.lists)

    def input_context(self) -> InputContext:
        leader_menu = "leader"
        if isinstance(self.pending, AwaitingLeader):
            leader_menu = self.pending.menu
        return InputContext(
            screen=self.screen.value,
            count=self.count.value,
            leader_pending=isinstance(self.pending, AwaitingLeader),
            leader_menu=leader_menu,
            has_selected_list=self.lists.selected is not None,
        )

    def change_screen(self, screen: Screen) -> None:
        if self.screens.set_screen(screen):
            self.reset_sequence()

    def go_back(self) -> None:
        if self.screens.go_back():
            self.reset_sequence()

    def reset_sequence(self) -> None:
        """Forget the pending sequence, the repeat count and the key buffer."""
        self.pending = Idle()
        self.count.reset()
        self.keys.reset()

    def replace_store(self, store: TodoStore) -> None:
        """Use another database: lists are reloaded and the first one selected."""
        lists = ListCollection(store)
        lists.reload()
        lists.select_first()
        self.store = store
        self.lists = lists

    def notify(self, message: str, severity: str = "information") -> None:
        emit_debug_event("notify", severity=severity, message=message)
        self.notifications.append(Notification(message, severity))

    def drain_notifications(self) -> list[Notification]:
        pending, self.notifications = self.notifications, []
        return pending
