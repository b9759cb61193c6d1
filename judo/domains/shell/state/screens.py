"""Modal screens and the transitions between them."""

from __future__ import annotations

from enum import Enum

from judo.shared.core.debug_events import emit_debug_event


class Screen(Enum):
    LISTS = "lists"
    ITEMS = "items"
    DATABASES = "databases"
    ADD_LIST = "add_list"
    MODIFY_LIST = "modify_list"
    ADD_ITEM = "add_item"
    MODIFY_ITEM = "modify_item"
    ADD_DATABASE = "add_database"
    MODIFY_DATABASE = "modify_database"
    HELP = "help"
    LEADER_HELP = "leader_help"
    DELETE_LIST_CONFIRMATION = "delete_list_confirmation"
    DELETE_DATABASE_CONFIRMATION = "delete_database_confirmation"

    @property
    def is_primary(self) -> bool:
        return self in PRIMARY_SCREENS

    @property
    def is_text_input(self) -> bool:
        return self in TEXT_INPUT_SCREENS

    @property
    def is_confirmation(self) -> bool:
        return self in (Screen.DELETE_LIST_CONFIRMATION, Screen.DELETE_DATABASE_CONFIRMATION)


# Tab order.
PRIMARY_SCREENS: tuple[Screen, ...] = (Screen.LISTS, Screen.ITEMS, Screen.DATABASES)

TEXT_INPUT_SCREENS = frozenset(
    {
        Screen.ADD_LIST,
        Screen.MODIFY_LIST,
        Screen.ADD_ITEM,
        Screen.MODIFY_ITEM,
        Screen.ADD_DATABASE,
        Screen.MODIFY_DATABASE,
    }
)


class ScreenMachine:
    """Tracks the current screen and the last primary screen to return to."""

    def __init__(self, initial: Screen = Screen.LISTS) -> None:
        self.current = initial
        self.last_primary = initial if initial.is_primary else Screen.LISTS

    def set_screen(self, screen: Screen) -> bool:
        """Switch screens; returns False when already there."""
        if screen is self.current:
            return False
        if self.current.is_primary:
            self.last_primary = self.current
        emit_debug_event("screen.change", previous=self.current.value, current=screen.value)
        self.current = screen
        return True

    def go_back(self) -> bool:
        """Return to the remembered primary screen."""
        return self.set_screen(self.last_primary)

    def cycle(self, step: int, *, items_available: bool) -> Screen:
        """The primary screen ``step`` places away in tab order.

        The items screen is skipped when no list is selected.
        """
        ring = [s for s in PRIMARY_SCREENS if s is not Screen.ITEMS or items_available]
        origin = self.current if self.current in ring else self.last_primary
        if origin not in ring:
            origin = Screen.LISTS
        return ring[(ring.index(origin) + step) % len(ring)]
