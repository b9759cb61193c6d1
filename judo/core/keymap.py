"""Core keymap definitions (UI-agnostic)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from judo.shared.core.debug_events import emit_debug_event

KEY_DISPLAY_OVERRIDES: dict[str, str] = {
    "question_mark": "?",
    "slash": "/",
    "space": "<space>",
    "escape": "<esc>",
    "enter": "<enter>",
    "delete": "<del>",
    "backspace": "<backspace>",
    "tab": "<tab>",
    "shift+tab": "<s-tab>",
    "left": "<left>",
    "right": "<right>",
    "up": "<up>",
    "down": "<down>",
    "shift+up": "<s-up>",
    "shift+down": "<s-down>",
    "home": "<home>",
    "end": "<end>",
}


def format_key(key: str) -> str:
    """Format a key name for display in UI hints."""
    if key in KEY_DISPLAY_OVERRIDES:
        return KEY_DISPLAY_OVERRIDES[key]
    if key.startswith("ctrl+"):
        return f"^{key.split('+', 1)[1]}"
    return key


@dataclass
class LeaderCommandDef:
    """Definition of a command reached through a prefix key."""

    key: str  # The key to press after the prefix
    action: str  # The target action
    label: str  # Display label
    category: str  # Category for grouping in help
    guard: str | None = None  # Guard name (resolved at runtime)
    menu: str = "leader"  # "leader" for the space menu, "g" for g-prefixed motions


@dataclass
class ActionKeyDef:
    """Definition of a regular action keybinding."""

    key: str  # The key to press
    action: str  # The action name
    context: str | None = None  # Binding context the key is active in
    guard: str | None = None  # Guard name (resolved at runtime)
    primary: bool = True  # Primary key for display vs secondary aliases
    show: bool = False  # Whether to show in the footer hints
    priority: bool = False  # Whether the UI must route this key before focus handling


class KeymapProvider(ABC):
    """Abstract base class for keymap providers."""

    @abstractmethod
    def get_leader_commands(self) -> list[LeaderCommandDef]:
        """Get all prefix command definitions."""
        raise NotImplementedError

    @abstractmethod
    def get_action_keys(self) -> list[ActionKeyDef]:
        """Get all regular action key definitions."""
        raise NotImplementedError

    def leader_command(self, key: str, menu: str = "leader") -> LeaderCommandDef | None:
        """Get the prefix command bound to ``key`` in ``menu``."""
        for cmd in self.get_leader_commands():
            if cmd.key == key and cmd.menu == menu:
                return cmd
        return None

    def keys_for_action(self, action_name: str) -> list[str]:
        """Get all keys for an action, primary first."""
        primary_keys: list[str] = []
        secondary_keys: list[str] = []
        seen: set[str] = set()
        for ak in self.get_action_keys():
            if ak.action != action_name:
                continue
            if ak.key in seen:
                continue
            seen.add(ak.key)
            if ak.primary:
                primary_keys.append(ak.key)
            else:
                secondary_keys.append(ak.key)
        return primary_keys + secondary_keys


class DefaultKeymapProvider(KeymapProvider):
    """Default keymap with hardcoded bindings."""

    def __init__(self) -> None:
        self._leader_commands_cache: list[LeaderCommandDef] | None = None
        self._action_keys_cache: list[ActionKeyDef] | None = None
        self._emitted: bool = False

    def _emit_keybindings(self) -> None:
        for cmd in self._ensure_leader_commands():
            emit_debug_event(
                "keybinding.register",
                kind="leader",
                provider=self.__class__.__name__,
                key=cmd.key,
                action=cmd.action,
                menu=cmd.menu,
            )
        for binding in self._ensure_action_keys():
            emit_debug_event(
                "keybinding.register",
                kind="action",
                provider=self.__class__.__name__,
                key=binding.key,
                action=binding.action,
                context=binding.context,
                guard=binding.guard,
            )
        self._emitted = True

    def _ensure_leader_commands(self) -> list[LeaderCommandDef]:
        if self._leader_commands_cache is None:
            self._leader_commands_cache = self._build_leader_commands()
        return self._leader_commands_cache

    def _ensure_action_keys(self) -> list[ActionKeyDef]:
        if self._action_keys_cache is None:
            self._action_keys_cache = self._build_action_keys()
        return self._action_keys_cache

    def get_leader_commands(self) -> list[LeaderCommandDef]:
        if not self._emitted:
            self._emit_keybindings()
        return list(self._ensure_leader_commands())

    def get_action_keys(self) -> list[ActionKeyDef]:
        if not self._emitted:
            self._emit_keybindings()
        return list(self._ensure_action_keys())

    def _build_leader_commands(self) -> list[LeaderCommandDef]:
        return [
            # View
            LeaderCommandDef("l", "show_lists", "Lists", "View"),
            LeaderCommandDef("i", "show_items", "Items", "View", guard="list_selected"),
            LeaderCommandDef("d", "show_databases", "Databases", "View"),
            # Actions
            LeaderCommandDef("h", "show_help", "Help", "Actions"),
            LeaderCommandDef("q", "quit", "Quit", "Actions"),
            # g-prefixed motions
            LeaderCommandDef("g", "goto_first", "Go to first entry", "Navigation", menu="g"),
        ]

    def _build_action_keys(self) -> list[ActionKeyDef]:
        return [
            # Global (primary screens)
            ActionKeyDef("tab", "cycle_next", "global", priority=True),
            ActionKeyDef("shift+tab", "cycle_previous", "global", priority=True),
            ActionKeyDef("ctrl+h", "show_help", "global"),
            ActionKeyDef("question_mark", "show_help", "global", primary=False),
            ActionKeyDef("space", "leader_key", "global", guard="no_count"),
            ActionKeyDef("escape", "cancel_pending", "global"),
            ActionKeyDef("q", "quit", "global"),
            # Navigation (lists, items, databases)
            ActionKeyDef("j", "cursor_down", "navigation"),
            ActionKeyDef("down", "cursor_down", "navigation", primary=False),
            ActionKeyDef("k", "cursor_up", "navigation"),
            ActionKeyDef("up", "cursor_up", "navigation", primary=False),
            ActionKeyDef("g", "goto_prefix", "navigation"),
            ActionKeyDef("G", "goto_last", "navigation"),
            # Reordering (lists, items)
            ActionKeyDef("J", "reorder_down", "reorder"),
            ActionKeyDef("shift+down", "reorder_down", "reorder", primary=False),
            ActionKeyDef("K", "reorder_up", "reorder"),
            ActionKeyDef("shift+up", "reorder_up", "reorder", primary=False),
            # Lists
            ActionKeyDef("enter", "open_list", "lists"),
            ActionKeyDef("l", "open_list", "lists", primary=False),
            ActionKeyDef("right", "open_list", "lists", primary=False),
            ActionKeyDef("h", "deselect_list", "lists"),
            ActionKeyDef("left", "deselect_list", "lists", primary=False),
            ActionKeyDef("a", "add_list", "lists", show=True),
            ActionKeyDef("m", "modify_list", "lists", show=True),
            ActionKeyDef("d", "delete_list", "lists", show=True),
            ActionKeyDef("A", "add_item", "lists"),
            # Items
            ActionKeyDef("enter", "toggle_done", "items", show=True),
            ActionKeyDef("x", "toggle_done", "items", primary=False),
            ActionKeyDef("a", "add_item", "items", show=True),
            ActionKeyDef("m", "modify_item", "items", show=True),
            ActionKeyDef("d", "delete_item", "items", show=True),
            ActionKeyDef("h", "leave_items", "items"),
            ActionKeyDef("left", "leave_items", "items", primary=False),
            ActionKeyDef("l", "enter_items", "items"),
            ActionKeyDef("right", "enter_items", "items", primary=False),
            # Databases
            ActionKeyDef("enter", "switch_database", "databases", show=True),
            ActionKeyDef("a", "add_database", "databases", show=True),
            ActionKeyDef("m", "modify_database", "databases", show=True),
            ActionKeyDef("d", "delete_database", "databases", show=True),
            ActionKeyDef("s", "set_default_database", "databases", show=True),
            # Text input popups
            ActionKeyDef("escape", "cancel_input", "text_input"),
            ActionKeyDef("enter", "submit_input", "text_input"),
            ActionKeyDef("backspace", "delete_before", "text_input"),
            ActionKeyDef("delete", "delete_after", "text_input"),
            ActionKeyDef("left", "cursor_left", "text_input"),
            ActionKeyDef("right", "cursor_right", "text_input"),
            ActionKeyDef("home", "cursor_home", "text_input"),
            ActionKeyDef("ctrl+a", "cursor_home", "text_input", primary=False),
            ActionKeyDef("end", "cursor_end", "text_input"),
            ActionKeyDef("ctrl+e", "cursor_end", "text_input", primary=False),
            # Delete confirmation
            ActionKeyDef("y", "confirm_delete", "confirm"),
            ActionKeyDef("n", "decline_delete", "confirm"),
            ActionKeyDef("escape", "decline_delete", "confirm", primary=False),
            # Help
            ActionKeyDef("escape", "close_help", "help"),
            ActionKeyDef("q", "close_help", "help", primary=False),
            ActionKeyDef("enter", "close_help", "help", primary=False),
            ActionKeyDef("ctrl+h", "close_help", "help", primary=False),
            ActionKeyDef("question_mark", "close_help", "help", primary=False),
        ]


_keymap_provider: KeymapProvider | None = None


def get_keymap() -> KeymapProvider:
    """Get the current keymap provider."""
    global _keymap_provider
    if _keymap_provider is None:
        _keymap_provider = DefaultKeymapProvider()
    return _keymap_provider


def set_keymap(provider: KeymapProvider) -> None:
    """Set a custom keymap provider (useful for testing or custom configs)."""
    global _keymap_provider
    _keymap_provider = provider


def reset_keymap() -> None:
    """Reset to default keymap provider."""
    global _keymap_provider
    _keymap_provider = None
