"""Help text generated from the active keymap."""

from __future__ import annotations

from judo.core.keymap import KeymapProvider, format_key, get_keymap

ACTION_DESCRIPTIONS: dict[str, str] = {
    "cycle_next": "Next pane",
    "cycle_previous": "Previous pane",
    "show_help": "Show this help",
    "leader_key": "Open command menu",
    "cancel_pending": "Clear count / pending keys",
    "quit": "Quit",
    "cursor_down": "Move down (count: N down)",
    "cursor_up": "Move up (count: N up)",
    "goto_prefix": "gg: first entry (count: entry N)",
    "goto_last": "Last entry (count: entry N)",
    "reorder_down": "Move entry down (count: N places)",
    "reorder_up": "Move entry up (count: N places)",
    "open_list": "Open list",
    "deselect_list": "Clear selection",
    "add_list": "New list",
    "modify_list": "Rename list",
    "delete_list": "Delete list",
    "add_item": "New item",
    "toggle_done": "Toggle done",
    "modify_item": "Rename item",
    "delete_item": "Delete item",
    "leave_items": "Back to lists",
    "enter_items": "Select first item",
    "switch_database": "Use database",
    "add_database": "New database",
    "modify_database": "Rename database",
    "delete_database": "Remove database from registry",
    "set_default_database": "Make default",
    "submit_input": "Save",
    "cancel_input": "Cancel",
    "delete_before": "Delete before cursor",
    "delete_after": "Delete under cursor",
    "cursor_left": "Cursor left",
    "cursor_right": "Cursor right",
    "cursor_home": "Start of text",
    "cursor_end": "End of text",
}

SECTIONS: tuple[tuple[str, str], ...] = (
    ("GLOBAL", "global"),
    ("NAVIGATION", "navigation"),
    ("REORDER", "reorder"),
    ("LISTS", "lists"),
    ("ITEMS", "items"),
    ("DATABASES", "databases"),
    ("TEXT ENTRY", "text_input"),
)


def _section(title: str) -> str:
    divider = "-" * 48
    return f"[bold]{title}[/]\n[dim]{divider}[/]"


def _binding(key: str, desc: str) -> str:
    return f"  [bold]{key:<22}[/] [dim]-[/] {desc}"


def generate_help_text(keymap: KeymapProvider | None = None) -> str:
    """Rich markup listing every described binding, grouped by context."""
    keymap = keymap or get_keymap()
    bindings = keymap.get_action_keys()
    lines: list[str] = []
    for title, context in SECTIONS:
        seen: list[str] = []
        for binding in bindings:
            if binding.context == context and binding.action in ACTION_DESCRIPTIONS and binding.action not in seen:
                seen.append(binding.action)
        if not seen:
            continue
        lines.append(_section(title))
        if context == "global":
            lines.append(_binding("0-9", "Repeat count for the next command"))
        for action in seen:
            keys = "/".join(
                format_key(k)
                for k in keymap.keys_for_action(action)
                if any(b.key == k and b.context == context for b in bindings)
            )
            lines.append(_binding(keys, ACTION_DESCRIPTIONS[action]))
        lines.append("")
    return "\n".join(lines).rstrip()


def generate_leader_text(keymap: KeymapProvider | None = None, menu: str = "leader") -> str:
    """Rich markup for the command menu opened by the leader key."""
    keymap = keymap or get_keymap()
    lines: list[str] = []
    category: str | None = None
    for cmd in keymap.get_leader_commands():
        if cmd.menu != menu:
            continue
        if cmd.category != category:
            if category is not None:
                lines.append("")
            category = cmd.category
            lines.append(f"[bold]{category}[/]")
        lines.append(_binding(format_key(cmd.key), cmd.label))
    return "\n".join(lines)
