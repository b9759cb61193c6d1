"""Resolve active keybinding contexts from the input context."""

from __future__ import annotations

from judo.core.input_context import InputContext

_PRIMARY_CONTEXTS: dict[str, tuple[str, ...]] = {
    "lists": ("navigation", "reorder", "lists"),
    "items": ("navigation", "reorder", "items"),
    "databases": ("navigation", "databases"),
}

_TEXT_SCREENS = frozenset(
    {"add_list", "modify_list", "add_item", "modify_item", "add_database", "modify_database"}
)
_CONFIRM_SCREENS = frozenset({"delete_list_confirmation", "delete_database_confirmation"})


def get_binding_contexts(ctx: InputContext) -> list[str]:
    """Determine which keybinding contexts are active, highest precedence first."""
    if ctx.screen in _PRIMARY_CONTEXTS:
        return ["global", *_PRIMARY_CONTEXTS[ctx.screen]]
    if ctx.screen in _TEXT_SCREENS:
        return ["text_input"]
    if ctx.screen in _CONFIRM_SCREENS:
        return ["confirm"]
    if ctx.screen == "help":
        return ["help"]
    return []
