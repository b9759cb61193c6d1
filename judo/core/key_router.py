"""Map key presses to action names using the active keymap."""

from __future__ import annotations

from collections.abc import Callable

from judo.core.binding_contexts import get_binding_contexts
from judo.core.input_context import InputContext
from judo.core.keymap import get_keymap

GUARDS: dict[str, Callable[[InputContext], bool]] = {
    "no_count": lambda ctx: ctx.count == 0,
    "list_selected": lambda ctx: ctx.has_selected_list,
}


def check_guard(guard: str | None, ctx: InputContext) -> bool:
    if guard is None:
        return True
    check = GUARDS.get(guard)
    return check(ctx) if check is not None else False


def resolve_action(key: str, ctx: InputContext) -> str | None:
    """Return the action bound to ``key`` in the highest-precedence active context."""
    bindings = get_keymap().get_action_keys()
    for context in get_binding_contexts(ctx):
        for binding in bindings:
            if binding.key != key or binding.context != context:
                continue
            if check_guard(binding.guard, ctx):
                return binding.action
    return None


def resolve_leader_action(key: str, ctx: InputContext) -> str | None:
    """Return the action of the prefix command bound to ``key`` in the pending menu."""
    command = get_keymap().leader_command(key, ctx.leader_menu)
    if command is None or not check_guard(command.guard, ctx):
        return None
    return command.action
