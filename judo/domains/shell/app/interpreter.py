"""Turns key presses into state changes, one press at a time."""

from __future__ import annotations

from dataclasses import replace

from judo.core.key_event import KeyPress
from judo.core.key_router import resolve_action, resolve_leader_action
from judo.domains.databases.app.actions import DatabaseActionsMixin
from judo.domains.databases.domain.config import ConfigError
from judo.domains.shell.app.actions import (
    ConfirmActionsMixin,
    NavigationActionsMixin,
    ShellActionsMixin,
    TextInputActionsMixin,
)
from judo.domains.shell.app.state import AppState
from judo.domains.shell.state import AwaitingLeader, AwaitingSecondKey, Idle
from judo.domains.todos.app.actions import ItemActionsMixin, ListActionsMixin
from judo.domains.todos.store.sqlite import StorageError
from judo.shared.core.debug_events import emit_debug_event

# Actions that leave the repeat count pending for the next key.
COUNT_PRESERVING_ACTIONS = frozenset({"goto_prefix"})


class KeyInterpreter(
    ListActionsMixin,
    ItemActionsMixin,
    DatabaseActionsMixin,
    NavigationActionsMixin,
    TextInputActionsMixin,
    ConfirmActionsMixin,
    ShellActionsMixin,
):
    """Dispatch key presses to ``action_*`` handlers.

    Order of precedence for a press:

    1. an open leader menu takes the key (any unbound key just closes it);
    2. a pending two-key prefix is completed, or cancelled and the key
       handled normally;
    3. digits on a primary screen extend the repeat count;
    4. the keymap for the active binding contexts, global first;
    5. printable characters on text screens are typed into the popup.

    Handlers never raise: storage and config failures are reported through
    ``AppState.notify`` and leave the state as it was.
    """

    def __init__(self, state: AppState) -> None:
        self.state = state

    def handle_key(self, press: KeyPress) -> None:
        state = self.state
        emit_debug_event("key.press", key=press.key, screen=state.screen.value, count=state.count.value)
        state.keys.push(press)

        pending = state.pending
        if isinstance(pending, AwaitingLeader):
            self._handle_leader_key(press)
            return
        if isinstance(pending, AwaitingSecondKey):
            state.pending = Idle()
            ctx = replace(state.input_context(), leader_menu=pending.prefix)
            action = resolve_leader_action(press.key, ctx)
            if action is not None:
                self._dispatch(action)
                return
            emit_debug_event("sequence.cancelled", prefix=pending.prefix, key=press.key)

        if state.screen.is_primary and press.is_digit:
            state.count.push_digit(press.digit or 0, state.active_length())
            return

        action = resolve_action(press.key, state.input_context())
        if action is not None:
            self._dispatch(action)
        elif state.screen.is_text_input and press.is_printable and press.character:
            self._dispatch("insert_char", press.character)

    def _handle_leader_key(self, press: KeyPress) -> None:
        action = resolve_leader_action(press.key, self.state.input_context())
        self.state.pending = Idle()
        self.state.go_back()
        if action is not None:
            self._dispatch(action)

    def _dispatch(self, action: str, *args: str) -> None:
        handler = getattr(self, f"action_{action}", None)
        if handler is None:
            emit_debug_event("action.unknown", action=action)
            return
        emit_debug_event("action.run", action=action, screen=self.state.screen.value)
        try:
            handler(*args)
        except (StorageError, ConfigError) as exc:
            emit_debug_event("action.failed", action=action, error=str(exc))
            self.state.notify(str(exc), severity="error")
        finally:
            if action not in COUNT_PRESERVING_ACTIONS:
                self.state.count.reset()
