"""Main Textual application for judo."""

from __future__ import annotations

from typing import Any, ClassVar

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.events import Key
from textual.widgets import Static

from judo.core.key_event import KeyPress
from judo.core.keymap import get_keymap
from judo.domains.shell.app.interpreter import KeyInterpreter
from judo.domains.shell.app.startup import build_app_state
from judo.domains.shell.app.state import AppState
from judo.domains.shell.ui.render import (
    render_databases,
    render_items,
    render_lists,
    render_popup,
    render_status,
)
from judo.shared.app import AppServices, RuntimeConfig, build_app_services
from judo.shared.core.debug_events import emit_debug_event


class JudoApp(App):
    """Terminal todo lists.

    Every key press is handed to the ``KeyInterpreter``; the panes are
    then redrawn from ``AppState``. Textual's own focus handling is not
    used, so tab keys are routed through priority bindings.
    """

    TITLE = "judo"
    CSS_PATH = "main.tcss"
    ENABLE_COMMAND_PALETTE = False

    BINDINGS: ClassVar[list[Any]] = [
        Binding(binding.key, f"route_key('{binding.key}')", show=False, priority=True)
        for binding in get_keymap().get_action_keys()
        if binding.priority
    ]

    def __init__(
        self,
        *,
        services: AppServices | None = None,
        runtime: RuntimeConfig | None = None,
        state: AppState | None = None,
    ):
        super().__init__()
        self.services = services or build_app_services(runtime or RuntimeConfig.from_env())
        self.state = state or build_app_state(self.services)
        self.interpreter = KeyInterpreter(self.state)

    def compose(self) -> ComposeResult:
        with Horizontal(id="panes"):
            yield Static(id="lists-pane")
            yield Static(id="items-pane")
            yield Static(id="databases-pane")
        yield Static(id="status-bar")
        yield Static(id="popup")

    def on_mount(self) -> None:
        self.refresh_view()

    def on_unmount(self) -> None:
        self.state.registry.close_all()

    def on_key(self, event: Key) -> None:
        """Route every key press through the interpreter."""
        event.prevent_default()
        event.stop()
        self._handle_press(KeyPress(event.key, event.character))

    def action_route_key(self, key: str) -> None:
        self._handle_press(KeyPress(key))

    def _handle_press(self, press: KeyPress) -> None:
        self.interpreter.handle_key(press)
        for notification in self.state.drain_notifications():
            self.notify(notification.message, severity=notification.severity)  # type: ignore[arg-type]
        if self.state.should_exit:
            emit_debug_event("app.exit")
            self.exit()
            return
        self.refresh_view()

    def refresh_view(self) -> None:
        state = self.state
        self.query_one("#lists-pane", Static).update(render_lists(state))
        self.query_one("#items-pane", Static).update(render_items(state))
        self.query_one("#databases-pane", Static).update(render_databases(state))
        self.query_one("#status-bar", Static).update(render_status(state))
        popup = self.query_one("#popup", Static)
        renderable = render_popup(state)
        popup.display = renderable is not None
        if renderable is not None:
            popup.update(renderable)
