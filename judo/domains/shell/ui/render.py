"""Rich renderables built from the application state."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.style import Style
from rich.text import Text

from judo.core.keymap import format_key, get_keymap
from judo.domains.databases.domain.config import Theme
from judo.domains.shell.app.help_text import ACTION_DESCRIPTIONS, generate_help_text, generate_leader_text
from judo.domains.shell.state import ConfirmDelete, Screen

if TYPE_CHECKING:
    from judo.domains.shell.app.state import AppState

POPUP_TITLES: dict[Screen, str] = {
    Screen.ADD_LIST: "New list",
    Screen.MODIFY_LIST: "Rename list",
    Screen.ADD_ITEM: "New item",
    Screen.MODIFY_ITEM: "Rename item",
    Screen.ADD_DATABASE: "New database",
    Screen.MODIFY_DATABASE: "Rename database",
}


def _border_style(theme: Theme, active: bool) -> Style:
    return Style(color=theme.accent if active else theme.border)


def _highlight(theme: Theme) -> Style:
    return Style(color=theme.highlight_fg, bgcolor=theme.highlight_bg, bold=True)


def _entry_lines(names: list[Text], selected: int | None, theme: Theme) -> RenderableType:
    if not names:
        return Text("(empty)", style=Style(color=theme.foreground, dim=True))
    lines = []
    for index, line in enumerate(names):
        if index == selected:
            line.stylize(_highlight(theme))
        lines.append(line)
    return Group(*lines)


def render_lists(state: AppState) -> RenderableType:
    theme = state.registry.theme
    names = [Text(f" {entry.name}", style=Style(color=theme.foreground)) for entry in state.lists.entries]
    return Panel(
        _entry_lines(names, state.lists.selected_index, theme),
        title="Lists",
        title_align="left",
        border_style=_border_style(theme, state.screens.current is Screen.LISTS),
    )


def render_items(state: AppState) -> RenderableType:
    theme = state.registry.theme
    selected_list = state.lists.selected
    items = state.items
    if selected_list is None or items is None:
        body: RenderableType = Text("Select a list", style=Style(color=theme.foreground, dim=True))
        title = "Items"
    else:
        names = []
        for item in items.entries:
            marker = "[x]" if item.is_done else "[ ]"
            line = Text(f" {marker} {item.name}", style=Style(color=theme.foreground))
            if item.is_done:
                line.stylize(Style(strike=True, dim=True), 5)
            if item.priority is not None:
                line.append(f"  !{item.priority.value}", style=Style(color=theme.accent))
            names.append(line)
        title = f"Items - {selected_list.name}"
        body = _entry_lines(names, items.selected_index, theme)
    return Panel(
        body,
        title=title,
        title_align="left",
        border_style=_border_style(theme, state.screens.current is Screen.ITEMS),
    )


def render_databases(state: AppState) -> RenderableType:
    registry = state.registry
    theme = registry.theme
    names = []
    for db in registry.entries:
        line = Text(f" {db.name}", style=Style(color=theme.foreground))
        if db.name == registry.default_name:
            line.append(" (default)", style=Style(color=theme.accent))
        if db.name == registry.active_name:
            line.append(" *", style=Style(color=theme.accent, bold=True))
        names.append(line)
    return Panel(
        _entry_lines(names, registry.selection.index, theme),
        title="Databases",
        title_align="left",
        border_style=_border_style(theme, state.screens.current is Screen.DATABASES),
    )


def render_input(state: AppState) -> Text:
    """The popup text with the cursor drawn over the character it sits on."""
    theme = state.registry.theme
    before, at_cursor, after = state.input.cursor_segments()
    text = Text(style=Style(color=theme.foreground))
    text.append(before)
    text.append(at_cursor, style=Style(color=theme.background, bgcolor=theme.accent))
    text.append(after)
    return text


def render_popup(state: AppState) -> RenderableType | None:
    """The overlay for the current screen, or None on primary screens."""
    screen = state.screens.current
    theme = state.registry.theme
    border = Style(color=theme.border_accent)
    if screen.is_text_input:
        return Panel(render_input(state), title=POPUP_TITLES[screen], title_align="left", border_style=border)
    if screen.is_confirmation:
        confirmation = state.confirmation
        if not isinstance(confirmation, ConfirmDelete):
            return None
        prompt = Text.assemble(
            f"Delete {confirmation.kind} ",
            (f"'{confirmation.name}'", Style(color=theme.accent, bold=True)),
            "?  ",
            ("y", Style(bold=True)),
            " confirm / ",
            ("n", Style(bold=True)),
            " cancel",
        )
        return Panel(prompt, title="Confirm", title_align="left", border_style=border)
    if screen is Screen.HELP:
        return Panel(Text.from_markup(generate_help_text()), title="Help", title_align="left", border_style=border)
    if screen is Screen.LEADER_HELP:
        return Panel(Text.from_markup(generate_leader_text()), title="Commands", title_align="left", border_style=border)
    return None


def render_status(state: AppState) -> Text:
    theme = state.registry.theme
    status = Text(style=Style(color=theme.foreground))
    status.append(f" {state.registry.active_name or '-'} ", style=Style(color=theme.background, bgcolor=theme.accent))
    if state.count.value:
        status.append(f"  count {state.count.value}")
    keys = "".join(state.keys.labels)
    if keys:
        status.append(f"  {keys}", style=Style(bold=True))
    status.append(f"  {_footer_hints(state.screens.current)}", style=Style(dim=True))
    return status


def _footer_hints(screen: Screen) -> str:
    """Hints for the bindings marked for display on this screen, then the global ones."""
    hints = [
        f"{format_key(binding.key)} {ACTION_DESCRIPTIONS.get(binding.action, binding.action).lower()}"
        for binding in get_keymap().get_action_keys()
        if binding.show and binding.context == screen.value
    ]
    hints.append("^h help  <space> menu  q quit")
    return "  ".join(hints)
