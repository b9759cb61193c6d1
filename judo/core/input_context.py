"""UI-agnostic input context used for key state evaluation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class InputContext:
    """Snapshot of interpreter state for key routing."""

    screen: str  # Screen value, e.g. "lists" | "items" | "add_list" | "help"
    count: int = 0
    leader_pending: bool = False
    leader_menu: str = "leader"
    has_selected_list: bool = False
