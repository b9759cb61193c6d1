"""Build the initial application state from services."""

from __future__ import annotations

from judo.domains.databases.app.registry import DatabaseRegistry
from judo.domains.shell.app.state import AppState
from judo.shared.app.services import AppServices
from judo.shared.core.debug_events import emit_debug_event


def build_app_state(services: AppServices, database: str | None = None) -> AppState:
    """Open the requested (or default) database and load its lists.

    Raises ConfigError or StorageError when the database cannot be opened.
    """
    registry = DatabaseRegistry(services.config_store, services.store_factory)
    store = registry.open(database or services.runtime.start_database)
    state = AppState(registry, store)
    state.lists.select_first()
    emit_debug_event(
        "startup.state_ready",
        database=registry.active_name,
        lists=len(state.lists),
    )
    return state
