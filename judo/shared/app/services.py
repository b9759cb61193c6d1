"""Service wiring for the application."""

from __future__ import annotations

from dataclasses import dataclass

from judo.domains.databases.app.registry import ConfigStoreProtocol, StoreFactory
from judo.domains.databases.store.config_store import ConfigStore
from judo.domains.todos.store.sqlite import TodoStore
from judo.shared.app.runtime import RuntimeConfig


@dataclass
class AppServices:
    """Collaborators the application is built from."""

    runtime: RuntimeConfig
    config_store: ConfigStoreProtocol
    store_factory: StoreFactory


def build_app_services(runtime: RuntimeConfig, **overrides: object) -> AppServices:
    """Build the default services, with optional per-field overrides for tests."""
    services = AppServices(
        runtime=runtime,
        config_store=ConfigStore(runtime.config_dir),
        store_factory=TodoStore.open,
    )
    for name, value in overrides.items():
        if not hasattr(services, name):
            raise TypeError(f"Unknown service override: {name}")
        setattr(services, name, value)
    return services
