"""CLI command handlers for judo."""

from __future__ import annotations

import argparse

from judo.domains.databases.app.registry import DatabaseRegistry
from judo.domains.databases.domain.config import ConfigError
from judo.shared.app import AppServices


def _registry(services: AppServices) -> DatabaseRegistry:
    return DatabaseRegistry(services.config_store, services.store_factory)


def cmd_db_list(args: argparse.Namespace, services: AppServices) -> int:
    """List all registered databases."""
    registry = _registry(services)
    if not registry.entries:
        print("No registered databases.")
        return 0

    print(f"{'Name':<20} {'Default':<8} {'Path'}")
    print("-" * 70)
    for db in registry.entries:
        marker = "*" if db.name == registry.default_name else ""
        print(f"{db.name:<20} {marker:<8} {db.path}")
    return 0


def cmd_db_add(args: argparse.Namespace, services: AppServices) -> int:
    """Register a new database."""
    registry = _registry(services)
    try:
        db = registry.create_database(args.name)
    except ConfigError as exc:
        print(f"Error: {exc}")
        return 1
    print(f"Database '{db.name}' registered at {db.path}")
    return 0


def cmd_db_default(args: argparse.Namespace, services: AppServices) -> int:
    """Make a registered database the default."""
    registry = _registry(services)
    index = registry.config.index_of(args.name)
    if index is None:
        print(f"Error: Database '{args.name}' not found.")
        return 1
    registry.select_index(index)
    try:
        registry.set_selected_as_default()
    except ConfigError as exc:
        print(f"Error: {exc}")
        return 1
    print(f"Database '{args.name}' is now the default.")
    return 0
