"""Registry of named todo databases and the one currently in use."""

from __future__ import annotations

import copy
from collections.abc import Callable
from pathlib import Path
from typing import Protocol

from judo.core.selection import Direction, SelectionState
from judo.domains.databases.domain.config import ConfigError, DBConfig, JudoConfig, Theme
from judo.domains.todos.store.sqlite import TodoStore
from judo.shared.core.debug_events import emit_debug_event

StoreFactory = Callable[[str], TodoStore]


class ConfigStoreProtocol(Protocol):
    data_dir: Path

    def load(self) -> JudoConfig: ...

    def save(self, config: JudoConfig) -> None: ...


class DatabaseRegistry:
    """Navigable registry of databases backed by a config store.

    Deleting only removes the registry entry, never the file. The database
    in use cannot be deleted. Every change is saved before it is applied, so
    a failed save leaves the registry as it was.

    Opened stores are kept per path and reused when switching back, until
    ``close_all`` is called.
    """

    def __init__(self, config_store: ConfigStoreProtocol, store_factory: StoreFactory = TodoStore.open) -> None:
        self._config_store = config_store
        self._store_factory = store_factory
        self.config = config_store.load()
        self.selection = SelectionState()
        self.selection.resize(len(self.config.dbs))
        self.active_name: str | None = None
        self._stores: dict[str, TodoStore] = {}

    @property
    def entries(self) -> list[DBConfig]:
        return self.config.dbs

    @property
    def theme(self) -> Theme:
        return self.config.theme

    @property
    def default_name(self) -> str:
        return self.config.default

    @property
    def active(self) -> DBConfig | None:
        if self.active_name is None:
            return None
        return self.config.get(self.active_name)

    @property
    def selected(self) -> DBConfig | None:
        if self.selection.index is None:
            return None
        return self.config.dbs[self.selection.index]

    def __len__(self) -> int:
        return len(self.config.dbs)

    def open(self, name: str | None = None) -> TodoStore:
        """Open a database by name (the default when omitted) and make it active."""
        if name is None:
            db = self.config.get_default()
        else:
            db = self.config.get(name)
            if db is None:
                raise ConfigError(f"Database '{name}' not found")
        store = self._stores.get(db.path)
        if store is None:
            store = self._store_factory(db.path)
            self._stores[db.path] = store
        self.active_name = db.name
        emit_debug_event("database.opened", database=db.name, path=db.path)
        return store

    def close_all(self) -> None:
        for path, store in self._stores.items():
            store.close()
            emit_debug_event("database.closed", path=path)
        self._stores.clear()

    def sync_selection(self) -> None:
        """Point the selection at the database in use."""
        self.selection.resize(len(self.config.dbs))
        index = self.config.index_of(self.active_name) if self.active_name else None
        self.selection.select(index)

    def select_next(self) -> None:
        self.selection.select_next()

    def select_previous(self) -> None:
        self.selection.select_previous()

    def select_first(self, *, keep_existing: bool = False) -> None:
        self.selection.select_first(keep_existing=keep_existing)

    def select_last(self) -> None:
        self.selection.select_last()

    def select_index(self, index: int) -> None:
        self.selection.select(index)

    def scroll_by(self, amount: int, direction: Direction) -> None:
        self.selection.scroll_by(amount, direction)

    def deselect(self) -> None:
        self.selection.deselect()

    def create_database(self, name: str) -> DBConfig:
        """Register a new database file under the data directory and select it.

        The file itself is created and migrated when it is first opened.
        """
        name = self._validate_name(name)
        db = DBConfig(name=name, path=str(self._config_store.data_dir / f"{name}.db"))
        config = copy.deepcopy(self.config)
        config.dbs.append(db)
        self._commit(config)
        self.selection.resize(len(self.config.dbs))
        self.selection.select(len(self.config.dbs) - 1)
        emit_debug_event("database.created", database=name, path=db.path)
        return db

    def rename_selected(self, name: str) -> bool:
        db = self.selected
        if db is None:
            return False
        name = self._validate_name(name, current=db)
        old_name = db.name
        config = copy.deepcopy(self.config)
        config.dbs[self.config.dbs.index(db)].name = name
        if config.default == old_name:
            config.default = name
        self._commit(config)
        if self.active_name == old_name:
            self.active_name = name
        emit_debug_event("database.renamed", old=old_name, new=name)
        return True

    def delete_selected(self) -> DBConfig | None:
        db = self.selected
        if db is None:
            return None
        if db.name == self.active_name:
            raise ConfigError(f"Cannot delete '{db.name}' while it is in use")
        config = copy.deepcopy(self.config)
        del config.dbs[self.config.dbs.index(db)]
        if config.default == db.name and config.dbs:
            config.default = config.dbs[0].name
        self._commit(config)
        self.selection.resize(len(self.config.dbs))
        if all(other.path != db.path for other in self.config.dbs):
            store = self._stores.pop(db.path, None)
            if store is not None:
                store.close()
        emit_debug_event("database.deleted", database=db.name, default=self.config.default)
        return db

    def set_selected_as_default(self) -> bool:
        db = self.selected
        if db is None:
            return False
        config = copy.deepcopy(self.config)
        config.default = db.name
        self._commit(config)
        return True

    def _validate_name(self, name: str, current: DBConfig | None = None) -> str:
        name = name.strip()
        if not name:
            raise ConfigError("Database name cannot be empty")
        if "/" in name or "\\" in name:
            raise ConfigError("Database name cannot contain path separators")
        existing = self.config.get(name)
        if existing is not None and existing is not current:
            raise ConfigError(f"A database named '{name}' already exists")
        return name

    def _commit(self, config: JudoConfig) -> None:
        """Save ``config`` and make it current; nothing changes if the save fails."""
        try:
            self._config_store.save(config)
        except OSError as exc:
            raise ConfigError(f"Could not save config: {exc}") from exc
        self.config = config
