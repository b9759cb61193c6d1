"""Pytest fixtures for judo tests."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Callable
from pathlib import Path

import pytest

_TEST_CONFIG_DIR = Path(tempfile.mkdtemp(prefix="judo-test-config-"))
os.environ.setdefault("JUDO_CONFIG_DIR", str(_TEST_CONFIG_DIR))

from judo.core.key_event import KeyPress  # noqa: E402
from judo.core.keymap import reset_keymap  # noqa: E402
from judo.domains.databases.app.registry import DatabaseRegistry  # noqa: E402
from judo.domains.databases.domain.config import DBConfig, JudoConfig  # noqa: E402
from judo.domains.databases.store.memory import InMemoryConfigStore  # noqa: E402
from judo.domains.shell.app.interpreter import KeyInterpreter  # noqa: E402
from judo.domains.shell.app.state import AppState  # noqa: E402
from judo.domains.todos.store.sqlite import TodoStore  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_keymap():
    """Ensure custom keymaps do not leak between tests."""
    reset_keymap()
    yield
    reset_keymap()


class StoreFactory:
    """Opens one in-memory store per database path and hands back the same one later."""

    def __init__(self) -> None:
        self.stores: dict[str, TodoStore] = {}
        self.calls: list[str] = []

    def __call__(self, path: str) -> TodoStore:
        self.calls.append(path)
        if path not in self.stores:
            self.stores[path] = TodoStore(":memory:")
        return self.stores[path]


@pytest.fixture
def store() -> TodoStore:
    store = TodoStore(":memory:")
    yield store
    store.close()


@pytest.fixture
def store_factory() -> StoreFactory:
    return StoreFactory()


@pytest.fixture
def config_store(tmp_path: Path) -> InMemoryConfigStore:
    config = JudoConfig(
        default="dojo",
        dbs=[DBConfig("dojo", str(tmp_path / "dojo.db")), DBConfig("work", str(tmp_path / "work.db"))],
    )
    return InMemoryConfigStore(config, data_dir=tmp_path)


@pytest.fixture
def registry(config_store: InMemoryConfigStore, store_factory: StoreFactory) -> DatabaseRegistry:
    return DatabaseRegistry(config_store, store_factory)


@pytest.fixture
def make_state(registry: DatabaseRegistry) -> Callable[..., AppState]:
    """Build an AppState on the default database, optionally seeded with lists.

    ``lists`` maps list names to item names, in order.
    """

    def _make(lists: dict[str, list[str]] | None = None, select: int | None = None) -> AppState:
        store = registry.open()
        for list_name, items in (lists or {}).items():
            todo_list = store.create_list(list_name)
            for item_name in items:
                store.create_item(todo_list.id, item_name)
        state = AppState(registry, store)
        if select is not None:
            state.lists.select_index(select)
        return state

    return _make


@pytest.fixture
def press() -> Callable[..., None]:
    """Feed keys to an interpreter: names with "+" or longer than one char are key names."""

    def _press(interpreter: KeyInterpreter, *keys: str) -> None:
        for key in keys:
            if len(key) == 1:
                interpreter.handle_key(KeyPress.from_char(key))
            else:
                interpreter.handle_key(KeyPress(key, " " if key == "space" else None))

    return _press


@pytest.fixture
def type_text() -> Callable[[KeyInterpreter, str], None]:
    def _type(interpreter: KeyInterpreter, text: str) -> None:
        for char in text:
            interpreter.handle_key(KeyPress.from_char(char))

    return _type
