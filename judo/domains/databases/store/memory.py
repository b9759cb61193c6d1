"""In-memory config store for tests."""

from __future__ import annotations

import copy
from pathlib import Path

from judo.domains.databases.domain.config import DEFAULT_DB_NAME, DBConfig, JudoConfig
from judo.domains.todos.store.sqlite import MEMORY_PATH


class InMemoryConfigStore:
    """Config store that keeps the registry in memory.

    Database paths are only used as keys for the store factory, so nothing
    is written to disk.
    """

    def __init__(self, config: JudoConfig | None = None, data_dir: Path | None = None) -> None:
        self._config = config or JudoConfig(
            default=DEFAULT_DB_NAME,
            dbs=[DBConfig(DEFAULT_DB_NAME, MEMORY_PATH)],
        )
        self.data_dir = data_dir or Path("memory")
        self.save_count = 0

    def load(self) -> JudoConfig:
        return copy.deepcopy(self._config)

    def save(self, config: JudoConfig) -> None:
        self._config = copy.deepcopy(config)
        self.save_count += 1
