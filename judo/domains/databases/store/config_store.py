"""Config store for the registry of todo databases."""

from __future__ import annotations

from pathlib import Path

from judo.domains.databases.domain.config import (
    DEFAULT_DB_FILE,
    DEFAULT_DB_NAME,
    ConfigError,
    DBConfig,
    JudoConfig,
    Theme,
)
from judo.shared.core.debug_events import emit_debug_event
from judo.shared.core.store import CONFIG_DIR, JSONFileStore


class ConfigStore(JSONFileStore):
    """Store for the database registry and theme.

    The registry is stored as a versioned JSON object in ~/.judo/judo.json.
    A default registry pointing at ``databases/judo.db`` is written the
    first time it is loaded. A file that cannot be read is left alone: the
    defaults are used in memory and saving is refused until it is fixed.
    """

    _CURRENT_VERSION = 1
    _VERSION_KEY = "version"

    def __init__(self, config_dir: Path | None = None) -> None:
        self.config_dir = config_dir or CONFIG_DIR
        super().__init__(self.config_dir / "judo.json")
        self._unreadable = False

    @property
    def data_dir(self) -> Path:
        return self.config_dir / "databases"

    def default_config(self) -> JudoConfig:
        return JudoConfig(
            default=DEFAULT_DB_NAME,
            dbs=[DBConfig(DEFAULT_DB_NAME, str(self.data_dir / DEFAULT_DB_FILE))],
            theme=Theme(),
        )

    def load(self) -> JudoConfig:
        """Load the registry, creating the default one if none is saved."""
        self._unreadable = False
        if not self.file_path.exists():
            config = self.default_config()
            self.save(config)
            emit_debug_event("config.created", path=str(self.file_path))
            return config
        config = self._unpack(self._read_json())
        if config is None:
            self._unreadable = True
            emit_debug_event("config.invalid", path=str(self.file_path))
            return self.default_config()
        return config

    def save(self, config: JudoConfig) -> None:
        if self._unreadable:
            raise ConfigError(f"{self.file_path} could not be read; fix or remove it before making changes")
        self._write_json(
            {
                self._VERSION_KEY: self._CURRENT_VERSION,
                "default": config.default,
                "dbs": [db.to_dict() for db in config.dbs],
                "theme": config.theme.to_dict(),
            }
        )

    def _unpack(self, data: object) -> JudoConfig | None:
        if not isinstance(data, dict):
            return None
        raw_dbs = data.get("dbs")
        if not isinstance(raw_dbs, list):
            return None
        try:
            dbs = [DBConfig.from_dict(db) for db in raw_dbs if isinstance(db, dict)]
        except (KeyError, TypeError):
            return None
        default = data.get("default")
        if not isinstance(default, str):
            default = dbs[0].name if dbs else DEFAULT_DB_NAME
        return JudoConfig(default=default, dbs=dbs, theme=Theme.from_dict(data.get("theme")))
