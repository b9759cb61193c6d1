"""Runtime configuration for judo."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from judo.shared.core.store import CONFIG_DIR


@dataclass
class RuntimeConfig:
    """Runtime configuration provided by CLI or tests."""

    config_dir: Path = CONFIG_DIR
    debug_mode: bool = False
    log_file: Path | None = None
    start_database: str | None = None

    @property
    def data_dir(self) -> Path:
        """Directory holding the SQLite database files."""
        return self.config_dir / "databases"

    @property
    def resolved_log_file(self) -> Path | None:
        if not self.debug_mode:
            return None
        return self.log_file or self.config_dir / "debug.log"

    @classmethod
    def from_env(cls) -> RuntimeConfig:
        def _parse_bool(value: str | None, default: bool) -> bool:
            if value is None or not value.strip():
                return default
            return value.strip().lower() in {"1", "true", "yes", "on"}

        def _parse_path(value: str | None) -> Path | None:
            if value is None or not value.strip():
                return None
            return Path(value.strip()).expanduser()

        config_dir = _parse_path(os.environ.get("JUDO_CONFIG_DIR")) or CONFIG_DIR
        log_file = _parse_path(os.environ.get("JUDO_LOG_FILE"))
        return cls(
            config_dir=config_dir,
            debug_mode=_parse_bool(os.environ.get("JUDO_DEBUG"), bool(log_file)),
            log_file=log_file,
            start_database=os.environ.get("JUDO_DATABASE", "").strip() or None,
        )
