"""Base JSON file store and the shared config directory."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from judo.shared.core.debug_events import emit_debug_event


def _resolve_config_dir() -> Path:
    override = os.environ.get("JUDO_CONFIG_DIR", "").strip()
    if override:
        return Path(override).expanduser()
    return Path.home() / ".judo"


CONFIG_DIR = _resolve_config_dir()


class JSONFileStore:
    """Read and write a single JSON document on disk."""

    def __init__(self, file_path: Path) -> None:
        self.file_path = file_path

    def _read_json(self) -> Any | None:
        """Return the decoded document, or None when missing or unreadable."""
        if not self.file_path.exists():
            return None
        try:
            return json.loads(self.file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            emit_debug_event("store.read_failed", path=str(self.file_path), error=str(exc))
            return None

    def _write_json(self, data: Any) -> None:
        self.file_path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.file_path.with_suffix(self.file_path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        os.replace(tmp_path, self.file_path)
        emit_debug_event("store.written", path=str(self.file_path))
