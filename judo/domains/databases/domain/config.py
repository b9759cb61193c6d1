"""Domain types for the database registry and theme configuration."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from typing import Any

DEFAULT_DB_NAME = "dojo"
DEFAULT_DB_FILE = "judo.db"


class ConfigError(Exception):
    """Raised when the database registry is inconsistent or a change is rejected."""


@dataclass
class Theme:
    """Hex colours used by the renderer."""

    background: str = "#002626"
    foreground: str = "#FCF1D5"
    accent: str = "#FFA69E"
    border: str = "#FCF1D5"
    border_accent: str = "#FFA69E"
    highlight_bg: str = "#FCF1D5"
    highlight_fg: str = "#002626"

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> Theme:
        if not isinstance(data, dict):
            return cls()
        known = {f.name for f in fields(cls)}
        return cls(**{key: str(value) for key, value in data.items() if key in known})


@dataclass
class DBConfig:
    """A named todo database file."""

    name: str
    path: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "path": self.path}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DBConfig:
        path = data.get("path") or data.get("connection_str", "")
        if isinstance(path, str) and path.startswith("sqlite:"):
            path = path[len("sqlite:") :]
        return cls(name=str(data["name"]), path=str(path))


@dataclass
class JudoConfig:
    """The registry of databases, the default one, and the theme."""

    default: str = DEFAULT_DB_NAME
    dbs: list[DBConfig] = field(default_factory=list)
    theme: Theme = field(default_factory=Theme)

    def get(self, name: str) -> DBConfig | None:
        for db in self.dbs:
            if db.name == name:
                return db
        return None

    def get_default(self) -> DBConfig:
        """Return the default database; it must be registered exactly once."""
        matches = [db for db in self.dbs if db.name == self.default]
        if not matches:
            raise ConfigError(f"Default database '{self.default}' not found")
        if len(matches) > 1:
            raise ConfigError(f"Multiple databases with name '{self.default}' found")
        return matches[0]

    def index_of(self, name: str) -> int | None:
        for index, db in enumerate(self.dbs):
            if db.name == name:
                return index
        return None
