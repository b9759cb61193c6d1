"""Tests for the JSON database registry store."""

from __future__ import annotations

import json

import pytest

from judo.domains.databases.domain.config import ConfigError, DBConfig, JudoConfig, Theme
from judo.domains.databases.store.config_store import ConfigStore


class TestConfigStore:
    def test_missing_file_creates_default(self, tmp_path):
        store = ConfigStore(tmp_path)
        config = store.load()

        assert config.default == "dojo"
        assert config.dbs == [DBConfig("dojo", str(tmp_path / "databases" / "judo.db"))]
        saved = json.loads((tmp_path / "judo.json").read_text())
        assert saved["default"] == "dojo"
        assert saved["version"] == 1

    def test_save_then_load(self, tmp_path):
        store = ConfigStore(tmp_path)
        config = JudoConfig(
            default="work",
            dbs=[DBConfig("dojo", "/tmp/a.db"), DBConfig("work", "/tmp/b.db")],
            theme=Theme(accent="#123456"),
        )
        store.save(config)
        loaded = store.load()
        assert loaded.default == "work"
        assert [db.name for db in loaded.dbs] == ["dojo", "work"]
        assert loaded.theme.accent == "#123456"
        assert loaded.theme.background == Theme().background

    def test_accepts_connection_strings(self, tmp_path):
        (tmp_path / "judo.json").write_text(
            json.dumps({"default": "dojo", "dbs": [{"name": "dojo", "connection_str": "sqlite:/data/judo.db"}]})
        )
        config = ConfigStore(tmp_path).load()
        assert config.dbs[0].path == "/data/judo.db"

    def test_unreadable_file_falls_back_to_defaults(self, tmp_path):
        (tmp_path / "judo.json").write_text("{not json")
        config = ConfigStore(tmp_path).load()
        assert config.default == "dojo"
        assert len(config.dbs) == 1


class TestGetDefault:
    def test_missing_default_raises(self):
        with pytest.raises(ConfigError, match="not found"):
            JudoConfig(default="gone", dbs=[DBConfig("dojo", "a.db")]).get_default()

    def test_duplicate_default_raises(self):
        with pytest.raises(ConfigError, match="Multiple"):
            JudoConfig(default="dojo", dbs=[DBConfig("dojo", "a.db"), DBConfig("dojo", "b.db")]).get_default()

    def test_unreadable_file_is_never_overwritten(self, tmp_path):
        path = tmp_path / "judo.json"
        path.write_text("{not json")
        store = ConfigStore(tmp_path)
        config = store.load()

        with pytest.raises(ConfigError, match="could not be read"):
            store.save(config)
        assert path.read_text() == "{not json"

    def test_saving_allowed_again_once_file_is_fixed(self, tmp_path):
        path = tmp_path / "judo.json"
        path.write_text("{not json")
        store = ConfigStore(tmp_path)
        store.load()
        path.unlink()

        config = store.load()
        store.save(config)
        assert json.loads(path.read_text())["default"] == "dojo"
