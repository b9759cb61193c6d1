"""Tests for the database registry."""

from __future__ import annotations

import logging
import sqlite3

import pytest

from judo.domains.databases.domain.config import ConfigError
from judo.shared.core import debug_events


class TestOpen:
    def test_open_default(self, registry, store_factory):
        store = registry.open()
        assert registry.active_name == "dojo"
        assert store is store_factory(registry.active.path)

    def test_open_unknown_raises(self, registry):
        with pytest.raises(ConfigError):
            registry.open("missing")

    def test_sync_selection_points_at_active(self, registry):
        registry.open("work")
        registry.deselect()
        registry.sync_selection()
        assert registry.selected.name == "work"


class TestCreate:
    def test_create_registers_and_selects(self, registry, config_store, tmp_path):
        db = registry.create_database("  side  ")
        assert db.name == "side"
        assert db.path == str(tmp_path / "side.db")
        assert registry.selected is db
        assert [d.name for d in config_store.load().dbs] == ["dojo", "work", "side"]

    @pytest.mark.parametrize("name", ["", "   ", "work", "a/b"])
    def test_rejects_invalid_names(self, registry, name):
        with pytest.raises(ConfigError):
            registry.create_database(name)
        assert len(registry) == 2


class TestRename:
    def test_rename_default_moves_default_pointer(self, registry, config_store):
        registry.open()
        registry.select_first()
        registry.rename_selected("home")
        config = config_store.load()
        assert config.default == "home"
        assert registry.active_name == "home"

    def test_rename_to_existing_name_raises(self, registry):
        registry.select_first()
        with pytest.raises(ConfigError):
            registry.rename_selected("work")


class TestDelete:
    def test_cannot_delete_active(self, registry):
        registry.open("dojo")
        registry.select_first()
        with pytest.raises(ConfigError):
            registry.delete_selected()
        assert len(registry) == 2

    def test_deleting_default_promotes_first_remaining(self, registry, config_store):
        registry.open("work")
        registry.select_first()
        removed = registry.delete_selected()
        assert removed.name == "dojo"
        config = config_store.load()
        assert config.default == "work"
        assert [db.name for db in config.dbs] == ["work"]
        assert registry.selection.index == 0

    def test_set_default(self, registry, config_store):
        registry.select_last()
        assert registry.set_selected_as_default() is True
        assert config_store.load().default == "work"


class TestDebugEvents:
    def test_registry_changes_are_logged(self, registry, caplog, monkeypatch):
        monkeypatch.setattr(debug_events.logger, "propagate", True)
        caplog.set_level(logging.DEBUG, logger="judo.debug")

        registry.open()
        registry.create_database("side")
        registry.select_index(2)
        registry.delete_selected()

        assert "database.opened database=dojo" in caplog.text
        assert "database.created database=side" in caplog.text
        assert "database.deleted database=side" in caplog.text


class TestFailedSave:
    @pytest.fixture
    def failing_save(self, config_store, monkeypatch):
        def fail(config):
            raise OSError("disk full")

        monkeypatch.setattr(config_store, "save", fail)

    def test_failed_create_leaves_registry_unchanged(self, registry, failing_save):
        registry.select_first()
        with pytest.raises(ConfigError, match="disk full"):
            registry.create_database("side")
        assert [db.name for db in registry.entries] == ["dojo", "work"]
        assert registry.selection.index == 0

    def test_failed_rename_leaves_names_unchanged(self, registry, failing_save):
        registry.open()
        registry.select_first()
        with pytest.raises(ConfigError):
            registry.rename_selected("home")
        assert registry.selected.name == "dojo"
        assert registry.default_name == "dojo"
        assert registry.active_name == "dojo"

    def test_failed_delete_keeps_entry(self, registry, failing_save):
        registry.open("work")
        registry.select_first()
        with pytest.raises(ConfigError):
            registry.delete_selected()
        assert [db.name for db in registry.entries] == ["dojo", "work"]
        assert registry.default_name == "dojo"

    def test_failed_set_default_keeps_default(self, registry, failing_save):
        registry.select_last()
        with pytest.raises(ConfigError):
            registry.set_selected_as_default()
        assert registry.default_name == "dojo"


class TestStoreReuse:
    def test_reopening_reuses_store(self, registry, store_factory):
        first = registry.open("work")
        registry.open("dojo")
        assert registry.open("work") is first
        assert store_factory.calls.count(registry.config.get("work").path) == 1

    def test_close_all_closes_every_opened_store(self, registry):
        dojo = registry.open("dojo")
        work = registry.open("work")
        registry.close_all()
        for store in (dojo, work):
            with pytest.raises(sqlite3.ProgrammingError):
                store.schema_version

    def test_deleting_database_closes_its_store(self, registry):
        work = registry.open("work")
        registry.open("dojo")
        registry.select_last()
        registry.delete_selected()
        with pytest.raises(sqlite3.ProgrammingError):
            work.schema_version
