"""Tests for the database management CLI commands."""

from __future__ import annotations

from judo.cli import build_parser
from judo.shared.app import RuntimeConfig, build_app_services


def run(services, *argv: str) -> int:
    args = build_parser().parse_args(list(argv))
    return args.func(args, services)


def make_services(config_store, store_factory):
    return build_app_services(RuntimeConfig(), config_store=config_store, store_factory=store_factory)


class TestDbCommands:
    def test_list(self, config_store, store_factory, capsys):
        assert run(make_services(config_store, store_factory), "db", "list") == 0
        out = capsys.readouterr().out
        assert "dojo" in out
        assert "work" in out

    def test_add(self, config_store, store_factory, capsys):
        assert run(make_services(config_store, store_factory), "db", "add", "side") == 0
        assert "side" in [db.name for db in config_store.load().dbs]

    def test_add_duplicate_fails(self, config_store, store_factory, capsys):
        assert run(make_services(config_store, store_factory), "db", "add", "work") == 1
        assert "already exists" in capsys.readouterr().out

    def test_default(self, config_store, store_factory):
        assert run(make_services(config_store, store_factory), "db", "default", "work") == 0
        assert config_store.load().default == "work"

    def test_default_unknown(self, config_store, store_factory):
        assert run(make_services(config_store, store_factory), "db", "default", "nope") == 1

    def test_default_with_unreadable_config_fails(self, tmp_path, store_factory, capsys):
        (tmp_path / "judo.json").write_text("{not json")
        services = build_app_services(RuntimeConfig(config_dir=tmp_path), store_factory=store_factory)
        assert run(services, "db", "default", "dojo") == 1
        assert "could not be read" in capsys.readouterr().out
        assert (tmp_path / "judo.json").read_text() == "{not json"
