"""Command-line entry point for judo."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path

from judo import __version__
from judo.commands import cmd_db_add, cmd_db_default, cmd_db_list
from judo.domains.databases.domain.config import ConfigError
from judo.domains.todos.store.sqlite import StorageError
from judo.shared.app import RuntimeConfig, build_app_services
from judo.shared.core.debug_events import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="judo", description="Keyboard-driven todo lists in the terminal.")
    parser.add_argument("--version", action="version", version=f"judo {__version__}")
    parser.add_argument("--config-dir", type=Path, help="Directory holding judo.json and the databases")
    parser.add_argument("--db", dest="database", help="Start on this registered database instead of the default")
    parser.add_argument("--debug", action="store_true", help="Write debug events to a log file")
    parser.add_argument("--log-file", type=Path, help="Debug log location (implies --debug)")

    subparsers = parser.add_subparsers(dest="command")
    db_parser = subparsers.add_parser("db", help="Manage registered databases")
    db_sub = db_parser.add_subparsers(dest="db_command", required=True)

    db_sub.add_parser("list", help="List registered databases").set_defaults(func=cmd_db_list)
    add_parser = db_sub.add_parser("add", help="Register a new database")
    add_parser.add_argument("name")
    add_parser.set_defaults(func=cmd_db_add)
    default_parser = db_sub.add_parser("default", help="Set the default database")
    default_parser.add_argument("name")
    default_parser.set_defaults(func=cmd_db_default)
    return parser


def runtime_from_args(args: argparse.Namespace, base: RuntimeConfig | None = None) -> RuntimeConfig:
    """Overlay CLI flags on the environment-derived runtime config."""
    runtime = base or RuntimeConfig.from_env()
    changes: dict[str, object] = {}
    if args.config_dir is not None:
        changes["config_dir"] = args.config_dir.expanduser()
    if args.database:
        changes["start_database"] = args.database
    if args.log_file is not None:
        changes["log_file"] = args.log_file.expanduser()
        changes["debug_mode"] = True
    if args.debug:
        changes["debug_mode"] = True
    return replace(runtime, **changes)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    runtime = runtime_from_args(args)
    configure_logging(debug=runtime.debug_mode, log_file=runtime.resolved_log_file)
    services = build_app_services(runtime)

    if args.command == "db":
        return args.func(args, services)

    from judo.domains.shell.app.main import JudoApp

    try:
        app = JudoApp(services=services)
    except (ConfigError, StorageError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
