"""Command line entry point: ``serve`` runs the API, ``migrate`` sets up the schema."""

from __future__ import annotations

import argparse
import sqlite3
import sys
import tomllib
from contextlib import closing
from typing import Any

from .app import create_app
from .dao import TasksDao
from .database import create_schema, init_database
from .logger import init_logger, log

DEFAULT_CONFIG = "config.toml"


def load_config(path: str) -> dict[str, Any]:
    """Read a TOML configuration file."""
    with open(path, "rb") as handle:
        return tomllib.load(handle)


def _setting(config: dict[str, Any], key: str, default: Any) -> Any:
    node: Any = config
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return default
        node = node[part]
    return node


def _read_config(path: str) -> dict[str, Any]:
    try:
        return load_config(path)
    except (OSError, tomllib.TOMLDecodeError) as error:
        raise RuntimeError(f"error on ReadInConfig - {error}") from error


def _parse_address(address: str) -> tuple[str, int]:
    host, _, port = address.rpartition(":")
    try:
        number = int(port)
    except ValueError:
        raise ValueError(f"invalid server address {address!r}") from None
    return host or "0.0.0.0", number


def _migrate(config: dict[str, Any]) -> int:
    init_logger(int(_setting(config, "logger.level", 0)))
    log().info("start migrate")
    try:
        with closing(sqlite3.connect(str(_setting(config, "db.database", "tasks.db")))) as db:
            create_schema(db)
    except sqlite3.Error as error:
        log().error("error on up migrate - %s", error)
    return 0


def _serve(config: dict[str, Any]) -> int:
    init_logger(int(_setting(config, "logger.level", 0)))
    try:
        db = init_database(str(_setting(config, "db.database", "tasks.db")))
    except sqlite3.Error as error:
        raise RuntimeError(f"error on connect db - {error}") from error

    app = create_app(TasksDao(db))
    try:
        host, port = _parse_address(str(_setting(config, "server.address", "")))
        app.run(host=host, port=port)
    except (OSError, ValueError) as error:
        raise RuntimeError(f"error on start server - {error}") from error
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="taskservice", description="Task tracking service.")
    parser.add_argument("--config", default=DEFAULT_CONFIG, help="config file - *.toml")
    parser.add_argument("-t", "--toggle", action="store_true", help="Help message for toggle")
    commands = parser.add_subparsers(dest="command")
    for name, description in (
        ("serve", "Start service"),
        ("migrate", "Apply database migrations"),
    ):
        sub = commands.add_parser(name, help=description, description=description)
        sub.add_argument("--config", default=argparse.SUPPRESS, help="config file - *.toml")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 0

    config = _read_config(args.config)
    if args.command == "serve":
        return _serve(config)
    return _migrate(config)


if __name__ == "__main__":
    sys.exit(main())