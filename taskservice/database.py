"""Shared database connection and schema setup."""

from __future__ import annotations

import sqlite3

_database: sqlite3.Connection | None = None

_SCHEMA = """
CREATE TABLE IF NOT EXISTS tasks (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    description TEXT,
    status TEXT NOT NULL DEFAULT 'new'
        CHECK (status IN ('new', 'in_progress', 'done')),
    created_at TEXT NOT NULL
        DEFAULT (strftime('%Y-%m-%dT%H:%M:%f+00:00', 'now')),
    updated_at TEXT
);
CREATE TABLE IF NOT EXISTS auth (
    uuid TEXT PRIMARY KEY,
    refresh_token TEXT NOT NULL
);
"""


class DatabaseNotInitialized(RuntimeError):
    """Raised when the shared database is used before it was set up."""


def init_database(path: str) -> sqlite3.Connection:
    """Open the database at ``path``, check it answers, and make it shared."""
    global _database
    connection = sqlite3.connect(path, check_same_thread=False)
    try:
        connection.execute("SELECT 1").fetchone()
    except sqlite3.Error:
        connection.close()
        raise
    _database = connection
    return connection


def get_database() -> sqlite3.Connection:
    """Return the shared connection."""
    if _database is None:
        raise DatabaseNotInitialized("error on GetDatabase - need setup db")
    return _database


def set_database(db: sqlite3.Connection | None) -> None:
    """Replace the shared connection; ``None`` clears it."""
    global _database
    if db is not None and not isinstance(db, sqlite3.Connection):
        raise TypeError(
            f"expected a sqlite3.Connection or None, got {type(db).__name__}"
        )
    _database = db


def create_schema(db: sqlite3.Connection) -> None:
    """Create the tables the service needs, if they are missing."""
    with db:
        db.executescript(_SCHEMA)