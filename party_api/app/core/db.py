"""
SQLite database integration.

This module provides functions for obtaining a database connection
(``get_connection``), a cursor context manager (``get_cursor``) and the
schema bootstrap (``init_db``).  Every call opens its own connection, so
concurrent requests never share a handle; SQLite's own locking
serialises writers.
"""

import sqlite3
from contextlib import contextmanager
from typing import Iterator

# Seconds a connection waits on a locked database before giving up.
BUSY_TIMEOUT = 5.0

SCHEMA = """
CREATE TABLE IF NOT EXISTS visitor (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    created_at TEXT NOT NULL,
    ip TEXT NOT NULL,

    nick TEXT NOT NULL UNIQUE,
    "group" TEXT,
    email TEXT,
    extra TEXT
);
"""


def get_connection(database_path: str) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    The connection returns rows as ``sqlite3.Row`` so columns can be
    accessed by name.  The file is created if missing and switched to
    write-ahead logging, which lets readers proceed while a write is in
    flight.
    """
    conn = sqlite3.connect(database_path, timeout=BUSY_TIMEOUT)
    conn.row_factory = sqlite3.Row
    try:
        conn.execute("PRAGMA journal_mode = WAL")
        conn.execute("PRAGMA synchronous = NORMAL")
    except sqlite3.Error:
        conn.close()
        raise
    return conn


@contextmanager
def get_cursor(database_path: str) -> Iterator[sqlite3.Cursor]:
    """Yield a cursor, commit on success and always close the connection."""
    conn = get_connection(database_path)
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_db(database_path: str) -> None:
    """Create the ``visitor`` table if it does not exist yet."""
    with get_cursor(database_path) as cursor:
        cursor.executescript(SCHEMA)
