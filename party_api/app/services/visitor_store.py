"""
Visitor store.

``VisitorStore`` owns the ``visitor`` table and is the only component
that touches the database file.  Each method runs a single statement on
a fresh connection, so every call sees the current state and a failed
write leaves nothing behind.  The creation timestamp is taken from the
store's clock here rather than by the callers.

All queries use parameterized statements.  SQLite failures are wrapped
in ``StorageError``; a nick that is already taken raises
``DuplicateNickError`` instead.
"""

from __future__ import annotations

import logging
import sqlite3
from datetime import datetime, timezone
from typing import Callable, List, Optional

from party_api.app.core.db import get_cursor, init_db
from party_api.app.core.errors import DuplicateNickError, StorageError
from party_api.app.schemas.visitor import VisitorPublic, VisitorRead

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

SQLITE_MIN_INT = -(2**63)
SQLITE_MAX_INT = 2**63 - 1


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """Render an aware datetime as ISO-8601 UTC with a ``Z`` suffix."""
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


class VisitorStore:
    """Create, list and delete visitor records in a SQLite file."""

    def __init__(self, database_path: str, clock: Clock = utc_now) -> None:
        self.database_path = database_path
        self.clock = clock

    def init_schema(self) -> None:
        try:
            init_db(self.database_path)
        except sqlite3.Error as exc:
            raise StorageError("Could not initialise the database") from exc

    def create(
        self,
        nick: str,
        group: Optional[str] = None,
        email: Optional[str] = None,
        extra: Optional[str] = None,
        *,
        ip: str,
    ) -> int:
        """Insert a new visitor and return its id."""
        created_at = format_timestamp(self.clock())
        try:
            with get_cursor(self.database_path) as cursor:
                cursor.execute(
                    """
                    INSERT INTO visitor (created_at, ip, nick, "group", email, extra)
                    VALUES (?, ?, ?, ?, ?, ?)
                    """,
                    (created_at, ip, nick, group, email, extra),
                )
                visitor_id = cursor.lastrowid
        except sqlite3.IntegrityError as exc:
            if "visitor.nick" in str(exc):
                raise DuplicateNickError(f"Nick {nick!r} is already registered") from exc
            raise StorageError("Could not insert visitor") from exc
        except sqlite3.Error as exc:
            raise StorageError("Could not insert visitor") from exc
        logger.info("Registered visitor %s from %s", visitor_id, ip)
        return visitor_id

    def list_public(self) -> List[VisitorPublic]:
        """Return nick and group of every visitor in registration order."""
        rows = self._fetch_all('SELECT nick, "group" FROM visitor ORDER BY id')
        return [VisitorPublic(nick=row["nick"], group=row["group"]) for row in rows]

    def list_admin(self) -> List[VisitorRead]:
        """Return every visitor with all fields in registration order."""
        rows = self._fetch_all('SELECT * FROM visitor ORDER BY id')
        return [self._row_to_visitor_read(row) for row in rows]

    def delete(self, visitor_id: int) -> bool:
        """Delete a visitor by id.

        Returns ``True`` if a record was deleted, ``False`` if no visitor
        had that id.
        """
        # Ids beyond SQLite's 64-bit range cannot exist.
        if not SQLITE_MIN_INT <= visitor_id <= SQLITE_MAX_INT:
            return False
        try:
            with get_cursor(self.database_path) as cursor:
                cursor.execute("DELETE FROM visitor WHERE id = ?", (visitor_id,))
                affected = cursor.rowcount
        except sqlite3.Error as exc:
            raise StorageError("Could not delete visitor") from exc
        if affected:
            logger.info("Deleted visitor %s", visitor_id)
        return affected > 0

    def count(self) -> int:
        """Number of stored visitors.  Used by the tests to check that
        rejected requests left the table untouched."""
        rows = self._fetch_all("SELECT COUNT(id) AS total FROM visitor")
        return rows[0]["total"]

    def _fetch_all(self, query: str) -> List[sqlite3.Row]:
        try:
            with get_cursor(self.database_path) as cursor:
                return cursor.execute(query).fetchall()
        except sqlite3.Error as exc:
            raise StorageError("Could not read visitors") from exc

    @staticmethod
    def _row_to_visitor_read(row: sqlite3.Row) -> VisitorRead:
        return VisitorRead(
            id=row["id"],
            created_at=row["created_at"],
            ip=row["ip"],
            nick=row["nick"],
            group=row["group"],
            email=row["email"],
            extra=row["extra"],
        )
