"""Named cache slots for the class registry.

A backend that fails is treated as empty: reads miss, writes and deletes are
dropped, and the failure is logged.
"""

from __future__ import annotations

import json
import logging
import sqlite3
from datetime import datetime, timezone
from typing import Any, Protocol

from class_select.store.db import Database

__all__ = ["Cache", "MemoryCache", "SqliteCache"]

logger = logging.getLogger(__name__)


class Cache(Protocol):
    """A single named value that can be read, replaced or deleted."""

    name: str

    def get(self) -> Any | None: ...

    def set(self, value: Any) -> None: ...

    def delete(self) -> None: ...


class MemoryCache:
    """Process-local cache slot."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._value: Any | None = None

    def get(self) -> Any | None:
        return self._value

    def set(self, value: Any) -> None:
        self._value = value

    def delete(self) -> None:
        self._value = None


class SqliteCache:
    """Cache slot persisted as a JSON row in the ``transients`` table."""

    def __init__(self, db: Database, name: str) -> None:
        self.name = name
        self._db = db

    def get(self) -> Any | None:
        try:
            row = self._db.fetch_one(
                "SELECT value FROM transients WHERE name = ?", (self.name,)
            )
        except sqlite3.Error as exc:
            logger.warning("Cache %r unavailable, treating as a miss: %s", self.name, exc)
            return None
        if row is None:
            return None
        try:
            return json.loads(row["value"])
        except ValueError as exc:
            logger.warning("Cache %r holds unreadable data, ignoring it: %s", self.name, exc)
            return None

    def set(self, value: Any) -> None:
        try:
            self._db.execute(
                """INSERT INTO transients (name, value, updated_at) VALUES (?, ?, ?)
                   ON CONFLICT(name) DO UPDATE SET
                       value = excluded.value, updated_at = excluded.updated_at""",
                (self.name, json.dumps(value), datetime.now(timezone.utc).isoformat()),
            )
            self._db.commit()
        except sqlite3.Error as exc:
            logger.warning("Cache %r unavailable, value not stored: %s", self.name, exc)

    def delete(self) -> None:
        try:
            self._db.execute("DELETE FROM transients WHERE name = ?", (self.name,))
            self._db.commit()
        except sqlite3.Error as exc:
            logger.warning("Cache %r unavailable, flush skipped: %s", self.name, exc)
