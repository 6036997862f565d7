from __future__ import annotations

from class_select.store.db import Database

SCHEMA = """
CREATE TABLE IF NOT EXISTS transients (
    name TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TEXT NOT NULL DEFAULT ''
);
"""


def run_migrations(db: Database) -> None:
    """Create the cache tables."""
    db.connection.executescript(SCHEMA)
    db.commit()
