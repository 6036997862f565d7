from __future__ import annotations

from class_select.store.cache import Cache, MemoryCache, SqliteCache
from class_select.store.db import Database
from class_select.store.migrations import run_migrations

__all__ = [
    "Cache",
    "Database",
    "MemoryCache",
    "SqliteCache",
    "run_migrations",
]
