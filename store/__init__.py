"""
Persistence adapters for named Life boards.

This module provides:
- BoardStore: Abstract interface every adapter implements
- SqliteStore: Relational store with zstd-compressed grids
- RedisStore: Key-value store with one JSON document per board
- create_store: Build the adapter selected by the settings
"""

from __future__ import annotations

from infra.logger import get_logger
from infra.settings import IN_MEMORY_DB, STORE_REDIS, Settings
from .base import BoardStore
from .errors import BoardAlreadyExists, StoreError
from .redis_store import RedisStore
from .sqlite_store import SqliteStore

logger = get_logger(__name__)

__all__ = [
    "BoardStore",
    "SqliteStore",
    "RedisStore",
    "StoreError",
    "BoardAlreadyExists",
    "create_store",
]


def create_store(settings: Settings) -> BoardStore:
    """
    Build and prepare the store configured in ``settings``.

    Raises:
        StoreError: If the backend cannot be opened
    """
    if settings.store == STORE_REDIS:
        return RedisStore.from_url(settings.redis_url)

    db_path = settings.db_path
    if db_path is None:
        logger.warning("DB_PATH not set, using in-memory database")
        db_path = IN_MEMORY_DB
    logger.info("database: %s", db_path)

    store = SqliteStore(db_path)
    store.migrate()
    return store
