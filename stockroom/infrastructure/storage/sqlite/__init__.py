"""SQLite storage implementations."""

from stockroom.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    get_pool,
)
from stockroom.infrastructure.storage.sqlite.record_store import SQLiteRecordStore

__all__ = [
    "ConnectionPool",
    "get_pool",
    "close_pool",
    "SQLiteRecordStore",
]
