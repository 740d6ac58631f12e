"""Record store implementations and the configured singleton."""

from stockroom.config import get_settings
from stockroom.core.interfaces import IRecordStore
from stockroom.infrastructure.storage.memory import MemoryRecordStore

# Singleton instance
_record_store: IRecordStore | None = None


async def get_record_store() -> IRecordStore:
    """Get the record store selected by ``STORAGE_BACKEND``."""
    global _record_store
    if _record_store is None:
        if get_settings().storage.backend == "memory":
            _record_store = MemoryRecordStore()
        else:
            from stockroom.infrastructure.storage.sqlite import SQLiteRecordStore

            _record_store = SQLiteRecordStore()
    return _record_store


async def reset_record_store() -> None:
    """Drop the singleton and close the SQLite pool (for testing)."""
    global _record_store
    _record_store = None
    from stockroom.infrastructure.storage.sqlite import close_pool

    await close_pool()


__all__ = [
    "MemoryRecordStore",
    "get_record_store",
    "reset_record_store",
]
