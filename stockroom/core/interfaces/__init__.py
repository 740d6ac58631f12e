"""Core interfaces (ports) for dependency injection."""

from stockroom.core.interfaces.record_store import IRecordStore, Record

__all__ = [
    "IRecordStore",
    "Record",
]
