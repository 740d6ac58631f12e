"""Abstract interface for the key-value record store."""

import asyncio
from abc import ABC, abstractmethod
from typing import Any

Record = dict[str, Any]


class IRecordStore(ABC):
    """
    Interface for a flat store mapping a key to an array of records.

    Each mutating workflow runs its read-modify-write cycle while holding
    ``lock``; implementations share one lock per store instance.
    """

    def __init__(self) -> None:
        self.lock = asyncio.Lock()

    @abstractmethod
    async def read(self, key: str) -> list[Record]:
        """
        Read the records stored under key.

        Returns an empty list for a key that was never written.
        Raises StorageError when the payload cannot be decoded.
        """
        pass

    @abstractmethod
    async def write(self, key: str, records: list[Record]) -> None:
        """Replace the records stored under key."""
        pass

    @abstractmethod
    async def write_many(self, collections: dict[str, list[Record]]) -> None:
        """Replace several collections at once; all or none are written."""
        pass

    @abstractmethod
    async def keys(self) -> list[str]:
        """List the keys that hold a payload."""
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove the payload stored under key."""
        pass
