"""In-memory record store."""

from stockroom.core.interfaces import IRecordStore, Record
from stockroom.infrastructure.storage.codec import decode_collection, encode_collection


class MemoryRecordStore(IRecordStore):
    """
    Record store kept in a dict of encoded payloads.

    Payloads go through the same JSON envelope as the SQLite store, so
    decoding failures behave identically in tests.
    """

    def __init__(self, payloads: dict[str, str] | None = None):
        super().__init__()
        self.payloads: dict[str, str] = dict(payloads or {})

    async def read(self, key: str) -> list[Record]:
        return decode_collection(key, self.payloads.get(key))

    async def write(self, key: str, records: list[Record]) -> None:
        self.payloads[key] = encode_collection(records)

    async def write_many(self, collections: dict[str, list[Record]]) -> None:
        encoded = {key: encode_collection(records) for key, records in collections.items()}
        self.payloads.update(encoded)

    async def keys(self) -> list[str]:
        return sorted(self.payloads)

    async def delete(self, key: str) -> None:
        self.payloads.pop(key, None)
