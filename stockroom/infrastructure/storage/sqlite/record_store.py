"""SQLite implementation of the record store."""

import aiosqlite

from stockroom.config import get_logger
from stockroom.core.exceptions import DatabaseError
from stockroom.core.interfaces import IRecordStore, Record
from stockroom.infrastructure.storage.codec import decode_collection, encode_collection
from stockroom.infrastructure.storage.sqlite.connection import ConnectionPool, get_pool

logger = get_logger(__name__)

UPSERT = """
INSERT INTO collections (key, payload, updated_at)
VALUES (?, ?, datetime('now'))
ON CONFLICT(key) DO UPDATE SET
    payload = excluded.payload,
    updated_at = excluded.updated_at
"""


class SQLiteRecordStore(IRecordStore):
    """Stores each collection as one row of the ``collections`` table."""

    def __init__(self, pool: ConnectionPool | None = None):
        super().__init__()
        self._pool = pool

    async def _get_pool(self) -> ConnectionPool:
        if self._pool is None:
            self._pool = await get_pool()
        return self._pool

    async def read(self, key: str) -> list[Record]:
        pool = await self._get_pool()
        try:
            async with pool.acquire() as conn:
                cursor = await conn.execute(
                    "SELECT payload FROM collections WHERE key = ?", (key,)
                )
                row = await cursor.fetchone()
        except aiosqlite.Error as e:
            raise DatabaseError("read", str(e)) from e
        return decode_collection(key, row["payload"] if row else None)

    async def write(self, key: str, records: list[Record]) -> None:
        await self.write_many({key: records})

    async def write_many(self, collections: dict[str, list[Record]]) -> None:
        rows = [(key, encode_collection(records)) for key, records in collections.items()]
        pool = await self._get_pool()
        try:
            async with pool.transaction() as conn:
                await conn.executemany(UPSERT, rows)
        except aiosqlite.Error as e:
            raise DatabaseError("write", str(e)) from e
        logger.debug(
            "collections_written",
            keys=[key for key, _ in rows],
        )

    async def keys(self) -> list[str]:
        pool = await self._get_pool()
        async with pool.acquire() as conn:
            cursor = await conn.execute("SELECT key FROM collections ORDER BY key")
            rows = await cursor.fetchall()
        return [row["key"] for row in rows]

    async def delete(self, key: str) -> None:
        pool = await self._get_pool()
        async with pool.transaction() as conn:
            await conn.execute("DELETE FROM collections WHERE key = ?", (key,))
        logger.info("collection_deleted", key=key)
