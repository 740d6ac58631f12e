"""
Inventory ledger service.

The ledger is an append-only list of signed stock movements. Stock levels
at any point in time are reconstructed from it rather than stored.
"""

from collections.abc import AsyncIterator, Iterable

from stockroom.config import get_logger
from stockroom.core.entities.ledger import (
    LedgerTransaction,
    MovementType,
    StockHistory,
    StockHistoryEntry,
)
from stockroom.core.repositories import UnitOfWork

logger = get_logger(__name__)


def newest_first(transactions: Iterable[LedgerTransaction]) -> list[LedgerTransaction]:
    """Sort by timestamp descending; equal timestamps keep reverse append order."""
    indexed = list(enumerate(transactions))
    indexed.sort(key=lambda pair: (pair[1].timestamp, pair[0]), reverse=True)
    return [t for _, t in indexed]


def build_history(
    product_id: str, transactions: list[LedgerTransaction]
) -> StockHistory:
    """
    Reconstruct point-in-time balances from newest-first transactions.

    For the transaction at position i, previous stock is the sum of the
    quantities at positions after i (the older ones) and current stock is
    previous plus its own quantity. A single pass from the oldest end keeps
    a running total instead of re-summing the tail for every row.
    """
    entries: list[StockHistoryEntry] = []
    running = 0
    for transaction in reversed(transactions):
        previous = running
        running += transaction.quantity
        entries.append(
            StockHistoryEntry(
                transaction_id=transaction.id,
                timestamp=transaction.timestamp,
                kind="E" if transaction.direction is MovementType.IN else "S",
                description=transaction.description,
                quantity=abs(transaction.quantity),
                previous_stock=previous,
                current_stock=running,
            )
        )
    entries.reverse()
    return StockHistory(product_id=product_id, entries=entries)


class InventoryLedger:
    """Append and query ledger transactions through a unit of work."""

    def __init__(self, uow: UnitOfWork):
        self._uow = uow

    async def append(self, transaction: LedgerTransaction) -> LedgerTransaction:
        await self.append_many([transaction])
        return transaction

    async def append_many(self, transactions: list[LedgerTransaction]) -> None:
        """Stage new transactions; requires an open transaction."""
        await self._uow.ledger.append_many(transactions)
        logger.debug("ledger_appended", count=len(transactions))

    async def transactions_for(
        self, product_id: str, strict: bool = False
    ) -> AsyncIterator[LedgerTransaction]:
        """
        Yield a product's transactions newest-first.

        Each call reloads the stored list, so iteration can be restarted
        simply by calling again.
        """
        transactions = await self._uow.ledger.load(strict=strict)
        for transaction in newest_first(t for t in transactions if t.product_id == product_id):
            yield transaction

    async def history(self, product_id: str) -> StockHistory:
        transactions = [t async for t in self.transactions_for(product_id)]
        return build_history(product_id, transactions)

    async def balance(self, product_id: str) -> int:
        return sum([t.quantity async for t in self.transactions_for(product_id)])

    async def batch(self, batch_id: str) -> list[LedgerTransaction]:
        """All transactions written by one stock entry or order completion."""
        transactions = await self._uow.ledger.load(strict=False)
        return [t for t in transactions if t.batch_id == batch_id]
