"""Complete Order Use Case: all-or-nothing stock OUT for a draft order."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from decimal import Decimal

from stockroom.config import get_logger, workflow_context
from stockroom.core.entities import LedgerTransaction, Order, new_id
from stockroom.core.exceptions import InactiveProductsError, ValidationError
from stockroom.core.interfaces import IRecordStore
from stockroom.core.repositories import UnitOfWork
from stockroom.core.services import InventoryLedger

logger = get_logger(__name__)


@dataclass
class CompleteOrderResult:
    """Result of completing an order."""

    order: Order
    transactions: list[LedgerTransaction]
    already_completed: bool = False  # True if the call was a no-op


class CompleteOrderUseCase:
    """
    Complete a draft order.

    Every line product must exist and be active, otherwise nothing changes.
    Stock is decremented with a clamp at zero: overselling is allowed but
    never yields negative inventory, while the ledger still records the full
    quantity sold.
    """

    def __init__(
        self,
        record_store: IRecordStore | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self._record_store = record_store
        self._clock = clock or (lambda: datetime.now(UTC))

    async def _get_uow(self) -> UnitOfWork:
        if self._record_store is None:
            from stockroom.infrastructure.storage import get_record_store

            self._record_store = await get_record_store()
        return UnitOfWork(self._record_store)

    async def execute(self, order_id: str) -> CompleteOrderResult:
        """Execute complete order use case."""
        with workflow_context("complete_order", order_id=order_id):
            return await self._complete(order_id)

    async def _complete(self, order_id: str) -> CompleteOrderResult:
        logger.info("complete_order_started", order_id=order_id)

        uow = await self._get_uow()
        ledger = InventoryLedger(uow)
        async with uow.transaction():
            order = await uow.orders.require(order_id)

            # 1. Completing twice is a no-op
            if order.is_completed:
                logger.info(
                    "order_already_completed",
                    order_id=order.id,
                    batch_id=order.ledger_batch_id,
                )
                existing = await ledger.batch(order.ledger_batch_id) if order.ledger_batch_id else []
                return CompleteOrderResult(
                    order=order, transactions=existing, already_completed=True
                )

            if not order.items:
                raise ValidationError("items", "order has no items")
            await uow.customers.require(order.customer_id)

            # 2. Every referenced product must still exist and be active
            products = await uow.products.load()
            by_id = {p.id: p for p in products}
            inactive: list[str] = []
            missing: list[str] = []
            for item in order.items:
                product = by_id.get(item.product_id)
                if product is None:
                    if item.product_id not in missing:
                        missing.append(item.product_id)
                elif not product.active and product.name not in inactive:
                    inactive.append(product.name)
            if inactive or missing:
                logger.warning(
                    "order_completion_rejected",
                    order_id=order.id,
                    inactive=inactive,
                    missing=missing,
                )
                raise InactiveProductsError(order.id, inactive, missing)

            # 3. Decrement stock and build the ledger batch
            now = self._clock()
            batch_id = new_id()
            total = Decimal("0")
            transactions: list[LedgerTransaction] = []
            for item in order.items:
                product = by_id[item.product_id]
                value = product.price * item.quantity
                if item.quantity > product.stock:
                    logger.info(
                        "stock_clamped_at_zero",
                        product_id=product.id,
                        requested=item.quantity,
                        available=product.stock,
                    )
                product.stock = max(0, product.stock - item.quantity)
                item.unit_price = product.price
                total += value
                transactions.append(
                    LedgerTransaction(
                        product_id=product.id,
                        counterparty_id=order.customer_id,
                        quantity=-item.quantity,
                        total_value=value,
                        timestamp=now,
                        batch_id=batch_id,
                    )
                )

            # 4. Lock the order and stage everything together
            order.mark_completed(batch_id, total=total, completed_at=now)
            uow.products.save_all(products)
            await ledger.append_many(transactions)
            await uow.orders.update(order)

        logger.info(
            "order_completed",
            order_id=order.id,
            batch_id=batch_id,
            total=str(total),
            transactions=len(transactions),
        )

        return CompleteOrderResult(order=order, transactions=transactions)
