"""List Orders Use Case."""

from dataclasses import dataclass
from decimal import Decimal

from stockroom.config import get_logger, get_settings
from stockroom.core.entities import Order
from stockroom.core.interfaces import IRecordStore
from stockroom.core.repositories import UnitOfWork
from stockroom.core.services import order_total, quantize_money

logger = get_logger(__name__)


@dataclass
class OrderSummary:
    """An order with its customer name and display total."""

    order: Order
    customer_name: str | None  # None when the customer was deleted
    total: Decimal


class ListOrdersUseCase:
    """List orders oldest first, priced with live prices while in draft."""

    def __init__(self, record_store: IRecordStore | None = None):
        self._record_store = record_store

    async def _get_uow(self) -> UnitOfWork:
        if self._record_store is None:
            from stockroom.infrastructure.storage import get_record_store

            self._record_store = await get_record_store()
        return UnitOfWork(self._record_store)

    async def execute(self) -> list[OrderSummary]:
        uow = await self._get_uow()
        orders = await uow.orders.load(strict=False)
        customers = {c.id: c.name for c in await uow.customers.load(strict=False)}
        products = {p.id: p for p in await uow.products.load(strict=False)}
        places = get_settings().ledger.money_places

        summaries = [
            OrderSummary(
                order=order,
                customer_name=customers.get(order.customer_id),
                total=quantize_money(order_total(order, products), places),
            )
            for order in sorted(orders, key=lambda o: o.created_at)
        ]
        logger.debug("orders_listed", count=len(summaries))
        return summaries
