"""Save Order Use Case: create or edit a draft order."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from decimal import Decimal

from stockroom.application.dto.requests import SaveOrderRequest
from stockroom.config import get_logger, workflow_context
from stockroom.core.entities import Order
from stockroom.core.exceptions import ProductNotFoundError, ValidationError
from stockroom.core.interfaces import IRecordStore
from stockroom.core.repositories import UnitOfWork
from stockroom.core.services import order_total

logger = get_logger(__name__)


@dataclass
class SaveOrderResult:
    """Result of saving a draft order."""

    order: Order
    total: Decimal
    created: bool = False  # True if a new order was created


class SaveOrderUseCase:
    """Create a draft, or replace the customer and items of an existing one."""

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

    async def execute(self, request: SaveOrderRequest) -> SaveOrderResult:
        """Execute save order use case."""
        ids = {"order_id": request.order_id} if request.order_id else {}
        with workflow_context("save_order", **ids):
            return await self._save(request)

    async def _save(self, request: SaveOrderRequest) -> SaveOrderResult:
        logger.info(
            "save_order_started",
            order_id=request.order_id,
            customer_id=request.customer_id,
            items=len(request.items),
        )

        if not request.items:
            raise ValidationError("items", "add at least one item to the order")
        for item in request.items:
            if item.quantity <= 0:
                raise ValidationError("quantity", "quantity must be greater than zero", item.quantity)

        uow = await self._get_uow()
        async with uow.transaction():
            await uow.customers.require(request.customer_id)
            products = {p.id: p for p in await uow.products.load()}
            for item in request.items:
                if item.product_id not in products:
                    raise ProductNotFoundError(item.product_id)

            if request.order_id is None:
                order = Order(customer_id=request.customer_id, created_at=self._clock())
                for item in request.items:
                    order.add_item(item.product_id, item.quantity)
                await uow.orders.add(order)
                created = True
            else:
                order = await uow.orders.require(request.order_id)
                order.reassign_customer(request.customer_id)
                for index in reversed(range(len(order.items))):
                    order.remove_item(index)
                for item in request.items:
                    order.add_item(item.product_id, item.quantity)
                await uow.orders.update(order)
                created = False

        total = order_total(order, products)
        logger.info("save_order_complete", order_id=order.id, created=created, total=str(total))
        return SaveOrderResult(order=order, total=total, created=created)
