"""Delete Order Use Case."""

from stockroom.config import get_logger
from stockroom.core.exceptions import OrderStateError
from stockroom.core.interfaces import IRecordStore
from stockroom.core.repositories import UnitOfWork

logger = get_logger(__name__)


class DeleteOrderUseCase:
    """Delete a draft order. Completed orders are linked to the ledger and stay."""

    def __init__(self, record_store: IRecordStore | None = None):
        self._record_store = record_store

    async def _get_uow(self) -> UnitOfWork:
        if self._record_store is None:
            from stockroom.infrastructure.storage import get_record_store

            self._record_store = await get_record_store()
        return UnitOfWork(self._record_store)

    async def execute(self, order_id: str) -> None:
        uow = await self._get_uow()
        async with uow.transaction():
            order = await uow.orders.require(order_id)
            if order.is_completed:
                raise OrderStateError(order.id, order.status.value, "delete")
            await uow.orders.remove(order_id)
        logger.info("order_deleted", order_id=order_id)
