"""Customer directory use cases."""

from stockroom.application.dto.requests import CustomerRequest
from stockroom.config import get_logger
from stockroom.core.entities import Customer
from stockroom.core.exceptions import ValidationError
from stockroom.core.interfaces import IRecordStore
from stockroom.core.repositories import UnitOfWork

logger = get_logger(__name__)


class ManageCustomersUseCase:
    """Create, edit, delete and search customers."""

    def __init__(self, record_store: IRecordStore | None = None):
        self._record_store = record_store

    async def _get_uow(self) -> UnitOfWork:
        if self._record_store is None:
            from stockroom.infrastructure.storage import get_record_store

            self._record_store = await get_record_store()
        return UnitOfWork(self._record_store)

    async def create(self, request: CustomerRequest) -> Customer:
        if not request.name.strip():
            raise ValidationError("name", "enter the customer name", request.name)
        customer = Customer(**request.model_dump())
        uow = await self._get_uow()
        async with uow.transaction():
            await uow.customers.add(customer)
        logger.info("customer_created", customer_id=customer.id)
        return customer

    async def update(self, customer_id: str, request: CustomerRequest) -> Customer:
        if not request.name.strip():
            raise ValidationError("name", "enter the customer name", request.name)
        customer = Customer(id=customer_id, **request.model_dump())
        uow = await self._get_uow()
        async with uow.transaction():
            await uow.customers.update(customer)
        logger.info("customer_updated", customer_id=customer_id)
        return customer

    async def delete(self, customer_id: str) -> None:
        uow = await self._get_uow()
        async with uow.transaction():
            await uow.customers.remove(customer_id)
        logger.info("customer_deleted", customer_id=customer_id)

    async def search(self, name: str = "", tax_id: str = "") -> list[Customer]:
        """Case-insensitive substring filters on name and tax id."""
        uow = await self._get_uow()
        name_needle = name.strip().lower()
        tax_needle = tax_id.strip().lower()
        return [
            c
            for c in await uow.customers.load(strict=False)
            if name_needle in c.name.lower() and tax_needle in c.tax_id.lower()
        ]
