"""Supplier directory use cases."""

from stockroom.application.dto.requests import SupplierRequest
from stockroom.config import get_logger
from stockroom.core.entities import Supplier
from stockroom.core.exceptions import ValidationError
from stockroom.core.interfaces import IRecordStore
from stockroom.core.repositories import UnitOfWork
from stockroom.core.services import suggest_by_name

logger = get_logger(__name__)


class ManageSuppliersUseCase:
    """Register, delete, list and suggest suppliers."""

    def __init__(self, record_store: IRecordStore | None = None):
        self._record_store = record_store

    async def _get_uow(self) -> UnitOfWork:
        if self._record_store is None:
            from stockroom.infrastructure.storage import get_record_store

            self._record_store = await get_record_store()
        return UnitOfWork(self._record_store)

    async def create(self, request: SupplierRequest) -> Supplier:
        name = request.name.strip()
        if not name:
            raise ValidationError("name", "enter the supplier name", request.name)
        uow = await self._get_uow()
        async with uow.transaction():
            # Stock entries resolve suppliers by name, so names must be unique
            if await uow.suppliers.find_by_name(name) is not None:
                raise ValidationError("name", "a supplier with this name already exists", name)
            supplier = Supplier(**{**request.model_dump(), "name": name})
            await uow.suppliers.add(supplier)
        logger.info("supplier_created", supplier_id=supplier.id, name=name)
        return supplier

    async def delete(self, supplier_id: str) -> None:
        uow = await self._get_uow()
        async with uow.transaction():
            await uow.suppliers.remove(supplier_id)
        logger.info("supplier_deleted", supplier_id=supplier_id)

    async def list_all(self) -> list[Supplier]:
        uow = await self._get_uow()
        return await uow.suppliers.load(strict=False)

    async def suggest(self, text: str) -> list[Supplier]:
        """Suppliers whose name contains the typed text."""
        uow = await self._get_uow()
        return suggest_by_name(await uow.suppliers.load(strict=False), text)
