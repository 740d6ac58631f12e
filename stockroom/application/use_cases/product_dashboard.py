"""Product dashboard: margins, activation and stock history."""

from dataclasses import dataclass
from decimal import Decimal

from stockroom.config import get_logger
from stockroom.core.entities import Product, StockHistory
from stockroom.core.interfaces import IRecordStore
from stockroom.core.repositories import UnitOfWork
from stockroom.core.services import InventoryLedger

logger = get_logger(__name__)


@dataclass
class ProductDashboardRow:
    product: Product
    profit_margin: Decimal | None  # percent over unit cost, None without cost

    @property
    def profit_margin_label(self) -> str:
        if self.profit_margin is None:
            return "N/A"
        return f"{self.profit_margin:.1f}%"


class ProductDashboardUseCase:
    """Read-side reporting over products and the ledger."""

    def __init__(self, record_store: IRecordStore | None = None):
        self._record_store = record_store

    async def _get_uow(self) -> UnitOfWork:
        if self._record_store is None:
            from stockroom.infrastructure.storage import get_record_store

            self._record_store = await get_record_store()
        return UnitOfWork(self._record_store)

    async def rows(self, name: str = "") -> list[ProductDashboardRow]:
        uow = await self._get_uow()
        needle = name.strip().lower()
        return [
            ProductDashboardRow(product=p, profit_margin=p.profit_margin)
            for p in await uow.products.load(strict=False)
            if needle in p.name.lower()
        ]

    async def toggle_active(self, product_id: str) -> Product:
        """Flip the active flag; inactive products block order completion."""
        uow = await self._get_uow()
        async with uow.transaction():
            product = await uow.products.require(product_id)
            product.active = not product.active
            await uow.products.update(product)
        logger.info("product_active_toggled", product_id=product_id, active=product.active)
        return product

    async def stock_history(self, product_id: str) -> StockHistory:
        """Newest-first history; empty with a "no transactions" message when unused."""
        uow = await self._get_uow()
        return await InventoryLedger(uow).history(product_id)
