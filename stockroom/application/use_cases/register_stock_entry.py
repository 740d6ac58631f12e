"""Register Stock Entry Use Case: purchases IN with product upsert and unit cost."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from stockroom.application.dto.requests import RegisterStockEntryRequest
from stockroom.config import get_logger, workflow_context
from stockroom.core.entities import LedgerTransaction, Product, Supplier, new_id
from stockroom.core.exceptions import ValidationError
from stockroom.core.interfaces import IRecordStore
from stockroom.core.repositories import UnitOfWork
from stockroom.core.services import InventoryLedger, find_or_create, validate_line

logger = get_logger(__name__)


@dataclass
class StockEntryResult:
    """Result of registering a stock entry batch."""

    batch_id: str
    supplier: Supplier
    transactions: list[LedgerTransaction]
    products: list[Product]  # touched products, in first-touch order
    created_product_ids: list[str] = field(default_factory=list)

    @property
    def transaction_ids(self) -> list[str]:
        return [t.id for t in self.transactions]

    @property
    def message(self) -> str:
        return f"Stock entry recorded: {', '.join(self.transaction_ids)}"


class RegisterStockEntryUseCase:
    """Apply a batch of purchased lines to products and the ledger."""

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

    async def execute(self, request: RegisterStockEntryRequest) -> StockEntryResult:
        """Execute register stock entry use case."""
        batch_id = new_id()
        with workflow_context("stock_entry", batch_id=batch_id):
            return await self._register(request, batch_id)

    async def _register(
        self, request: RegisterStockEntryRequest, batch_id: str
    ) -> StockEntryResult:
        logger.info(
            "stock_entry_started",
            supplier=request.supplier_name,
            lines=len(request.lines),
        )

        uow = await self._get_uow()
        async with uow.transaction():
            # 1. Resolve the supplier text at submit time
            supplier = await uow.suppliers.find_by_name(request.supplier_name)
            if supplier is None:
                raise ValidationError("supplier", "no supplier selected", request.supplier_name)

            # 2. Validate every line before touching anything
            if not request.lines:
                raise ValidationError("lines", "add at least one product to the entry")
            lines = [
                validate_line(line.product_name, line.quantity, line.total_paid)
                for line in request.lines
            ]

            # 3. Apply lines in input order
            products = await uow.products.load()
            transactions: list[LedgerTransaction] = []
            touched: dict[str, Product] = {}
            created: list[str] = []

            for line in lines:
                found = find_or_create(products, line.product_name)
                product = found.product
                if found.created:
                    created.append(product.id)
                    logger.info("product_created", product_id=product.id, name=product.name)

                product.stock += line.quantity
                product.cost = line.unit_cost  # last entry wins
                touched.setdefault(product.id, product)

                transactions.append(
                    LedgerTransaction(
                        product_id=product.id,
                        counterparty_id=supplier.id,
                        quantity=line.quantity,
                        total_value=line.total_paid,
                        timestamp=self._clock(),
                        batch_id=batch_id,
                    )
                )

            # 4. Stage products and ledger together
            uow.products.save_all(products)
            await InventoryLedger(uow).append_many(transactions)

        logger.info(
            "stock_entry_complete",
            batch_id=batch_id,
            supplier_id=supplier.id,
            transactions=len(transactions),
            created_products=len(created),
        )

        return StockEntryResult(
            batch_id=batch_id,
            supplier=supplier,
            transactions=transactions,
            products=list(touched.values()),
            created_product_ids=created,
        )
