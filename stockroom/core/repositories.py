"""
Typed repositories over the record store, and the unit of work that owns them.

Every entity kind lives under one fixed key as an array of records. The
unit of work stages writes and flushes them with a single ``write_many``
while holding the store lock, so a workflow's read-modify-write cycle is
never interleaved with another one.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import ClassVar, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from stockroom.config import get_logger
from stockroom.core.entities import (
    Customer,
    LedgerTransaction,
    Order,
    Product,
    Supplier,
    UserAccount,
)
from stockroom.core.exceptions import (
    CorruptCollectionError,
    CustomerNotFoundError,
    DuplicateTransactionError,
    NotFoundError,
    OrderNotFoundError,
    ProductNotFoundError,
    StorageError,
    SupplierNotFoundError,
)
from stockroom.core.interfaces import IRecordStore, Record

logger = get_logger(__name__)

# Collection keys
PRODUCTS = "products"
SUPPLIERS = "suppliers"
CUSTOMERS = "customers"
ORDERS = "orders"
LEDGER_TRANSACTIONS = "ledger_transactions"
CURRENT_USER = "current_user"

T = TypeVar("T", bound=BaseModel)


class ReadRepository(Generic[T]):
    """Read access to one collection."""

    key: ClassVar[str]
    model: ClassVar[type[BaseModel]]
    not_found: ClassVar[type[NotFoundError]] = NotFoundError

    def __init__(self, uow: "UnitOfWork"):
        self._uow = uow

    async def load(self, strict: bool = True) -> list[T]:
        """
        Load every record of the collection.

        Strict reads raise StorageError on unreadable data. Lenient reads
        log a warning and return an empty collection instead.
        """
        raw = await self._uow.read(self.key, strict=strict)
        try:
            return [self.model.model_validate(r) for r in raw]  # type: ignore[misc]
        except PydanticValidationError as e:
            error = CorruptCollectionError(self.key, f"invalid record: {e.error_count()} errors")
            if strict:
                raise error from e
            logger.warning("collection_unreadable", key=self.key, error=error.message)
            return []

    async def get(self, record_id: str) -> T | None:
        for item in await self.load():
            if item.id == record_id:  # type: ignore[attr-defined]
                return item
        return None

    async def require(self, record_id: str) -> T:
        item = await self.get(record_id)
        if item is None:
            raise self.not_found(record_id)
        return item


class Repository(ReadRepository[T]):
    """Read/write access to one collection."""

    def save_all(self, items: list[T]) -> None:
        """Stage the full collection for the current transaction."""
        self._uow.stage(self.key, [i.model_dump(mode="json") for i in items])

    async def add(self, item: T) -> T:
        items = await self.load()
        items.append(item)
        self.save_all(items)
        return item

    async def update(self, item: T) -> T:
        items = await self.load()
        for index, existing in enumerate(items):
            if existing.id == item.id:  # type: ignore[attr-defined]
                items[index] = item
                self.save_all(items)
                return item
        raise self.not_found(item.id)  # type: ignore[attr-defined]

    async def remove(self, record_id: str) -> None:
        items = await self.load()
        remaining = [i for i in items if i.id != record_id]  # type: ignore[attr-defined]
        if len(remaining) == len(items):
            raise self.not_found(record_id)
        self.save_all(remaining)


class ProductRepository(Repository[Product]):
    key = PRODUCTS
    model = Product
    not_found = ProductNotFoundError

    async def find_by_name(self, name: str) -> Product | None:
        """Case-insensitive exact name match."""
        wanted = name.strip().lower()
        for product in await self.load():
            if product.normalized_name == wanted:
                return product
        return None


class SupplierRepository(Repository[Supplier]):
    key = SUPPLIERS
    model = Supplier
    not_found = SupplierNotFoundError

    async def find_by_name(self, name: str) -> Supplier | None:
        """Exact name match, ignoring surrounding whitespace."""
        wanted = name.strip()
        if not wanted:
            return None
        for supplier in await self.load():
            if supplier.name.strip() == wanted:
                return supplier
        return None


class CustomerRepository(Repository[Customer]):
    key = CUSTOMERS
    model = Customer
    not_found = CustomerNotFoundError


class OrderRepository(Repository[Order]):
    key = ORDERS
    model = Order
    not_found = OrderNotFoundError


class LedgerRepository(ReadRepository[LedgerTransaction]):
    """Append-only access to ledger transactions."""

    key = LEDGER_TRANSACTIONS
    model = LedgerTransaction

    async def append_many(self, transactions: list[LedgerTransaction]) -> None:
        existing = await self.load()
        known = {t.id for t in existing}
        for transaction in transactions:
            if transaction.id in known:
                raise DuplicateTransactionError(transaction.id)
            known.add(transaction.id)
        records = [t.model_dump(mode="json") for t in existing + transactions]
        self._uow.stage(self.key, records)


class AccountRepository:
    """The single current-user record."""

    key = CURRENT_USER

    def __init__(self, uow: "UnitOfWork"):
        self._uow = uow

    async def get(self) -> UserAccount | None:
        raw = await self._uow.read(self.key, strict=True)
        if not raw:
            return None
        try:
            return UserAccount.model_validate(raw[0])
        except PydanticValidationError as e:
            raise CorruptCollectionError(self.key, "invalid account record") from e

    def set(self, account: UserAccount) -> None:
        self._uow.stage(self.key, [account.model_dump(mode="json")])


class UnitOfWork:
    """Groups repository writes into one atomic flush to the record store."""

    def __init__(self, store: IRecordStore):
        self.store = store
        self._staged: dict[str, list[Record]] = {}
        self._active = False

        self.products = ProductRepository(self)
        self.suppliers = SupplierRepository(self)
        self.customers = CustomerRepository(self)
        self.orders = OrderRepository(self)
        self.ledger = LedgerRepository(self)
        self.account = AccountRepository(self)

    async def read(self, key: str, strict: bool = True) -> list[Record]:
        """Read a collection, seeing writes staged in the open transaction."""
        if key in self._staged:
            return list(self._staged[key])
        try:
            return await self.store.read(key)
        except StorageError as e:
            if strict:
                raise
            logger.warning("collection_unreadable", key=key, error=e.message)
            return []

    def stage(self, key: str, records: list[Record]) -> None:
        if not self._active:
            raise RuntimeError("writes require an open transaction")
        self._staged[key] = records

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator["UnitOfWork"]:
        """
        Hold the store lock and commit staged writes on success.

        Staged writes are discarded when the block raises. Not reentrant.
        """
        async with self.store.lock:
            self._staged = {}
            self._active = True
            try:
                yield self
                if self._staged:
                    await self.store.write_many(self._staged)
                    logger.debug("unit_of_work_committed", keys=sorted(self._staged))
            except Exception:
                if self._staged:
                    logger.info("unit_of_work_discarded", keys=sorted(self._staged))
                raise
            finally:
                self._staged = {}
                self._active = False
