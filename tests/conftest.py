"""Pytest configuration and fixtures."""

from collections.abc import Callable, Generator
from datetime import UTC, datetime, timedelta
from decimal import Decimal

import pytest
from pydantic import BaseModel

from stockroom.config import reset_settings
from stockroom.core.entities import Customer, Product, Supplier
from stockroom.core.repositories import CUSTOMERS, PRODUCTS, SUPPLIERS
from stockroom.infrastructure.storage import MemoryRecordStore


class StepClock:
    """Deterministic clock advancing one minute per call."""

    def __init__(self, start: datetime | None = None):
        self.current = start or datetime(2024, 1, 15, 9, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        now = self.current
        self.current += timedelta(minutes=1)
        return now


@pytest.fixture(autouse=True)
def _fresh_settings() -> Generator[None, None, None]:
    """Isolate tests from cached settings."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def store() -> MemoryRecordStore:
    """Empty in-memory record store."""
    return MemoryRecordStore()


@pytest.fixture
def clock() -> StepClock:
    return StepClock()


@pytest.fixture
def seed(store: MemoryRecordStore) -> Callable:
    """Write models straight into a collection of the store."""

    async def _seed(key: str, models: list[BaseModel]) -> None:
        existing = await store.read(key)
        await store.write(key, existing + [m.model_dump(mode="json") for m in models])

    return _seed


@pytest.fixture
async def acme(seed) -> Supplier:
    supplier = Supplier(id="sup-acme", name="Acme", tax_id="12.345.678/0001-90")
    await seed(SUPPLIERS, [supplier])
    return supplier


@pytest.fixture
async def customer(seed) -> Customer:
    customer = Customer(id="cus-ana", name="Ana Souza", contact="ana@example.com")
    await seed(CUSTOMERS, [customer])
    return customer


@pytest.fixture
async def widget(seed) -> Product:
    """Active product with stock 10, price 8.00 and cost 5.00."""
    product = Product(
        id="prd-widget",
        name="Widget",
        price=Decimal("8.00"),
        cost=Decimal("5.00"),
        stock=10,
    )
    await seed(PRODUCTS, [product])
    return product
