"""Tests for DeleteOrderUseCase."""

import pytest

from stockroom.application.use_cases.complete_order import CompleteOrderUseCase
from stockroom.application.use_cases.delete_order import DeleteOrderUseCase
from stockroom.core.entities import Order
from stockroom.core.exceptions import OrderNotFoundError, OrderStateError
from stockroom.core.repositories import ORDERS, UnitOfWork


@pytest.fixture
async def order(seed, customer, widget) -> Order:
    order = Order(id="ord-1", customer_id=customer.id)
    order.add_item(widget.id, 2)
    await seed(ORDERS, [order])
    return order


class TestDeleteOrderUseCase:
    async def test_deletes_draft(self, store, order):
        await DeleteOrderUseCase(record_store=store).execute(order.id)
        assert await UnitOfWork(store).orders.load() == []

    async def test_completed_order_is_kept(self, store, clock, order):
        await CompleteOrderUseCase(record_store=store, clock=clock).execute(order.id)

        with pytest.raises(OrderStateError) as exc:
            await DeleteOrderUseCase(record_store=store).execute(order.id)
        assert "delete" in exc.value.message
        assert len(await UnitOfWork(store).orders.load()) == 1

    async def test_unknown_order(self, store):
        with pytest.raises(OrderNotFoundError):
            await DeleteOrderUseCase(record_store=store).execute("missing")
