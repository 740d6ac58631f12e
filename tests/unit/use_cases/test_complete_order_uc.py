"""Tests for CompleteOrderUseCase."""

from decimal import Decimal

import pytest

from stockroom.application.use_cases.complete_order import CompleteOrderUseCase
from stockroom.core.entities import Order, OrderStatus, Product
from stockroom.core.exceptions import (
    CustomerNotFoundError,
    InactiveProductsError,
    OrderNotFoundError,
    OrderStateError,
    ValidationError,
)
from stockroom.core.repositories import ORDERS, PRODUCTS, UnitOfWork


@pytest.fixture
def use_case(store, clock):
    return CompleteOrderUseCase(record_store=store, clock=clock)


@pytest.fixture
def draft(seed, customer, widget):
    async def _draft(*items: tuple[str, int]) -> Order:
        order = Order(id="ord-1", customer_id=customer.id)
        for product_id, quantity in items:
            order.add_item(product_id, quantity)
        await seed(ORDERS, [order])
        return order

    return _draft


class TestCompleteOrderUseCase:
    async def test_decrements_stock_and_records_sale(self, use_case, store, draft, widget, customer):
        await draft((widget.id, 3))
        result = await use_case.execute("ord-1")

        uow = UnitOfWork(store)
        assert (await uow.products.require(widget.id)).stock == 7

        [transaction] = result.transactions
        assert transaction.quantity == -3
        assert transaction.total_value == Decimal("24.00")
        assert transaction.counterparty_id == customer.id
        assert transaction.batch_id == result.order.ledger_batch_id

        order = await uow.orders.require("ord-1")
        assert order.status is OrderStatus.COMPLETED
        assert order.total == Decimal("24.00")
        assert order.items[0].unit_price == Decimal("8.00")
        assert order.completed_at is not None

    async def test_oversell_clamps_stock_at_zero(self, use_case, store, draft, widget):
        await draft((widget.id, 15))
        result = await use_case.execute("ord-1")

        assert (await UnitOfWork(store).products.require(widget.id)).stock == 0
        assert result.transactions[0].quantity == -15
        assert result.transactions[0].total_value == Decimal("120.00")

    async def test_inactive_product_blocks_completion(self, use_case, store, seed, draft, widget):
        await seed(PRODUCTS, [Product(id="prd-old", name="Old Thing", stock=5, active=False)])
        await draft((widget.id, 1), ("prd-old", 1))

        with pytest.raises(InactiveProductsError) as exc:
            await use_case.execute("ord-1")
        assert exc.value.details["inactive"] == ["Old Thing"]
        assert exc.value.details["field"] == "items"

        uow = UnitOfWork(store)
        assert (await uow.products.require(widget.id)).stock == 10
        assert (await uow.orders.require("ord-1")).status is OrderStatus.DRAFT
        assert await uow.ledger.load() == []

    async def test_deleted_product_blocks_completion(self, use_case, store, draft, widget):
        await draft((widget.id, 1), ("prd-gone", 2))
        with pytest.raises(InactiveProductsError) as exc:
            await use_case.execute("ord-1")
        assert exc.value.details["missing"] == ["prd-gone"]
        assert (await UnitOfWork(store).products.require(widget.id)).stock == 10

    async def test_second_completion_is_a_no_op(self, use_case, store, draft, widget):
        await draft((widget.id, 2))
        first = await use_case.execute("ord-1")
        second = await use_case.execute("ord-1")

        assert second.already_completed is True
        assert [t.id for t in second.transactions] == [t.id for t in first.transactions]
        uow = UnitOfWork(store)
        assert (await uow.products.require(widget.id)).stock == 8
        assert len(await uow.ledger.load()) == 1

    async def test_completed_order_rejects_edits(self, use_case, store, draft, widget):
        await draft((widget.id, 2))
        result = await use_case.execute("ord-1")
        with pytest.raises(OrderStateError):
            result.order.add_item(widget.id, 1)

    async def test_empty_order(self, use_case, draft):
        await draft()
        with pytest.raises(ValidationError):
            await use_case.execute("ord-1")

    async def test_unknown_order(self, use_case):
        with pytest.raises(OrderNotFoundError):
            await use_case.execute("missing")

    async def test_deleted_customer(self, use_case, seed, widget):
        order = Order(id="ord-2", customer_id="cus-gone")
        order.add_item(widget.id, 1)
        await seed(ORDERS, [order])
        with pytest.raises(CustomerNotFoundError):
            await use_case.execute("ord-2")

    async def test_same_product_on_two_lines(self, use_case, store, draft, widget):
        await draft((widget.id, 4), (widget.id, 4))
        result = await use_case.execute("ord-1")

        assert (await UnitOfWork(store).products.require(widget.id)).stock == 2
        assert result.order.total == Decimal("64.00")
        assert len(result.transactions) == 2
