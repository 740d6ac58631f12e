"""Tests for ProductDashboardUseCase."""

from decimal import Decimal

import pytest

from stockroom.application.use_cases.product_dashboard import (
    ProductDashboardRow,
    ProductDashboardUseCase,
)
from stockroom.core.entities import Product
from stockroom.core.exceptions import ProductNotFoundError
from stockroom.core.repositories import PRODUCTS


@pytest.fixture
def use_case(store):
    return ProductDashboardUseCase(record_store=store)


class TestProductDashboardUseCase:
    async def test_rows_with_margins(self, use_case, seed, widget):
        await seed(PRODUCTS, [Product(id="p-new", name="Gizmo", price=Decimal("4"))])

        rows = {r.product.id: r for r in await use_case.rows()}
        assert rows[widget.id].profit_margin == Decimal("60")
        assert rows[widget.id].profit_margin_label == "60.0%"
        assert rows["p-new"].profit_margin_label == "N/A"

    async def test_rows_filter_by_name(self, use_case, widget):
        assert await use_case.rows(name="gizmo") == []
        assert len(await use_case.rows(name="WID")) == 1

    async def test_toggle_active(self, use_case, widget):
        assert (await use_case.toggle_active(widget.id)).active is False
        assert (await use_case.toggle_active(widget.id)).active is True

    async def test_toggle_unknown(self, use_case):
        with pytest.raises(ProductNotFoundError):
            await use_case.toggle_active("nothing")

    async def test_history_of_unused_product(self, use_case, widget):
        history = await use_case.stock_history(widget.id)
        assert history.is_empty
        assert history.message == "no transactions"


def test_margin_label_rounds_to_one_place():
    row = ProductDashboardRow(product=Product(name="x"), profit_margin=Decimal("33.3333"))
    assert row.profit_margin_label == "33.3%"
