"""Tests for stock entry validation, batching and find_or_create."""

from decimal import Decimal

import pytest

from stockroom.core.entities import Product, Supplier
from stockroom.core.exceptions import ValidationError
from stockroom.core.services import (
    LookupOutcome,
    StockEntryBatch,
    find_or_create,
    suggest_by_name,
    validate_line,
)


class TestValidateLine:
    def test_valid_line(self):
        line = validate_line("  Widget ", "10", "50.00")
        assert line.product_name == "Widget"
        assert line.quantity == 10
        assert line.total_paid == Decimal("50.00")
        assert line.unit_cost == Decimal("5")

    @pytest.mark.parametrize(
        "name, quantity, total, field",
        [
            ("", 1, 1, "product_name"),
            ("   ", 1, 1, "product_name"),
            ("Widget", 0, 1, "quantity"),
            ("Widget", -2, 1, "quantity"),
            ("Widget", 2.5, 1, "quantity"),
            ("Widget", "abc", 1, "quantity"),
            ("Widget", True, 1, "quantity"),
            ("Widget", float("inf"), 1, "quantity"),
            ("Widget", Decimal("-Infinity"), 1, "quantity"),
            ("Widget", float("nan"), 1, "quantity"),
            ("Widget", 1, 0, "total_paid"),
            ("Widget", 1, "-3.10", "total_paid"),
            ("Widget", 1, "ten", "total_paid"),
            ("Widget", 1, "NaN", "total_paid"),
            ("Widget", 1, None, "total_paid"),
        ],
    )
    def test_invalid_line_names_field(self, name, quantity, total, field):
        with pytest.raises(ValidationError) as exc:
            validate_line(name, quantity, total)
        assert exc.value.details["field"] == field


class TestStockEntryBatch:
    def test_invalid_line_never_enters_batch(self):
        batch = StockEntryBatch()
        batch.add_line("Widget", 10, "50")
        with pytest.raises(ValidationError):
            batch.add_line("Gadget", 0, "10")
        assert len(batch) == 1
        assert [line.product_name for line in batch] == ["Widget"]

    def test_infinite_quantity_is_a_validation_error(self):
        batch = StockEntryBatch()
        with pytest.raises(ValidationError) as exc:
            batch.add_line("Widget", float("inf"), "5")
        assert exc.value.details["field"] == "quantity"
        assert len(batch) == 0

    def test_remove_and_clear(self):
        batch = StockEntryBatch()
        batch.add_line("Widget", 1, 1)
        batch.add_line("Gadget", 2, 2)
        removed = batch.remove_line(0)
        assert removed.product_name == "Widget"
        batch.clear()
        assert len(batch) == 0


class TestFindOrCreate:
    def test_found_case_insensitive(self):
        existing = Product(name="Widget", stock=3)
        products = [existing]
        result = find_or_create(products, "WIDGET")
        assert result.outcome is LookupOutcome.FOUND
        assert result.product is existing
        assert len(products) == 1

    def test_created_is_appended_for_later_lines(self):
        products: list[Product] = []
        first = find_or_create(products, "Widget")
        second = find_or_create(products, "widget")

        assert first.created
        assert first.product.stock == 0
        assert first.product.cost == Decimal("0")
        assert second.outcome is LookupOutcome.FOUND
        assert second.product is first.product


class TestSuggestByName:
    def test_substring_case_insensitive(self):
        suppliers = [Supplier(name="Acme Tools"), Supplier(name="Beta"), Supplier(name="ACME Food")]
        assert [s.name for s in suggest_by_name(suppliers, "acme")] == ["Acme Tools", "ACME Food"]

    def test_empty_text_suggests_nothing(self):
        assert suggest_by_name([Supplier(name="Acme")], "  ") == []
