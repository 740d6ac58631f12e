"""
Stock entry building blocks.

A stock entry is a batch of purchased lines from one supplier. Lines are
validated one at a time as they are added, so a bad line is reported at the
point of entry and never reaches the batch.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Protocol, TypeVar

from stockroom.core.entities import Product
from stockroom.core.exceptions import ValidationError


@dataclass(frozen=True)
class StockEntryLine:
    """One purchased product line: name, units received and total paid."""

    product_name: str
    quantity: int
    total_paid: Decimal

    @property
    def unit_cost(self) -> Decimal:
        return self.total_paid / Decimal(self.quantity)


def _parse_quantity(value: Any) -> int:
    if isinstance(value, bool):
        raise ValidationError("quantity", "quantity must be a whole number", value)
    if isinstance(value, str):
        value = value.strip()
    try:
        quantity = int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError("quantity", "quantity must be a whole number", value) from None
    if isinstance(value, (float, Decimal)) and value != quantity:
        raise ValidationError("quantity", "quantity must be a whole number", value)
    return quantity


def _parse_amount(value: Any) -> Decimal:
    if isinstance(value, bool) or value is None:
        raise ValidationError("total_paid", "total paid must be a number", value)
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError("total_paid", "total paid must be a number", value) from None
    if not amount.is_finite():
        raise ValidationError("total_paid", "total paid must be a number", value)
    return amount


def validate_line(product_name: str, quantity: Any, total_paid: Any) -> StockEntryLine:
    """Build a line, raising ValidationError for the first bad field."""
    name = (product_name or "").strip()
    if not name:
        raise ValidationError("product_name", "enter the product name", product_name)

    parsed_quantity = _parse_quantity(quantity)
    if parsed_quantity <= 0:
        raise ValidationError("quantity", "quantity must be greater than zero", quantity)

    amount = _parse_amount(total_paid)
    if amount <= 0:
        raise ValidationError("total_paid", "total paid must be greater than zero", total_paid)

    return StockEntryLine(product_name=name, quantity=parsed_quantity, total_paid=amount)


@dataclass
class StockEntryBatch:
    """Pending lines waiting to be registered."""

    lines: list[StockEntryLine] = field(default_factory=list)

    def add_line(self, product_name: str, quantity: Any, total_paid: Any) -> StockEntryLine:
        line = validate_line(product_name, quantity, total_paid)
        self.lines.append(line)
        return line

    def remove_line(self, index: int) -> StockEntryLine:
        return self.lines.pop(index)

    def clear(self) -> None:
        self.lines.clear()

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[StockEntryLine]:
        return iter(self.lines)


class LookupOutcome(str, Enum):
    """How find_or_create obtained its product."""

    FOUND = "found"
    CREATED = "created"


@dataclass
class FindOrCreateResult:
    product: Product
    outcome: LookupOutcome

    @property
    def created(self) -> bool:
        return self.outcome is LookupOutcome.CREATED


def find_or_create(products: list[Product], name: str) -> FindOrCreateResult:
    """
    Find a product by case-insensitive exact name, creating it when absent.

    New products are appended to ``products`` so later lines of the same
    batch find them.
    """
    wanted = name.strip().lower()
    for product in products:
        if product.normalized_name == wanted:
            return FindOrCreateResult(product=product, outcome=LookupOutcome.FOUND)

    product = Product(name=name.strip(), stock=0, cost=Decimal("0"))
    products.append(product)
    return FindOrCreateResult(product=product, outcome=LookupOutcome.CREATED)


class _Named(Protocol):
    name: str


N = TypeVar("N", bound=_Named)


def suggest_by_name(items: Iterable[N], text: str) -> list[N]:
    """Autocomplete: items whose name contains text, case-insensitively."""
    needle = text.strip().lower()
    if not needle:
        return []
    return [item for item in items if needle in item.name.lower()]
