"""Order totals and money formatting."""

from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal

from stockroom.core.entities import Order, Product


def order_total(order: Order, products: Mapping[str, Product]) -> Decimal:
    """
    Total of an order.

    Drafts are priced from live product prices on every call, so the total
    follows price changes until completion; items whose product no longer
    exists contribute nothing. Completed orders return the total frozen at
    completion.
    """
    if order.is_completed and order.total is not None:
        return order.total

    total = Decimal("0")
    for item in order.items:
        product = products.get(item.product_id)
        if product is not None:
            total += product.price * item.quantity
    return total


def quantize_money(value: Decimal, places: int = 2) -> Decimal:
    """Round a monetary value half-up to the configured number of places."""
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
