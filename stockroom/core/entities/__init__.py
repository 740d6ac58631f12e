"""Core domain entities."""

from stockroom.core.entities.account import UserAccount
from stockroom.core.entities.ledger import (
    LedgerTransaction,
    MovementType,
    StockHistory,
    StockHistoryEntry,
)
from stockroom.core.entities.order import Order, OrderLineItem, OrderStatus
from stockroom.core.entities.party import Customer, Supplier
from stockroom.core.entities.product import Product, new_id

__all__ = [
    # Catalog entities
    "Product",
    "new_id",
    # Party entities
    "Supplier",
    "Customer",
    # Ledger entities
    "LedgerTransaction",
    "MovementType",
    "StockHistory",
    "StockHistoryEntry",
    # Order entities
    "Order",
    "OrderLineItem",
    "OrderStatus",
    # Account entities
    "UserAccount",
]
