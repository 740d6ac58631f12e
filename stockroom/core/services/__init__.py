"""Core domain services."""

from stockroom.core.services.inventory_ledger import (
    InventoryLedger,
    build_history,
    newest_first,
)
from stockroom.core.services.order_pricing import order_total, quantize_money
from stockroom.core.services.stock_entry import (
    FindOrCreateResult,
    LookupOutcome,
    StockEntryBatch,
    StockEntryLine,
    find_or_create,
    suggest_by_name,
    validate_line,
)

__all__ = [
    # Ledger
    "InventoryLedger",
    "build_history",
    "newest_first",
    # Stock entry
    "StockEntryBatch",
    "StockEntryLine",
    "validate_line",
    "find_or_create",
    "FindOrCreateResult",
    "LookupOutcome",
    "suggest_by_name",
    # Orders
    "order_total",
    "quantize_money",
]
