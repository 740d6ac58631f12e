"""Data transfer objects."""

from stockroom.application.dto.requests import (
    CustomerRequest,
    OrderItemRequest,
    ProductRequest,
    RegisterAccountRequest,
    RegisterStockEntryRequest,
    SaveOrderRequest,
    StockEntryLineRequest,
    SupplierRequest,
)

__all__ = [
    "StockEntryLineRequest",
    "RegisterStockEntryRequest",
    "OrderItemRequest",
    "SaveOrderRequest",
    "ProductRequest",
    "CustomerRequest",
    "SupplierRequest",
    "RegisterAccountRequest",
]
