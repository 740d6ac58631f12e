"""
Application layer - use cases and request DTOs.

Use cases open a unit of work over the configured record store and are the
only entry point for callers.
"""

from stockroom.application.use_cases import (
    CompleteOrderUseCase,
    DeleteOrderUseCase,
    ListOrdersUseCase,
    ManageAccountUseCase,
    ManageCustomersUseCase,
    ManageProductsUseCase,
    ManageSuppliersUseCase,
    ProductDashboardUseCase,
    RegisterStockEntryUseCase,
    SaveOrderUseCase,
)

__all__ = [
    "RegisterStockEntryUseCase",
    "SaveOrderUseCase",
    "CompleteOrderUseCase",
    "DeleteOrderUseCase",
    "ListOrdersUseCase",
    "ManageProductsUseCase",
    "ManageCustomersUseCase",
    "ManageSuppliersUseCase",
    "ProductDashboardUseCase",
    "ManageAccountUseCase",
]
