"""Application use cases."""

from stockroom.application.use_cases.complete_order import (
    CompleteOrderResult,
    CompleteOrderUseCase,
)
from stockroom.application.use_cases.delete_order import DeleteOrderUseCase
from stockroom.application.use_cases.list_orders import ListOrdersUseCase, OrderSummary
from stockroom.application.use_cases.manage_account import ManageAccountUseCase
from stockroom.application.use_cases.manage_customers import ManageCustomersUseCase
from stockroom.application.use_cases.manage_products import ManageProductsUseCase
from stockroom.application.use_cases.manage_suppliers import ManageSuppliersUseCase
from stockroom.application.use_cases.product_dashboard import (
    ProductDashboardRow,
    ProductDashboardUseCase,
)
from stockroom.application.use_cases.register_stock_entry import (
    RegisterStockEntryUseCase,
    StockEntryResult,
)
from stockroom.application.use_cases.save_order import SaveOrderResult, SaveOrderUseCase

__all__ = [
    "RegisterStockEntryUseCase",
    "StockEntryResult",
    "SaveOrderUseCase",
    "SaveOrderResult",
    "CompleteOrderUseCase",
    "CompleteOrderResult",
    "DeleteOrderUseCase",
    "ListOrdersUseCase",
    "OrderSummary",
    "ManageProductsUseCase",
    "ManageCustomersUseCase",
    "ManageSuppliersUseCase",
    "ProductDashboardUseCase",
    "ProductDashboardRow",
    "ManageAccountUseCase",
]
