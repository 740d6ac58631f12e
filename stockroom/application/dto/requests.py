"""
Request DTOs for the application use cases.

Numeric fields the user types are kept loose here; the use cases validate
them and raise the domain ValidationError naming the field.
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from stockroom.core.services import StockEntryBatch

Number = int | float | Decimal | str


class StockEntryLineRequest(BaseModel):
    """A purchased product line."""

    product_name: str = Field(..., description="Product name, matched case-insensitively")
    quantity: Number = Field(..., description="Units received")
    total_paid: Number = Field(..., description="Total amount paid for the line")


class RegisterStockEntryRequest(BaseModel):
    """Request to register a stock entry batch from one supplier."""

    supplier_name: str = Field(..., description="Supplier name as typed")
    lines: list[StockEntryLineRequest] = Field(default_factory=list)

    @classmethod
    def from_batch(
        cls, supplier_name: str, batch: StockEntryBatch
    ) -> "RegisterStockEntryRequest":
        return cls(
            supplier_name=supplier_name,
            lines=[
                StockEntryLineRequest(
                    product_name=line.product_name,
                    quantity=line.quantity,
                    total_paid=line.total_paid,
                )
                for line in batch
            ],
        )


class OrderItemRequest(BaseModel):
    product_id: str
    quantity: int


class SaveOrderRequest(BaseModel):
    """Create a draft order, or replace the contents of an existing draft."""

    order_id: str | None = Field(default=None, description="Existing draft to update")
    customer_id: str
    items: list[OrderItemRequest] = Field(default_factory=list)


class ProductRequest(BaseModel):
    name: str
    price: Decimal = Decimal("0")
    description: str = ""
    supplier_name: str = ""
    image: str | None = Field(default=None, description="Image as a data URL; None removes it")


class CustomerRequest(BaseModel):
    name: str
    contact: str = ""
    address: str = ""
    tax_id: str = ""


class SupplierRequest(BaseModel):
    name: str
    tax_id: str = ""
    city: str = ""
    postal_code: str = ""
    state: str = ""


class RegisterAccountRequest(BaseModel):
    name: str
    email: str
    password: str
    confirmation: str
