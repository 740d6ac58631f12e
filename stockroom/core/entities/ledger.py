"""Inventory ledger domain entities."""

from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from stockroom.core.entities.product import new_id


class MovementType(str, Enum):
    """Direction of a stock movement."""

    IN = "in"
    OUT = "out"


class LedgerTransaction(BaseModel):
    """
    Immutable record of a single inventory movement.

    Quantity is signed: positive for purchases coming in from a supplier,
    negative for sales going out to a customer.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    product_id: str
    counterparty_id: str  # supplier for IN, customer for OUT
    quantity: int
    total_value: Decimal
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    batch_id: str | None = None

    @field_validator("quantity")
    @classmethod
    def non_zero(cls, v: int) -> int:
        if v == 0:
            raise ValueError("quantity must be non-zero")
        return v

    @property
    def direction(self) -> MovementType:
        return MovementType.IN if self.quantity > 0 else MovementType.OUT

    @property
    def description(self) -> str:
        if self.direction is MovementType.IN:
            return "Purchase of goods for resale"
        return "Sale of goods"


class StockHistoryEntry(BaseModel):
    """One row of a product's reconstructed stock history."""

    transaction_id: str
    timestamp: datetime
    kind: str  # "E" entry, "S" exit
    description: str
    quantity: int  # absolute
    previous_stock: int
    current_stock: int


class StockHistory(BaseModel):
    """Newest-first stock history for one product."""

    product_id: str
    entries: list[StockHistoryEntry] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    @property
    def message(self) -> str | None:
        return "no transactions" if self.is_empty else None

    @property
    def current_stock(self) -> int:
        return self.entries[0].current_stock if self.entries else 0
