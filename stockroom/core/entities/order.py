"""Sales order domain entities."""

from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field

from stockroom.core.entities.product import new_id
from stockroom.core.exceptions import OrderStateError


class OrderStatus(str, Enum):
    """Lifecycle states of a sales order."""

    DRAFT = "draft"
    COMPLETED = "completed"


class OrderLineItem(BaseModel):
    """A product and quantity on an order."""

    product_id: str
    quantity: int = Field(gt=0)
    unit_price: Decimal | None = None  # frozen when the order is completed


class Order(BaseModel):
    """
    A sales order.

    Drafts are freely editable. Completion is one-way: it freezes unit prices
    and the total, and links the order to the ledger batch it produced.
    """

    id: str = Field(default_factory=new_id)
    customer_id: str
    items: list[OrderLineItem] = Field(default_factory=list)
    status: OrderStatus = OrderStatus.DRAFT
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    completed_at: datetime | None = None
    ledger_batch_id: str | None = None
    total: Decimal | None = None  # set on completion

    @property
    def is_completed(self) -> bool:
        return self.status is OrderStatus.COMPLETED

    def _ensure_draft(self, operation: str) -> None:
        if self.is_completed:
            raise OrderStateError(self.id, self.status.value, operation)

    def add_item(self, product_id: str, quantity: int) -> OrderLineItem:
        self._ensure_draft("edit")
        item = OrderLineItem(product_id=product_id, quantity=quantity)
        self.items.append(item)
        return item

    def replace_item(self, index: int, product_id: str, quantity: int) -> OrderLineItem:
        self._ensure_draft("edit")
        item = OrderLineItem(product_id=product_id, quantity=quantity)
        self.items[index] = item
        return item

    def remove_item(self, index: int) -> OrderLineItem:
        self._ensure_draft("edit")
        return self.items.pop(index)

    def reassign_customer(self, customer_id: str) -> None:
        self._ensure_draft("edit")
        self.customer_id = customer_id

    def mark_completed(
        self, batch_id: str, total: Decimal, completed_at: datetime
    ) -> None:
        self._ensure_draft("complete")
        self.status = OrderStatus.COMPLETED
        self.ledger_batch_id = batch_id
        self.total = total
        self.completed_at = completed_at
