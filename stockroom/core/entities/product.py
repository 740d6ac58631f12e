"""Product domain entity."""

from decimal import Decimal
from uuid import uuid4

from pydantic import BaseModel, Field


def new_id() -> str:
    """Generate a collision-resistant record identity."""
    return uuid4().hex


class Product(BaseModel):
    """A sellable product with live stock level and derived unit cost."""

    id: str = Field(default_factory=new_id)
    name: str
    price: Decimal = Decimal("0")  # unit sale price
    cost: Decimal | None = None  # unit cost from the last stock entry
    stock: int = Field(default=0, ge=0)
    active: bool = True
    description: str = ""
    supplier_name: str = ""
    image: str | None = None  # data URL, e.g. "data:image/png;base64,..."

    @property
    def normalized_name(self) -> str:
        return self.name.strip().lower()

    @property
    def profit_margin(self) -> Decimal | None:
        """Markup over unit cost in percent, None without a usable cost."""
        if self.cost is None or self.cost <= 0:
            return None
        return (self.price - self.cost) / self.cost * 100
