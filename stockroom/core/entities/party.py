"""Counterparty entities: suppliers and customers."""

from pydantic import BaseModel, Field

from stockroom.core.entities.product import new_id


class Supplier(BaseModel):
    """A supplier that stock entries are purchased from."""

    id: str = Field(default_factory=new_id)
    name: str
    tax_id: str = ""
    city: str = ""
    postal_code: str = ""
    state: str = ""


class Customer(BaseModel):
    """A customer that orders are sold to."""

    id: str = Field(default_factory=new_id)
    name: str
    contact: str = ""
    address: str = ""
    tax_id: str = ""
