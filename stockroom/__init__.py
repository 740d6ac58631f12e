"""Stockroom: customers, suppliers, products, stock entries and sales orders."""

__version__ = "1.0.0"
