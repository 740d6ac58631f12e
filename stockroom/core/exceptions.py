"""
Domain exceptions for the Stockroom application.

Provides specific exception types for different error scenarios.
"""

from typing import Any


class StockroomError(Exception):
    """Base exception for all Stockroom errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to a plain dictionary for callers that report errors."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Storage Exceptions
class StorageError(StockroomError):
    """Base exception for record store operations."""

    pass


class CorruptCollectionError(StorageError):
    """Persisted payload for a collection could not be decoded."""

    def __init__(self, key: str, reason: str):
        super().__init__(
            f"Collection '{key}' is unreadable: {reason}",
            code="CORRUPT_COLLECTION",
            details={"key": key, "reason": reason},
        )


class SchemaVersionError(StorageError):
    """Persisted payload was written with an unsupported schema version."""

    def __init__(self, key: str, found: Any, expected: int):
        super().__init__(
            f"Collection '{key}' has schema version {found}, expected {expected}",
            code="SCHEMA_VERSION_MISMATCH",
            details={"key": key, "found": found, "expected": expected},
        )


class DuplicateTransactionError(StorageError):
    """A ledger transaction id was appended twice."""

    def __init__(self, transaction_id: str):
        super().__init__(
            f"Ledger transaction already recorded: {transaction_id}",
            code="DUPLICATE_TRANSACTION",
            details={"transaction_id": transaction_id},
        )


class DatabaseError(StorageError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )


# Lookup Exceptions
class NotFoundError(StockroomError):
    """A referenced record no longer exists."""

    entity: str = "record"

    def __init__(self, record_id: str):
        super().__init__(
            f"{self.entity.capitalize()} not found: {record_id}",
            code=f"{self.entity.upper()}_NOT_FOUND",
            details={f"{self.entity}_id": record_id},
        )


class ProductNotFoundError(NotFoundError):
    entity = "product"


class CustomerNotFoundError(NotFoundError):
    entity = "customer"


class SupplierNotFoundError(NotFoundError):
    entity = "supplier"


class OrderNotFoundError(NotFoundError):
    entity = "order"


# Validation Exceptions
class ValidationError(StockroomError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )


class InactiveProductsError(ValidationError):
    """Order references products that are inactive or gone."""

    def __init__(self, order_id: str, inactive: list[str], missing: list[str]):
        offending = ", ".join(inactive + missing)
        super().__init__(
            field="items",
            message=f"order {order_id} references unavailable products: {offending}",
        )
        self.details.update(
            {
                "order_id": order_id,
                "inactive": inactive,
                "missing": missing,
            }
        )


# Workflow Exceptions
class OrderStateError(StockroomError):
    """Operation is not allowed in the order's current state."""

    def __init__(self, order_id: str, status: str, operation: str):
        super().__init__(
            f"Cannot {operation} order {order_id} in status '{status}'",
            code="ORDER_STATE",
            details={"order_id": order_id, "status": status, "operation": operation},
        )


class AuthenticationError(StockroomError):
    """Login credentials did not match the stored account."""

    def __init__(self, reason: str = "invalid email or password"):
        super().__init__(reason, code="AUTHENTICATION_FAILED")


class ConfigurationError(StockroomError):
    """Configuration error."""

    pass
