"""Error taxonomy for menu operations."""

from __future__ import annotations

from enum import Enum

from chef_menu.constant import EMPTY_CUSTOMER_NAME_MESSAGE, EMPTY_NAME_MESSAGE, INVALID_PRICE_MESSAGE


class ChefMenuError(Exception):
    """Base class for all chef-menu errors."""


class ValidationReason(Enum):
    EMPTY_NAME = "empty_name"
    INVALID_PRICE = "invalid_price"
    EMPTY_CUSTOMER_NAME = "empty_customer_name"


_VALIDATION_MESSAGES: dict[ValidationReason, str] = {
    ValidationReason.EMPTY_NAME: EMPTY_NAME_MESSAGE,
    ValidationReason.INVALID_PRICE: INVALID_PRICE_MESSAGE,
    ValidationReason.EMPTY_CUSTOMER_NAME: EMPTY_CUSTOMER_NAME_MESSAGE,
}


class ValidationError(ChefMenuError):
    """User input was rejected. Nothing was mutated."""

    def __init__(self, reason: ValidationReason) -> None:
        self.reason = reason
        self.message = _VALIDATION_MESSAGES[reason]
        super().__init__(self.message)


class PersistenceOperation(Enum):
    READ = "read"
    WRITE = "write"


class PersistenceError(ChefMenuError):
    """The key-value store could not be read or written."""

    def __init__(self, operation: PersistenceOperation, detail: str) -> None:
        self.operation = operation
        self.detail = detail
        super().__init__(f"{operation.value} failed: {detail}")
