"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly. Each rejection kind has its own
class so the caller can tell "insufficient stock" from "insufficient payment".
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A request field is malformed or out of range."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFoundError(EntityNotFoundError):

    def __init__(self, product_id: str | None) -> None:
        super().__init__(f"Product with ID '{product_id}' not found")
        self.product_id = product_id


class CustomerNotFoundError(EntityNotFoundError):

    def __init__(self, customer_id: str | None) -> None:
        super().__init__(f"Customer with ID '{customer_id}' not found")
        self.customer_id = customer_id


class InsufficientStockError(DomainException):
    """Applying a stock delta would take the quantity below zero."""

    def __init__(self, product_id: str, requested: int, available: int) -> None:
        super().__init__(
            f"Insufficient stock for product '{product_id}' "
            f"(need {requested}, have {available} available)"
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available


class InsufficientPaymentError(DomainException):
    """The tendered amount does not cover the sale total."""

    def __init__(self, total, tendered) -> None:
        super().__init__(
            f"Insufficient payment: total is {total}, tendered {tendered}"
        )
        self.total = total
        self.tendered = tendered


class StoreUnavailableError(DomainException):
    """The underlying record store could not be read or written."""
