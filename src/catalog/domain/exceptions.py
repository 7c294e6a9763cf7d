"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and translate them into a
user-facing message (and a transport status, see ``cli/errors.py``).
"""

from __future__ import annotations

from typing import Any


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class InvalidValueError(ValidationError):
    """A value object received an out-of-range or malformed value."""


class InvalidFormatError(ValidationError):
    """A coded value (e.g. a product code) does not match its format."""


class InvalidProductDataError(ValidationError):
    """A product field failed validation."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
    ) -> None:
        super().__init__(message, field)
        self.value = value

    @classmethod
    def for_field(
        cls, field: str, reason: str, value: Any = None
    ) -> InvalidProductDataError:
        return cls(f"Invalid {field}: {reason}", field, value)

    @classmethod
    def for_empty_field(cls, field: str) -> InvalidProductDataError:
        return cls(f"{field} cannot be empty", field)

    @classmethod
    def for_negative_value(cls, field: str, value: Any) -> InvalidProductDataError:
        return cls(f"{field} cannot be negative. Received: {value}", field, value)

    @classmethod
    def for_invalid_format(
        cls, field: str, expected_format: str, value: Any
    ) -> InvalidProductDataError:
        return cls(
            f"Invalid {field} format. Expected: {expected_format}. Received: {value}",
            field,
            value,
        )


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    def __init__(
        self, resource: str, identifier: str, message: str | None = None
    ) -> None:
        super().__init__(
            message or f"{resource} with identifier '{identifier}' not found"
        )
        self.resource = resource
        self.identifier = identifier


class ProductNotFoundError(EntityNotFoundError):

    def __init__(self, identifier: str, identifier_type: str = "id") -> None:
        super().__init__(
            "Product",
            identifier,
            f"Product with {identifier_type} '{identifier}' not found",
        )
        self.identifier_type = identifier_type


class DuplicateProductCodeError(DomainException):
    """A SKU or product code collides with an existing product."""

    def __init__(self, code: str, code_type: str = "sku") -> None:
        super().__init__(f"Product {code_type} '{code}' already exists")
        self.code = code
        self.code_type = code_type


class InsufficientStockError(DomainException):
    """A stock decrement would drive the stock below zero."""

    def __init__(
        self, product_id: str, requested_quantity: int, available_stock: int
    ) -> None:
        super().__init__(
            f"Insufficient stock for product '{product_id}'. "
            f"Requested: {requested_quantity}, Available: {available_stock}"
        )
        self.product_id = product_id
        self.requested_quantity = requested_quantity
        self.available_stock = available_stock

    @property
    def missing_quantity(self) -> int:
        return self.requested_quantity - self.available_stock


class ProductNotAvailableError(DomainException):
    """A product cannot currently be purchased."""

    INACTIVE = "inactive"
    OUT_OF_STOCK = "out-of-stock"
    DISCONTINUED = "discontinued"

    def __init__(self, product_id: str, reason: str) -> None:
        super().__init__(f"Product '{product_id}' is not available: {reason}")
        self.product_id = product_id
        self.reason = reason

    @classmethod
    def inactive(cls, product_id: str) -> ProductNotAvailableError:
        return cls(product_id, cls.INACTIVE)

    @classmethod
    def out_of_stock(cls, product_id: str) -> ProductNotAvailableError:
        return cls(product_id, cls.OUT_OF_STOCK)

    @classmethod
    def discontinued(cls, product_id: str) -> ProductNotAvailableError:
        return cls(product_id, cls.DISCONTINUED)

    def is_inactive(self) -> bool:
        return self.reason == self.INACTIVE

    def is_out_of_stock(self) -> bool:
        return self.reason == self.OUT_OF_STOCK

    def is_discontinued(self) -> bool:
        return self.reason == self.DISCONTINUED
