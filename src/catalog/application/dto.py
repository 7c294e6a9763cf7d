"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from catalog.domain.exceptions import InvalidProductDataError
from catalog.domain.model.product import Product


@dataclass(frozen=True)
class CreateProductInput:
    """Input: every field is required."""

    name: str
    description: str
    price: Decimal | float | int | str
    stock: int
    sku: str
    category_id: str


@dataclass(frozen=True)
class UpdateProductInput:
    """Input: ``None`` means "leave this field unchanged"."""

    name: str | None = None
    description: str | None = None
    price: Decimal | float | int | str | None = None
    stock: int | None = None
    category_id: str | None = None
    is_active: bool | None = None


class StockOperation(Enum):
    INCREMENT = "increment"
    DECREMENT = "decrement"


@dataclass(frozen=True)
class UpdateStockInput:
    product_id: str
    quantity: int
    operation: StockOperation

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "operation", StockOperation(self.operation))
        except ValueError as exc:
            raise InvalidProductDataError.for_invalid_format(
                "operation", "increment or decrement", self.operation
            ) from exc


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as displayed to the user."""

    id: str
    name: str
    description: str
    sku: str
    price: Decimal
    formatted_price: str  # e.g. "$20.00"
    stock: int
    category_id: str
    is_active: bool
    is_in_stock: bool
    is_low_stock: bool  # fixed default threshold, not CATALOG_LOW_STOCK_THRESHOLD
    created_at: str  # ISO-8601
    updated_at: str


@dataclass(frozen=True)
class PaginationMeta:
    page: int
    page_size: int
    total_items: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool

    @staticmethod
    def build(page: int, page_size: int, total_items: int) -> PaginationMeta:
        total_pages = math.ceil(total_items / page_size)
        return PaginationMeta(
            page=page,
            page_size=page_size,
            total_items=total_items,
            total_pages=total_pages,
            has_next_page=page < total_pages,
            has_previous_page=page > 1,
        )


@dataclass(frozen=True)
class PaginatedResult:
    """Output: one page of products plus the paging metadata."""

    meta: PaginationMeta
    data: list[ProductDTO] = field(default_factory=list)


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        description=product.description,
        sku=product.sku,
        price=product.price,
        formatted_price=product.formatted_price(),
        stock=product.stock,
        category_id=product.category_id,
        is_active=product.is_active,
        is_in_stock=product.is_in_stock(),
        is_low_stock=product.is_low_stock(),
        created_at=product.created_at.isoformat(),
        updated_at=product.updated_at.isoformat(),
    )
