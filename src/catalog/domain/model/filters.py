"""Listing criteria for the catalog: filtering, sorting and pagination."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from catalog.domain.exceptions import InvalidProductDataError
from catalog.domain.model.value_objects import to_decimal

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10


class SortField(Enum):
    NAME = "name"
    PRICE = "price"
    CREATED_AT = "createdAt"
    STOCK = "stock"


class SortOrder(Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True)
class ProductFilters:
    """Optional criteria; ``None`` means "do not filter on this field".

    ``in_stock=True`` keeps products with stock > 0, ``in_stock=False``
    keeps only products with stock == 0.
    """

    search: str | None = None
    category_id: str | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    is_active: bool | None = None
    in_stock: bool | None = None
    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE
    sort_by: SortField = SortField.CREATED_AT
    sort_order: SortOrder = SortOrder.DESC

    def __post_init__(self) -> None:
        if self.page < 1:
            raise InvalidProductDataError.for_field("page", "must be at least 1", self.page)
        if self.page_size < 1:
            raise InvalidProductDataError.for_field(
                "page_size", "must be at least 1", self.page_size
            )
        for name in ("min_price", "max_price"):
            value = getattr(self, name)
            if value is None:
                continue
            amount = to_decimal(value, name)
            if not amount.is_finite():
                raise InvalidProductDataError.for_field(name, "must be finite", value)
            if amount < 0:
                raise InvalidProductDataError.for_negative_value(name, value)
            object.__setattr__(self, name, amount)
        # Accept the wire spellings ("price", "ASC") as well as the enums.
        try:
            object.__setattr__(self, "sort_by", SortField(self.sort_by))
        except ValueError as exc:
            raise InvalidProductDataError.for_invalid_format(
                "sort_by", "name, price, createdAt or stock", self.sort_by
            ) from exc
        try:
            object.__setattr__(self, "sort_order", SortOrder(self.sort_order))
        except ValueError as exc:
            raise InvalidProductDataError.for_invalid_format(
                "sort_order", "ASC or DESC", self.sort_order
            ) from exc

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size
