"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.

Contract for every adapter:

- ``find_by_id`` / ``find_by_sku`` return None when absent, never raise.
- SKU arguments are matched case-insensitively (stored upper-case).
- Mutations return the updated Product, or raise ``RecordNotFoundError``
  if the target vanished between the caller's check and the write.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import TYPE_CHECKING

from catalog.domain.model.filters import ProductFilters
from catalog.domain.model.product import DEFAULT_LOW_STOCK_THRESHOLD, Product

if TYPE_CHECKING:
    from catalog.application.dto import PaginatedResult


class RecordNotFoundError(RuntimeError):
    """A row disappeared mid-operation; an integrity fault, not a domain error."""

    def __init__(self, product_id: str, operation: str) -> None:
        super().__init__(f"Product with id {product_id} not found after {operation}")
        self.product_id = product_id
        self.operation = operation


class ProductRepository(ABC):

    # --- CRUD -----------------------------------------------------------------

    @abstractmethod
    def create(self, product: Product) -> Product:
        """Persist a new product and return it as stored."""

    @abstractmethod
    def find_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def find_by_sku(self, sku: str) -> Product | None:
        """Return a product by its SKU, or None if not found."""

    @abstractmethod
    def find_all(self, filters: ProductFilters) -> PaginatedResult:
        """Return one filtered, sorted page of products."""

    @abstractmethod
    def update(self, product_id: str, product: Product) -> Product:
        """Overwrite the mutable fields of an existing product."""

    @abstractmethod
    def delete(self, product_id: str) -> None:
        """Physically remove a product. Deleting a missing ID is a no-op."""

    # --- Uniqueness -----------------------------------------------------------

    @abstractmethod
    def exists_by_sku(self, sku: str) -> bool:
        """True if any product uses this SKU."""

    @abstractmethod
    def exists_by_sku_excluding_id(self, sku: str, exclude_id: str) -> bool:
        """True if a product other than ``exclude_id`` uses this SKU."""

    # --- Category -------------------------------------------------------------

    @abstractmethod
    def find_by_category(self, category_id: str) -> list[Product]:
        """Return every product in a category."""

    @abstractmethod
    def find_by_category_paginated(
        self, category_id: str, filters: ProductFilters
    ) -> PaginatedResult:
        """Return one page of a category, honouring only page / page_size."""

    @abstractmethod
    def count_by_category(self, category_id: str) -> int:
        """Number of products in a category."""

    @abstractmethod
    def bulk_update_prices(self, category_id: str, percentage_change: Decimal) -> int:
        """Scale every price in a category by ``1 + pct/100``; return the count."""

    # --- Stock ----------------------------------------------------------------

    @abstractmethod
    def update_stock(self, product_id: str, quantity: int) -> Product:
        """Set the absolute stock level."""

    @abstractmethod
    def increment_stock(self, product_id: str, quantity: int) -> Product:
        """Add ``quantity`` units to the stored stock."""

    @abstractmethod
    def decrement_stock(self, product_id: str, quantity: int) -> Product:
        """Remove ``quantity`` units from the stored stock."""

    @abstractmethod
    def find_low_stock_products(
        self, threshold: int = DEFAULT_LOW_STOCK_THRESHOLD
    ) -> list[Product]:
        """Products with ``0 < stock <= threshold``."""

    @abstractmethod
    def find_out_of_stock_products(self) -> list[Product]:
        """Products with zero stock."""

    # --- Status ---------------------------------------------------------------

    @abstractmethod
    def activate_product(self, product_id: str) -> Product:
        """Mark a product active."""

    @abstractmethod
    def deactivate_product(self, product_id: str) -> Product:
        """Mark a product inactive."""

    @abstractmethod
    def count_active_products(self) -> int:
        """Number of active products."""
