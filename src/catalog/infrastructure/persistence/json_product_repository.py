"""JSON-file-backed implementation of ProductRepository.

Each call reads the whole file and, for writes, rewrites it. Every
method is therefore atomic on its own within a single process; sequences
of calls are not.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path

from catalog.application.dto import PaginatedResult
from catalog.domain.exceptions import DuplicateProductCodeError
from catalog.domain.model.filters import ProductFilters
from catalog.domain.model.product import DEFAULT_LOW_STOCK_THRESHOLD, Product
from catalog.domain.repository.product_repository import (
    ProductRepository,
    RecordNotFoundError,
)
from catalog.infrastructure.persistence import product_query

logger = logging.getLogger(__name__)

_CENTS = Decimal("0.01")


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- CRUD -----------------------------------------------------------------

    def create(self, product: Product) -> Product:
        products = self._load()
        if any(p.sku == product.sku for p in products.values()):
            raise DuplicateProductCodeError(product.sku)
        products[product.id] = product
        self._persist(products)
        return product

    def find_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def find_by_sku(self, sku: str) -> Product | None:
        wanted = _normalize_sku(sku)
        for product in self._load().values():
            if product.sku == wanted:
                return product
        return None

    def find_all(self, filters: ProductFilters) -> PaginatedResult:
        return product_query.query(self._load().values(), filters)

    def update(self, product_id: str, product: Product) -> Product:
        return self._mutate(
            product_id,
            "update",
            lambda current: replace(
                current,
                name=product.name,
                description=product.description,
                price=product.price,
                stock=product.stock,
                category_id=product.category_id,
                is_active=product.is_active,
                updated_at=_now(),
            ),
        )

    def delete(self, product_id: str) -> None:
        products = self._load()
        if products.pop(product_id, None) is not None:
            self._persist(products)

    # --- Uniqueness -----------------------------------------------------------

    def exists_by_sku(self, sku: str) -> bool:
        return self.find_by_sku(sku) is not None

    def exists_by_sku_excluding_id(self, sku: str, exclude_id: str) -> bool:
        wanted = _normalize_sku(sku)
        return any(
            p.sku == wanted and p.id != exclude_id for p in self._load().values()
        )

    # --- Category -------------------------------------------------------------

    def find_by_category(self, category_id: str) -> list[Product]:
        return [p for p in self._load().values() if p.category_id == category_id]

    def find_by_category_paginated(
        self, category_id: str, filters: ProductFilters
    ) -> PaginatedResult:
        return product_query.paginate(self.find_by_category(category_id), filters)

    def count_by_category(self, category_id: str) -> int:
        return len(self.find_by_category(category_id))

    def bulk_update_prices(self, category_id: str, percentage_change: Decimal) -> int:
        factor = 1 + Decimal(percentage_change) / 100
        products = self._load()
        now = _now()
        affected = 0
        for product_id, product in products.items():
            if product.category_id != category_id:
                continue
            new_price = (product.price * factor).quantize(_CENTS, rounding=ROUND_HALF_UP)
            products[product_id] = replace(product, price=new_price, updated_at=now)
            affected += 1
        if affected:
            self._persist(products)
        return affected

    # --- Stock ----------------------------------------------------------------

    def update_stock(self, product_id: str, quantity: int) -> Product:
        return self._mutate(
            product_id, "stock update", lambda p: p.update_stock(quantity)
        )

    def increment_stock(self, product_id: str, quantity: int) -> Product:
        return self._mutate(
            product_id, "increment", lambda p: p.increment_stock(quantity)
        )

    def decrement_stock(self, product_id: str, quantity: int) -> Product:
        # Entity rule doubles as the storage floor: stock never goes below 0.
        return self._mutate(
            product_id, "decrement", lambda p: p.decrement_stock(quantity)
        )

    def find_low_stock_products(
        self, threshold: int = DEFAULT_LOW_STOCK_THRESHOLD
    ) -> list[Product]:
        return [p for p in self._load().values() if p.is_low_stock(threshold)]

    def find_out_of_stock_products(self) -> list[Product]:
        return [p for p in self._load().values() if p.is_out_of_stock()]

    # --- Status ---------------------------------------------------------------

    def activate_product(self, product_id: str) -> Product:
        return self._mutate(
            product_id,
            "activation",
            lambda p: replace(p, is_active=True, updated_at=_now()),
        )

    def deactivate_product(self, product_id: str) -> Product:
        return self._mutate(
            product_id,
            "deactivation",
            lambda p: replace(p, is_active=False, updated_at=_now()),
        )

    def count_active_products(self) -> int:
        return sum(1 for p in self._load().values() if p.is_active)

    # --- Internal helpers -----------------------------------------------------

    def _mutate(
        self,
        product_id: str,
        operation: str,
        change: Callable[[Product], Product],
    ) -> Product:
        products = self._load()
        current = products.get(product_id)
        if current is None:
            raise RecordNotFoundError(product_id, operation)
        updated = change(current)
        products[product_id] = updated
        self._persist(products)
        return updated

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "description": product.description,
            "price": str(product.price),
            "stock": product.stock,
            "sku": product.sku,
            "category_id": product.category_id,
            "is_active": product.is_active,
            "created_at": product.created_at.isoformat(),
            "updated_at": product.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            description=raw.get("description", ""),
            price=Decimal(raw["price"]),
            stock=raw["stock"],
            sku=raw["sku"],
            category_id=raw["category_id"],
            is_active=raw.get("is_active", True),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict[str, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {item["id"]: self._to_domain(item) for item in raw}

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [self._to_raw(p) for p in products.values()]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )
        logger.debug("Wrote %d product(s) to %s", len(raw), self._file_path)

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")


def _normalize_sku(sku: str) -> str:
    return sku.strip().upper()


def _now() -> datetime:
    return datetime.now(timezone.utc)
