"""Application service: read-only catalog reports (stock and categories)."""

from __future__ import annotations

from dataclasses import dataclass

from catalog.application.dto import PaginatedResult, ProductDTO, product_to_dto
from catalog.domain.exceptions import InvalidProductDataError
from catalog.domain.model.filters import ProductFilters
from catalog.domain.model.product import DEFAULT_LOW_STOCK_THRESHOLD
from catalog.domain.repository.product_repository import ProductRepository


@dataclass(frozen=True)
class CategorySummaryDTO:
    category_id: str
    total_products: int
    page: PaginatedResult


class CatalogReportHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> None:
        self._product_repo = product_repo
        self._low_stock_threshold = low_stock_threshold

    def low_stock(self, threshold: int | None = None) -> list[ProductDTO]:
        limit = self._low_stock_threshold if threshold is None else threshold
        if limit < 1:
            raise InvalidProductDataError.for_field("threshold", "must be at least 1", limit)
        products = self._product_repo.find_low_stock_products(limit)
        return [product_to_dto(p) for p in products]

    def out_of_stock(self) -> list[ProductDTO]:
        return [product_to_dto(p) for p in self._product_repo.find_out_of_stock_products()]

    def category_summary(
        self, category_id: str, filters: ProductFilters | None = None
    ) -> CategorySummaryDTO:
        return CategorySummaryDTO(
            category_id=category_id,
            total_products=self._product_repo.count_by_category(category_id),
            page=self._product_repo.find_by_category_paginated(
                category_id, filters or ProductFilters()
            ),
        )

    def category_products(self, category_id: str) -> list[ProductDTO]:
        return [product_to_dto(p) for p in self._product_repo.find_by_category(category_id)]

    def active_count(self) -> int:
        return self._product_repo.count_active_products()
