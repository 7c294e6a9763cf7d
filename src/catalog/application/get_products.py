"""Application service: Get Products use case (query).

Filtering, sorting and paging are the repository's job; this handler
only supplies defaults when no criteria are given.
"""

from __future__ import annotations

from catalog.application.dto import PaginatedResult
from catalog.domain.model.filters import ProductFilters
from catalog.domain.repository.product_repository import ProductRepository


class GetProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, filters: ProductFilters | None = None) -> PaginatedResult:
        return self._product_repo.find_all(filters or ProductFilters())
