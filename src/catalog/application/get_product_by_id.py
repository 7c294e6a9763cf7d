"""Application service: Get Product By ID use case (query)."""

from __future__ import annotations

from catalog.application.dto import ProductDTO, product_to_dto
from catalog.domain.exceptions import ProductNotFoundError
from catalog.domain.repository.product_repository import ProductRepository


class GetProductByIdHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> ProductDTO:
        product = self._product_repo.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id, "id")
        return product_to_dto(product)


class GetProductBySkuHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, sku: str) -> ProductDTO:
        product = self._product_repo.find_by_sku(sku)
        if product is None:
            raise ProductNotFoundError(sku.strip().upper(), "sku")
        return product_to_dto(product)
