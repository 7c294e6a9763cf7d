"""Application service: Update Product use case.

Partial update: only the fields present in the input are applied, each
through the entity method that guards its invariant.
"""

from __future__ import annotations

import logging

from catalog.application.dto import ProductDTO, UpdateProductInput, product_to_dto
from catalog.domain.exceptions import ProductNotFoundError
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, data: UpdateProductInput) -> ProductDTO:
        product = self._product_repo.find_by_id(product_id)
        if product is None:
            logger.warning("Update requested for unknown product %s", product_id)
            raise ProductNotFoundError(product_id, "id")

        updated = product
        if data.name is not None:
            updated = updated.update_name(data.name)
        if data.description is not None:
            updated = updated.update_description(data.description)
        if data.price is not None:
            updated = updated.update_price(data.price)
        if data.stock is not None:
            updated = updated.update_stock(data.stock)
        if data.category_id is not None:
            updated = updated.update_category(data.category_id)
        if data.is_active is not None:
            updated = updated.activate() if data.is_active else updated.deactivate()

        saved = self._product_repo.update(product_id, updated)
        logger.info("Updated product %s", product_id)
        return product_to_dto(saved)
