"""Application service: Activate / Deactivate Product use case."""

from __future__ import annotations

import logging

from catalog.application.dto import ProductDTO, product_to_dto
from catalog.domain.exceptions import ProductNotFoundError
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class SetProductStatusHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, active: bool) -> ProductDTO:
        product = self._product_repo.find_by_id(product_id)
        if product is None:
            logger.warning("Status change requested for unknown product %s", product_id)
            raise ProductNotFoundError(product_id, "id")

        if product.is_active == active:
            return product_to_dto(product)

        if active:
            saved = self._product_repo.activate_product(product_id)
        else:
            saved = self._product_repo.deactivate_product(product_id)
        logger.info(
            "Product %s %s", product_id, "activated" if active else "deactivated"
        )
        return product_to_dto(saved)
