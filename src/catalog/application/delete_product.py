"""Application service: Delete Product use case.

Deletion is physical; there is no soft-delete flag.
"""

from __future__ import annotations

import logging

from catalog.domain.exceptions import ProductNotFoundError
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        product = self._product_repo.find_by_id(product_id)
        if product is None:
            logger.warning("Delete requested for unknown product %s", product_id)
            raise ProductNotFoundError(product_id, "id")

        self._product_repo.delete(product_id)
        logger.info("Deleted product %s (sku=%s)", product.id, product.sku)
