"""Application service: Update Stock use case.

The new level is computed on the entity (so a decrement below zero
fails with InsufficientStockError before anything is written) and then
stored as an absolute value. The read and the write are separate
repository calls; concurrent decrements are not serialised here.
"""

from __future__ import annotations

import logging

from catalog.application.dto import (
    ProductDTO,
    StockOperation,
    UpdateStockInput,
    product_to_dto,
)
from catalog.domain.exceptions import InvalidProductDataError, ProductNotFoundError
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, data: UpdateStockInput) -> ProductDTO:
        product = self._product_repo.find_by_id(data.product_id)
        if product is None:
            logger.warning("Stock change requested for unknown product %s", data.product_id)
            raise ProductNotFoundError(data.product_id, "id")

        quantity = data.quantity
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise InvalidProductDataError.for_field("quantity", "must be an integer", quantity)
        if quantity <= 0:
            raise InvalidProductDataError.for_field("quantity", "must be positive", quantity)

        if data.operation is StockOperation.INCREMENT:
            updated = product.increment_stock(quantity)
        else:
            updated = product.decrement_stock(quantity)

        saved = self._product_repo.update_stock(data.product_id, updated.stock)
        logger.info(
            "Stock for product %s: %s %d -> %d",
            data.product_id,
            data.operation.value,
            product.stock,
            saved.stock,
        )
        return product_to_dto(saved)
