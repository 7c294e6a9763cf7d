"""Application service: Create Product use case."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable

from catalog.application.dto import CreateProductInput, ProductDTO, product_to_dto
from catalog.domain.exceptions import DuplicateProductCodeError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return str(uuid.uuid4())


class CreateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        id_factory: Callable[[], str] = _new_id,
    ) -> None:
        self._product_repo = product_repo
        self._id_factory = id_factory

    def handle(self, data: CreateProductInput) -> ProductDTO:
        """Add a new product to the catalog.

        The SKU uniqueness check runs before the entity is built, so a
        duplicate is reported even if other fields are also invalid.
        Concurrent creates with the same SKU are only stopped by the
        store's own uniqueness constraint.
        """
        if self._product_repo.exists_by_sku(data.sku):
            logger.warning("Rejected duplicate SKU %r", data.sku)
            raise DuplicateProductCodeError(data.sku.strip().upper())

        product = Product.create(
            id=self._id_factory(),
            name=data.name,
            description=data.description,
            price=data.price,
            stock=data.stock,
            sku=data.sku,
            category_id=data.category_id,
        )
        saved = self._product_repo.create(product)
        logger.info("Created product %s (sku=%s)", saved.id, saved.sku)
        return product_to_dto(saved)
