"""Application service: Check Availability use case (query)."""

from __future__ import annotations

from catalog.application.dto import ProductDTO, product_to_dto
from catalog.domain.exceptions import ProductNotFoundError
from catalog.domain.repository.product_repository import ProductRepository


class CheckAvailabilityHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, quantity: int) -> ProductDTO:
        """Return the product if ``quantity`` units can be bought right now.

        Raises ProductNotAvailableError (inactive / out of stock) or
        InsufficientStockError otherwise.
        """
        product = self._product_repo.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id, "id")

        product.ensure_can_be_purchased(quantity)
        return product_to_dto(product)
