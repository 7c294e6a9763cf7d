"""Application service: category-wide price changes."""

from __future__ import annotations

import logging
from decimal import Decimal

from catalog.domain.exceptions import InvalidProductDataError
from catalog.domain.model.value_objects import to_decimal
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class BulkUpdatePricesHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self, category_id: str, percentage_change: Decimal | float | int | str
    ) -> int:
        """Raise (or, if negative, cut) every price in a category.

        ``percentage_change`` of 10 means +10%; it must stay above -100 so
        no price can turn negative. Returns the number of products changed.
        """
        if not category_id or not category_id.strip():
            raise InvalidProductDataError.for_empty_field("category_id")

        pct = to_decimal(percentage_change, "percentage_change")
        if not pct.is_finite() or pct <= -100:
            raise InvalidProductDataError.for_field(
                "percentage_change", "must be a number greater than -100", percentage_change
            )

        affected = self._product_repo.bulk_update_prices(category_id.strip(), pct)
        logger.info(
            "Repriced %d product(s) in category %s by %s%%", affected, category_id, pct
        )
        return affected
