"""Product aggregate.

Products are replaced, never mutated: every ``update_*`` / stock method
returns a new Product with a refreshed ``updated_at`` so a snapshot a
caller already holds stays valid.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from decimal import Decimal

from catalog.domain.exceptions import (
    InsufficientStockError,
    InvalidProductDataError,
    InvalidValueError,
    ProductNotAvailableError,
)
from catalog.domain.model.value_objects import Price, to_decimal

DEFAULT_LOW_STOCK_THRESHOLD = 10
DEFAULT_EXPENSIVE_THRESHOLD = Decimal("1000")


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    Use the ``Product.create()`` factory for new products; it enforces
    all invariants.  The plain constructor is intentionally simple so the
    repository can reconstitute persisted products without re-validating.
    """

    id: str
    name: str
    description: str
    price: Decimal
    stock: int
    sku: str
    category_id: str
    is_active: bool = True
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        id: str,
        name: str,
        description: str,
        price: str | float | int | Decimal,
        stock: int,
        sku: str,
        category_id: str,
    ) -> Product:
        """Create a new, active product, enforcing all invariants."""
        if not name or not name.strip():
            raise InvalidProductDataError.for_empty_field("name")
        amount = _valid_price(price)
        _validate_stock(stock)
        if not sku or not sku.strip():
            raise InvalidProductDataError.for_empty_field("sku")
        if not category_id or not category_id.strip():
            raise InvalidProductDataError.for_empty_field("category_id")

        now = _now()
        return Product(
            id=id,
            name=name.strip(),
            description=(description or "").strip(),
            price=amount,
            stock=stock,
            sku=sku.strip().upper(),
            category_id=category_id.strip(),
            is_active=True,
            created_at=now,
            updated_at=now,
        )

    # --- Transitions (each returns a new Product) -----------------------------

    def update_name(self, new_name: str) -> Product:
        if not new_name or not new_name.strip():
            raise InvalidProductDataError.for_empty_field("name")
        return self._replace(name=new_name.strip())

    def update_description(self, new_description: str) -> Product:
        return self._replace(description=(new_description or "").strip())

    def update_price(self, new_price: str | float | int | Decimal) -> Product:
        return self._replace(price=_valid_price(new_price))

    def update_stock(self, new_stock: int) -> Product:
        _validate_stock(new_stock)
        return self._replace(stock=new_stock)

    def increment_stock(self, amount: int) -> Product:
        _validate_quantity(amount)
        return self.update_stock(self.stock + amount)

    def decrement_stock(self, amount: int) -> Product:
        _validate_quantity(amount)
        new_stock = self.stock - amount
        if new_stock < 0:
            raise InsufficientStockError(self.id, amount, self.stock)
        return self.update_stock(new_stock)

    def update_category(self, new_category_id: str) -> Product:
        if not new_category_id or not new_category_id.strip():
            raise InvalidProductDataError.for_empty_field("category_id")
        return self._replace(category_id=new_category_id.strip())

    def activate(self) -> Product:
        if self.is_active:
            return self
        return self._replace(is_active=True)

    def deactivate(self) -> Product:
        if not self.is_active:
            return self
        return self._replace(is_active=False)

    # --- Queries --------------------------------------------------------------

    def is_in_stock(self) -> bool:
        return self.stock > 0

    def is_out_of_stock(self) -> bool:
        return self.stock == 0

    def is_low_stock(self, threshold: int = DEFAULT_LOW_STOCK_THRESHOLD) -> bool:
        return 0 < self.stock <= threshold

    def is_expensive(
        self, threshold: str | float | int | Decimal = DEFAULT_EXPENSIVE_THRESHOLD
    ) -> bool:
        return self.price > to_decimal(threshold, "threshold")

    def can_be_purchased(self, quantity: int) -> bool:
        return self.is_active and self.stock >= quantity

    def ensure_can_be_purchased(self, quantity: int) -> None:
        """Raise the specific reason ``quantity`` units cannot be sold."""
        _validate_quantity(quantity)
        if not self.is_active:
            raise ProductNotAvailableError.inactive(self.id)
        if self.is_out_of_stock():
            raise ProductNotAvailableError.out_of_stock(self.id)
        if self.stock < quantity:
            raise InsufficientStockError(self.id, quantity, self.stock)

    def formatted_price(self) -> str:
        return Price.create(self.price).formatted()

    # --- Internal helpers -----------------------------------------------------

    def _replace(self, **changes) -> Product:
        return replace(self, updated_at=_now(), **changes)


def _valid_price(price: str | float | int | Decimal) -> Decimal:
    try:
        amount = to_decimal(price, "price")
    except InvalidValueError as exc:
        raise InvalidProductDataError.for_field("price", "not a number", price) from exc
    if not amount.is_finite():
        raise InvalidProductDataError.for_field("price", "must be finite", price)
    if amount < 0:
        raise InvalidProductDataError.for_negative_value("price", price)
    return Price.create(amount).amount


def _validate_stock(stock: int) -> None:
    if isinstance(stock, bool) or not isinstance(stock, int):
        raise InvalidProductDataError.for_field("stock", "must be an integer", stock)
    if stock < 0:
        raise InvalidProductDataError.for_negative_value("stock", stock)


def _validate_quantity(quantity: int) -> None:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise InvalidProductDataError.for_field("quantity", "must be an integer", quantity)
    if quantity <= 0:
        raise InvalidProductDataError.for_field(
            "quantity", "must be positive", quantity
        )
