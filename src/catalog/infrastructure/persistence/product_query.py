"""In-memory evaluation of ProductFilters.

Shared by adapters that cannot push filtering down to a query engine
(the JSON file store, the test fakes).
"""

from __future__ import annotations

from collections.abc import Iterable

from catalog.application.dto import PaginatedResult, PaginationMeta, product_to_dto
from catalog.domain.model.filters import ProductFilters, SortField, SortOrder
from catalog.domain.model.product import Product

_SORT_KEYS = {
    SortField.NAME: lambda p: p.name.lower(),
    SortField.PRICE: lambda p: p.price,
    SortField.CREATED_AT: lambda p: p.created_at,
    SortField.STOCK: lambda p: p.stock,
}


def matches(product: Product, filters: ProductFilters) -> bool:
    if filters.search:
        needle = filters.search.lower()
        haystacks = (product.name, product.description, product.sku)
        if not any(needle in h.lower() for h in haystacks):
            return False
    if filters.category_id and product.category_id != filters.category_id:
        return False
    if filters.min_price is not None and product.price < filters.min_price:
        return False
    if filters.max_price is not None and product.price > filters.max_price:
        return False
    if filters.is_active is not None and product.is_active != filters.is_active:
        return False
    if filters.in_stock is True and product.stock <= 0:
        return False
    if filters.in_stock is False and product.stock != 0:
        return False
    return True


def sort_products(products: Iterable[Product], filters: ProductFilters) -> list[Product]:
    key = _SORT_KEYS[filters.sort_by]
    reverse = filters.sort_order is SortOrder.DESC
    # Stable two-pass sort: id first so ties come out in a fixed order.
    ordered = sorted(products, key=lambda p: p.id)
    return sorted(ordered, key=key, reverse=reverse)


def paginate(products: list[Product], filters: ProductFilters) -> PaginatedResult:
    window = products[filters.offset : filters.offset + filters.page_size]
    return PaginatedResult(
        meta=PaginationMeta.build(filters.page, filters.page_size, len(products)),
        data=[product_to_dto(p) for p in window],
    )


def query(products: Iterable[Product], filters: ProductFilters) -> PaginatedResult:
    """Filter, sort and page ``products`` according to ``filters``."""
    selected = [p for p in products if matches(p, filters)]
    return paginate(sort_products(selected, filters), filters)
