"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from catalog.application.catalog_reports import CatalogReportHandler
from catalog.application.check_availability import CheckAvailabilityHandler
from catalog.application.create_product import CreateProductHandler
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.get_product_by_id import (
    GetProductByIdHandler,
    GetProductBySkuHandler,
)
from catalog.application.get_products import GetProductsHandler
from catalog.application.manage_category import BulkUpdatePricesHandler
from catalog.application.set_product_status import SetProductStatusHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.application.update_stock import UpdateStockHandler
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.config import Settings, get_settings
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

# Handlers whose only dependency is the product repository.
_REPOSITORY_HANDLERS = {
    "create_product": CreateProductHandler,
    "get_product_by_id": GetProductByIdHandler,
    "get_product_by_sku": GetProductBySkuHandler,
    "get_products": GetProductsHandler,
    "update_product": UpdateProductHandler,
    "delete_product": DeleteProductHandler,
    "update_stock": UpdateStockHandler,
    "check_availability": CheckAvailabilityHandler,
    "set_product_status": SetProductStatusHandler,
    "bulk_update_prices": BulkUpdatePricesHandler,
}


def product_repository(settings: Settings | None = None) -> ProductRepository:
    settings = settings or get_settings()
    return JsonProductRepository(settings.products_file)


def handler(name: str, settings: Settings | None = None):
    """Build the use-case handler registered under ``name``."""
    try:
        factory = _REPOSITORY_HANDLERS[name]
    except KeyError:
        raise LookupError(f"No handler registered as '{name}'") from None
    return factory(product_repository(settings))


def report_handler(settings: Settings | None = None) -> CatalogReportHandler:
    settings = settings or get_settings()
    return CatalogReportHandler(
        product_repository(settings),
        low_stock_threshold=settings.low_stock_threshold,
    )
