"""CLI commands for stock levels."""

from __future__ import annotations

import click

from catalog.application.dto import StockOperation, UpdateStockInput
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import handler, report_handler
from catalog.infrastructure.cli.errors import to_click_error
from catalog.infrastructure.cli.formatting import echo_product_table
from catalog.infrastructure.config import Settings


def _change_stock(
    settings: Settings, product_id: str, quantity: int, operation: StockOperation
) -> None:
    data = UpdateStockInput(product_id=product_id, quantity=quantity, operation=operation)

    try:
        dto = handler("update_stock", settings).handle(data)
    except DomainException as exc:
        raise to_click_error(exc)

    suffix = "  (low stock)" if dto.is_low_stock else ""
    click.echo(f"Stock for {dto.sku} is now {dto.stock}{suffix}")


@click.command("increment")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=click.IntRange(min=1), help="Units to add.")
@click.pass_obj
def stock_increment(settings: Settings, product_id: str, quantity: int) -> None:
    """Add units to a product's stock."""
    _change_stock(settings, product_id, quantity, StockOperation.INCREMENT)


@click.command("decrement")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=click.IntRange(min=1), help="Units to remove.")
@click.pass_obj
def stock_decrement(settings: Settings, product_id: str, quantity: int) -> None:
    """Remove units from a product's stock."""
    _change_stock(settings, product_id, quantity, StockOperation.DECREMENT)


@click.command("low")
@click.option(
    "--threshold",
    type=click.IntRange(min=1),
    default=None,
    help="Override the configured low-stock threshold.",
)
@click.pass_obj
def stock_low(settings: Settings, threshold: int | None) -> None:
    """List products that are running low."""
    try:
        products = report_handler(settings).low_stock(threshold)
    except DomainException as exc:
        raise to_click_error(exc)

    echo_product_table(products)


@click.command("out")
@click.pass_obj
def stock_out(settings: Settings) -> None:
    """List products with no stock left."""
    echo_product_table(report_handler(settings).out_of_stock())


@click.command("stats")
@click.pass_obj
def stock_stats(settings: Settings) -> None:
    """Show catalog-wide counts."""
    reports = report_handler(settings)
    click.echo(f"Active products:       {reports.active_count()}")
    click.echo(f"Out-of-stock products: {len(reports.out_of_stock())}")
    click.echo(f"Low-stock products:    {len(reports.low_stock())}")
