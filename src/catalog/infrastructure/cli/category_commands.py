"""CLI commands for category-wide operations."""

from __future__ import annotations

import click

from catalog.domain.exceptions import DomainException
from catalog.domain.model.filters import ProductFilters
from catalog.infrastructure.bootstrap import handler, report_handler
from catalog.infrastructure.cli.errors import to_click_error
from catalog.infrastructure.cli.formatting import echo_page, echo_product_table
from catalog.infrastructure.config import Settings


@click.command("count")
@click.option("--category", "category_id", required=True, help="Category ID.")
@click.pass_obj
def category_count(settings: Settings, category_id: str) -> None:
    """Count the products in a category."""
    summary = report_handler(settings).category_summary(category_id)
    click.echo(f"{summary.total_products} product(s) in '{category_id}'")


@click.command("list")
@click.option("--category", "category_id", required=True, help="Category ID.")
@click.option("--page", type=click.IntRange(min=1), default=None, help="Page to show.")
@click.option("--page-size", type=click.IntRange(min=1), default=10, show_default=True)
@click.pass_obj
def category_list(
    settings: Settings, category_id: str, page: int | None, page_size: int
) -> None:
    """List a category's products (all of them unless --page is given)."""
    reports = report_handler(settings)
    if page is None:
        echo_product_table(reports.category_products(category_id))
        return

    summary = reports.category_summary(
        category_id, ProductFilters(page=page, page_size=page_size)
    )
    echo_page(summary.page)


@click.command("reprice")
@click.option("--category", "category_id", required=True, help="Category ID.")
@click.option(
    "--percent",
    required=True,
    type=float,
    help="Percentage change, e.g. 10 for +10% or -15 for a 15% cut.",
)
@click.pass_obj
def category_reprice(settings: Settings, category_id: str, percent: float) -> None:
    """Change every price in a category by a percentage."""
    try:
        affected = handler("bulk_update_prices", settings).handle(category_id, percent)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Repriced {affected} product(s) in '{category_id}' by {percent:+g}%")
