"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from catalog.application.dto import CreateProductInput, UpdateProductInput
from catalog.domain.exceptions import DomainException
from catalog.domain.model.filters import ProductFilters, SortField, SortOrder
from catalog.infrastructure.bootstrap import handler
from catalog.infrastructure.cli.errors import to_click_error
from catalog.infrastructure.cli.formatting import echo_json, echo_page, echo_product
from catalog.infrastructure.config import Settings

_json_option = click.option("--json", "as_json", is_flag=True, help="Print as JSON.")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--description", required=True, help="Product description.")
@click.option("--price", required=True, type=click.FloatRange(min=0), help="Price (e.g. 15.00).")
@click.option("--stock", required=True, type=click.IntRange(min=0), help="Units in stock.")
@click.option("--sku", required=True, help="Unique SKU (stored upper-case).")
@click.option("--category", "category_id", required=True, help="Category ID.")
@_json_option
@click.pass_obj
def product_add(
    settings: Settings,
    name: str,
    description: str,
    price: float,
    stock: int,
    sku: str,
    category_id: str,
    as_json: bool,
) -> None:
    """Add a new product to the catalog."""
    data = CreateProductInput(
        name=name,
        description=description,
        price=price,
        stock=stock,
        sku=sku,
        category_id=category_id,
    )

    try:
        dto = handler("create_product", settings).handle(data)
    except DomainException as exc:
        raise to_click_error(exc)

    if as_json:
        echo_json(dto)
    else:
        click.echo(f"Product {dto.id} '{dto.name}' added as {dto.sku} at {dto.formatted_price}")


@click.command("show")
@click.option("--id", "product_id", default=None, help="Product ID.")
@click.option("--sku", default=None, help="Look up by SKU instead of ID.")
@_json_option
@click.pass_obj
def product_show(
    settings: Settings, product_id: str | None, sku: str | None, as_json: bool
) -> None:
    """Show one product."""
    if (product_id is None) == (sku is None):
        raise click.UsageError("Give exactly one of --id or --sku.")

    try:
        if product_id is not None:
            dto = handler("get_product_by_id", settings).handle(product_id)
        else:
            dto = handler("get_product_by_sku", settings).handle(sku)
    except DomainException as exc:
        raise to_click_error(exc)

    if as_json:
        echo_json(dto)
    else:
        echo_product(dto)


@click.command("list")
@click.option("--search", default=None, help="Substring of name, description or SKU.")
@click.option("--category", "category_id", default=None, help="Category ID.")
@click.option("--min-price", type=click.FloatRange(min=0), default=None)
@click.option("--max-price", type=click.FloatRange(min=0), default=None)
@click.option("--active/--inactive", "is_active", default=None, help="Filter by status.")
@click.option("--in-stock/--out-of-stock", "in_stock", default=None, help="Filter by stock.")
@click.option("--page", type=click.IntRange(min=1), default=1, show_default=True)
@click.option("--page-size", type=click.IntRange(min=1), default=10, show_default=True)
@click.option(
    "--sort-by",
    type=click.Choice([f.value for f in SortField]),
    default=SortField.CREATED_AT.value,
    show_default=True,
)
@click.option(
    "--sort-order",
    type=click.Choice([o.value for o in SortOrder], case_sensitive=False),
    default=SortOrder.DESC.value,
    show_default=True,
)
@_json_option
@click.pass_obj
def product_list(
    settings: Settings,
    search: str | None,
    category_id: str | None,
    min_price: float | None,
    max_price: float | None,
    is_active: bool | None,
    in_stock: bool | None,
    page: int,
    page_size: int,
    sort_by: str,
    sort_order: str,
    as_json: bool,
) -> None:
    """List products, filtered and paginated."""
    try:
        filters = ProductFilters(
            search=search,
            category_id=category_id,
            min_price=min_price,
            max_price=max_price,
            is_active=is_active,
            in_stock=in_stock,
            page=page,
            page_size=page_size,
            sort_by=sort_by,
            sort_order=sort_order.upper(),
        )
        result = handler("get_products", settings).handle(filters)
    except DomainException as exc:
        raise to_click_error(exc)

    if as_json:
        echo_json(result)
    else:
        echo_page(result)


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None)
@click.option("--description", default=None)
@click.option("--price", type=click.FloatRange(min=0), default=None)
@click.option("--stock", type=click.IntRange(min=0), default=None)
@click.option("--category", "category_id", default=None)
@click.option("--active/--inactive", "is_active", default=None)
@_json_option
@click.pass_obj
def product_update(
    settings: Settings,
    product_id: str,
    name: str | None,
    description: str | None,
    price: float | None,
    stock: int | None,
    category_id: str | None,
    is_active: bool | None,
    as_json: bool,
) -> None:
    """Update some fields of a product; omitted fields are kept."""
    data = UpdateProductInput(
        name=name,
        description=description,
        price=price,
        stock=stock,
        category_id=category_id,
        is_active=is_active,
    )

    try:
        dto = handler("update_product", settings).handle(product_id, data)
    except DomainException as exc:
        raise to_click_error(exc)

    if as_json:
        echo_json(dto)
    else:
        click.echo(f"Product {product_id} updated.")
        echo_product(dto)


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_delete(settings: Settings, product_id: str) -> None:
    """Delete a product permanently."""
    try:
        handler("delete_product", settings).handle(product_id)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Product {product_id} deleted.")


def _set_status(settings: Settings, product_id: str, active: bool) -> None:
    try:
        dto = handler("set_product_status", settings).handle(product_id, active)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Product {dto.id} is now {'active' if dto.is_active else 'inactive'}.")


@click.command("activate")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_activate(settings: Settings, product_id: str) -> None:
    """Make a product available for sale."""
    _set_status(settings, product_id, True)


@click.command("deactivate")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_deactivate(settings: Settings, product_id: str) -> None:
    """Withdraw a product from sale."""
    _set_status(settings, product_id, False)


@click.command("check")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=click.IntRange(min=1))
@click.pass_obj
def product_check(settings: Settings, product_id: str, quantity: int) -> None:
    """Check whether QUANTITY units of a product can be bought."""
    try:
        dto = handler("check_availability", settings).handle(product_id, quantity)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"{quantity} x {dto.name} available ({dto.stock} in stock).")
