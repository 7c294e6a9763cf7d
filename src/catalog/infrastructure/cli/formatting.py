"""Shared output helpers for the CLI commands."""

from __future__ import annotations

import json
from dataclasses import asdict

import click

from catalog.application.dto import PaginatedResult, ProductDTO


def echo_json(payload) -> None:
    click.echo(json.dumps(asdict(payload), indent=2, default=str))


def echo_product(dto: ProductDTO) -> None:
    click.echo(f"Product {dto.id}  ({'active' if dto.is_active else 'inactive'})")
    click.echo(f"  Name:        {dto.name}")
    click.echo(f"  Description: {dto.description}")
    click.echo(f"  SKU:         {dto.sku}")
    click.echo(f"  Category:    {dto.category_id}")
    click.echo(f"  Price:       {dto.formatted_price}")
    stock_note = "low" if dto.is_low_stock else ("in stock" if dto.is_in_stock else "out of stock")
    click.echo(f"  Stock:       {dto.stock} ({stock_note})")
    click.echo(f"  Created:     {dto.created_at}")
    click.echo(f"  Updated:     {dto.updated_at}")


def echo_product_table(products: list[ProductDTO]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'SKU':<12} {'Name':<24} {'Category':<14} {'Price':>10} {'Stock':>6}  ID")
    click.echo("-" * 80)
    for p in products:
        flag = "" if p.is_active else " (inactive)"
        click.echo(
            f"{p.sku:<12} {p.name[:24]:<24} {p.category_id[:14]:<14} "
            f"{p.formatted_price:>10} {p.stock:>6}  {p.id}{flag}"
        )


def echo_page(result: PaginatedResult) -> None:
    echo_product_table(result.data)
    meta = result.meta
    click.echo(
        f"Page {meta.page}/{max(meta.total_pages, 1)} "
        f"({meta.total_items} product(s), {meta.page_size} per page)"
    )
