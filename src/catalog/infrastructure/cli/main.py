import click

from catalog.infrastructure.cli.category_commands import (
    category_count,
    category_list,
    category_reprice,
)
from catalog.infrastructure.cli.product_commands import (
    product_activate,
    product_add,
    product_check,
    product_deactivate,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from catalog.infrastructure.cli.stock_commands import (
    stock_decrement,
    stock_increment,
    stock_low,
    stock_out,
    stock_stats,
)
from catalog.infrastructure.config import Settings
from catalog.infrastructure.logging_config import configure_logging


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log at DEBUG level.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Catalog: product catalog management."""
    settings = Settings()
    configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def stock() -> None:
    """Manage stock levels."""


@cli.group()
def category() -> None:
    """Category-wide queries and pricing."""


# Register subcommands
product.add_command(product_activate)
product.add_command(product_add)
product.add_command(product_check)
product.add_command(product_deactivate)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
stock.add_command(stock_decrement)
stock.add_command(stock_increment)
stock.add_command(stock_low)
stock.add_command(stock_out)
cli.add_command(stock_stats)
category.add_command(category_count)
category.add_command(category_list)
category.add_command(category_reprice)
