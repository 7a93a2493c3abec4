import logging

import click

from catalog.infrastructure.cli.combination_commands import (
    combination_attribute_groups,
    combination_bulk_delete,
    combination_bulk_update,
    combination_delete,
    combination_generate,
    combination_ids,
    combination_list,
    combination_update,
    combination_update_listing,
)
from catalog.infrastructure.cli.pack_commands import pack_set
from catalog.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_set_type,
    product_show,
)
from catalog.infrastructure.cli.stock_commands import stock_set, stock_show
from catalog.infrastructure.cli.virtual_commands import virtual_set_file


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output.")
def cli(verbose: bool) -> None:
    """Catalog: product catalog administration"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def combination() -> None:
    """Manage product combinations."""


@cli.group()
def pack() -> None:
    """Manage pack content."""


@cli.group()
def stock() -> None:
    """Manage stock."""


@cli.group()
def virtual() -> None:
    """Manage virtual product files."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_set_type)
product.add_command(product_show)
combination.add_command(combination_attribute_groups)
combination.add_command(combination_bulk_delete)
combination.add_command(combination_bulk_update)
combination.add_command(combination_delete)
combination.add_command(combination_generate)
combination.add_command(combination_ids)
combination.add_command(combination_list)
combination.add_command(combination_update)
combination.add_command(combination_update_listing)
pack.add_command(pack_set)
stock.add_command(stock_set)
stock.add_command(stock_show)
virtual.add_command(virtual_set_file)
