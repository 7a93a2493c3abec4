"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from catalog.application.add_product import AddProductHandler
from catalog.application.list_products import ListProductsHandler
from catalog.application.show_product import ShowProductHandler
from catalog.application.update_product_type import UpdateProductTypeHandler
from catalog.domain.exceptions import DomainException
from catalog.domain.model.value_objects import ProductType
from catalog.infrastructure.bootstrap import (
    combination_repository,
    pack_repository,
    product_repository,
    stock_repository,
    virtual_file_repository,
)
from catalog.infrastructure.cli.errors import error_message

_TYPE_CHOICE = click.Choice([t.value for t in ProductType], case_sensitive=False)


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--type", "product_type", type=_TYPE_CHOICE, default="standard",
              show_default=True, help="Product type.")
def product_add(name: str, price: str, product_type: str) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        dto = handler.handle(name=name, price=price, product_type=product_type)
    except DomainException as exc:
        raise click.ClickException(error_message(exc))

    click.echo(f"Product #{dto.id} '{dto.name}' ({dto.product_type}) added at {dto.price}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = ListProductsHandler(product_repo=product_repository()).handle()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Type':<14} {'Price':>10}")
    click.echo("-" * 53)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.product_type:<14} {p.price:>10}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_show(product_id: int) -> None:
    """Show a product and what its type holds."""
    handler = ShowProductHandler(
        product_repo=product_repository(),
        combination_repo=combination_repository(),
        pack_repo=pack_repository(),
        file_repo=virtual_file_repository(),
    )

    try:
        details = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(error_message(exc))

    p = details.product
    click.echo(f"Product #{p.id} '{p.name}'  (type={p.product_type})")
    click.echo(f"Price:    {p.price}")
    click.echo(f"Virtual:  {'yes' if p.is_virtual else 'no'}")
    click.echo(f"Pack:     {'yes' if p.cache_is_pack else 'no'}")
    if details.combination_count:
        click.echo(
            f"Combinations: {details.combination_count} "
            f"(default #{p.default_combination_id})"
        )
    for packed_id, qty in details.pack_items:
        click.echo(f"  contains product #{packed_id} x{qty}")
    if details.virtual_file:
        click.echo(f"File:     {details.virtual_file}")
    if details.in_packs:
        click.echo(f"In packs: {', '.join(f'#{i}' for i in details.in_packs)}")


@click.command("set-type")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--type", "product_type", required=True, type=_TYPE_CHOICE, help="New type.")
def product_set_type(product_id: int, product_type: str) -> None:
    """Change a product's type.

    Associations the old type allowed (pack content, combinations and
    their stock, downloadable file) are removed.
    """
    handler = UpdateProductTypeHandler(
        product_repo=product_repository(),
        combination_repo=combination_repository(),
        stock_repo=stock_repository(),
        pack_repo=pack_repository(),
        file_repo=virtual_file_repository(),
    )

    try:
        handler.handle(product_id=product_id, product_type=product_type)
    except DomainException as exc:
        raise click.ClickException(error_message(exc))

    click.echo(f"Product #{product_id} type set to '{product_type.lower()}'")
