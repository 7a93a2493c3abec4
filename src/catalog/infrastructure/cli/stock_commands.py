"""CLI commands for stock management."""

from __future__ import annotations

import click

from catalog.application.set_stock import SetStockHandler
from catalog.application.show_stock import ShowStockHandler
from catalog.domain.exceptions import DomainException
from catalog.domain.model.stock import DEFAULT_SHOP_ID, PRODUCT_LEVEL
from catalog.infrastructure.bootstrap import (
    combination_repository,
    product_repository,
    stock_repository,
)
from catalog.infrastructure.cli.errors import error_message


@click.command("set")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Quantity in stock.")
@click.option("--combination", "combination_id", type=int, default=PRODUCT_LEVEL,
              help="Combination ID (omit for product-level stock).")
@click.option("--shop", "shop_id", type=int, default=DEFAULT_SHOP_ID, show_default=True)
def stock_set(product_id: int, quantity: int, combination_id: int, shop_id: int) -> None:
    """Set the stock quantity of a product or combination."""
    handler = SetStockHandler(
        product_repo=product_repository(),
        combination_repo=combination_repository(),
        stock_repo=stock_repository(),
    )

    try:
        handler.handle(product_id, quantity, combination_id=combination_id, shop_id=shop_id)
    except DomainException as exc:
        raise click.ClickException(error_message(exc))

    click.echo(f"Stock of product #{product_id} set to {quantity} in shop #{shop_id}")


@click.command("show")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
def stock_show(product_id: int) -> None:
    """Show stock rows of a product."""
    handler = ShowStockHandler(
        product_repo=product_repository(),
        combination_repo=combination_repository(),
        stock_repo=stock_repository(),
    )

    try:
        lines = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(error_message(exc))

    if not lines:
        click.echo("No stock records found.")
        return

    click.echo(f"{'Combination':<30} {'Shop':>6} {'Quantity':>10}")
    click.echo("-" * 48)
    for line in lines:
        click.echo(f"{line.combination_name:<30} {line.shop_id:>6} {line.quantity:>10}")
