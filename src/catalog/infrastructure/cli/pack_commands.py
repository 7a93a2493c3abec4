"""CLI commands for pack content."""

from __future__ import annotations

import click

from catalog.application.set_pack_products import SetPackProductsHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import pack_repository, product_repository
from catalog.infrastructure.cli.errors import error_message


def _parse_items(raw: tuple[str, ...]) -> dict[int, int]:
    """Parse ('3:2', '5') into {3: 2, 5: 1}."""
    items: dict[int, int] = {}
    for entry in raw:
        product_id, _, qty = entry.partition(":")
        try:
            items[int(product_id)] = items.get(int(product_id), 0) + int(qty or 1)
        except ValueError:
            raise click.BadParameter(
                f"Invalid item '{entry}'. Expected 'ProductId[:Quantity]'."
            )
    return items


@click.command("set")
@click.option("--id", "pack_id", required=True, type=int, help="Pack product ID.")
@click.option("--item", "items", multiple=True,
              help="Bundled product as 'ProductId[:Quantity]' (repeatable). "
                   "Omit to empty the pack.")
def pack_set(pack_id: int, items: tuple[str, ...]) -> None:
    """Replace the content of a pack."""
    handler = SetPackProductsHandler(
        product_repo=product_repository(),
        pack_repo=pack_repository(),
    )

    try:
        handler.handle(pack_id, _parse_items(items))
    except DomainException as exc:
        raise click.ClickException(error_message(exc))

    if items:
        click.echo(f"Pack #{pack_id} content updated.")
    else:
        click.echo(f"Pack #{pack_id} emptied.")
