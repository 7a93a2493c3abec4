"""CLI commands for virtual products."""

from __future__ import annotations

import click

from catalog.application.set_virtual_file import SetVirtualFileHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import product_repository, virtual_file_repository
from catalog.infrastructure.cli.errors import error_message


@click.command("set-file")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.option("--filename", required=True, help="Stored file name.")
@click.option("--display-name", default=None, help="Name shown to customers.")
def virtual_set_file(product_id: int, filename: str, display_name: str | None) -> None:
    """Attach the downloadable file of a virtual product."""
    handler = SetVirtualFileHandler(
        product_repo=product_repository(),
        file_repo=virtual_file_repository(),
    )

    try:
        handler.handle(product_id, filename, display_name)
    except DomainException as exc:
        raise click.ClickException(error_message(exc))

    click.echo(f"File '{filename}' attached to product #{product_id}")
