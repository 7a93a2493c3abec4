"""CLI commands for product combinations."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

import click

from catalog.application.delete_combination import (
    BulkDeleteCombinationsHandler,
    DeleteCombinationHandler,
)
from catalog.application.dto import (
    COMBINATION_SORT_FIELDS,
    CombinationFilters,
    CombinationUpdate,
)
from catalog.application.generate_combinations import GenerateCombinationsHandler
from catalog.application.list_attribute_groups import (
    ListAllAttributeGroupsHandler,
    ListProductAttributeGroupsHandler,
)
from catalog.application.list_combinations import (
    GetCombinationIdsHandler,
    ListCombinationsHandler,
)
from catalog.application.update_combination import (
    BulkUpdateCombinationsHandler,
    UpdateCombinationHandler,
    UpdateCombinationsFromListingHandler,
)
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import (
    combination_repository,
    product_repository,
    stock_repository,
)
from catalog.infrastructure.cli.errors import error_message


def _parse_groups(raw_groups: tuple[str, ...]) -> dict[str, list[str]]:
    """Parse ('Size:S,M', 'Color:Red') into {group: [values]}."""
    groups: dict[str, list[str]] = {}
    for raw in raw_groups:
        if ":" not in raw:
            raise click.BadParameter(
                f"Invalid group '{raw}'. Expected 'Group:Value,Value'."
            )
        name, values = raw.split(":", 1)
        groups[name.strip()] = [v.strip() for v in values.split(",")]
    return groups


def _parse_ids(raw: str) -> list[int]:
    """Parse '3,4,7' into [3, 4, 7]."""
    try:
        return [int(part) for part in raw.split(",") if part.strip()]
    except ValueError:
        raise click.BadParameter(f"Invalid ID list '{raw}'. Expected '1,2,3'.")


def _parse_decimal(raw: str | None) -> Decimal | None:
    if raw is None:
        return None
    try:
        return Decimal(raw)
    except InvalidOperation:
        raise click.BadParameter(f"Invalid price impact '{raw}'.")


def _parse_row(raw: str) -> tuple[int, CombinationUpdate]:
    """Parse '5:quantity=10,impact=-1.5,reference=X,default=yes'."""
    if ":" not in raw:
        raise click.BadParameter(
            f"Invalid row '{raw}'. Expected 'ID:field=value,field=value'."
        )
    raw_id, raw_fields = raw.split(":", 1)
    fields: dict = {}
    for pair in raw_fields.split(","):
        if "=" not in pair:
            raise click.BadParameter(f"Invalid field '{pair}' in row '{raw}'.")
        key, value = (s.strip() for s in pair.split("=", 1))
        if key == "quantity":
            try:
                fields["quantity"] = int(value)
            except ValueError:
                raise click.BadParameter(f"Invalid quantity '{value}'.")
        elif key == "impact":
            fields["impact_on_price"] = _parse_decimal(value)
        elif key == "reference":
            fields["reference"] = value
        elif key == "default":
            fields["is_default"] = value.lower() in ("1", "yes", "true")
        else:
            raise click.BadParameter(f"Unknown field '{key}' in row '{raw}'.")
    try:
        return int(raw_id), CombinationUpdate(**fields)
    except ValueError:
        raise click.BadParameter(f"Invalid combination ID '{raw_id}'.")


def _update_options(func):
    """Options shared by the single and bulk edit commands."""
    func = click.option("--default/--no-default", "is_default", default=None,
                        help="Make (or unmake) the default combination.")(func)
    func = click.option("--quantity", type=int, default=None,
                        help="Stock quantity in the default shop.")(func)
    func = click.option("--impact", default=None, help="Price impact (e.g. -2.50).")(func)
    func = click.option("--reference", default=None, help="Combination reference.")(func)
    return func


def _filter_options(func):
    func = click.option("--attribute", "attributes", multiple=True,
                        help="Only combinations with this attribute value.")(func)
    func = click.option("--order-way", type=click.Choice(["asc", "desc"]),
                        default="asc", show_default=True)(func)
    func = click.option("--order-by", type=click.Choice(COMBINATION_SORT_FIELDS),
                        default="id", show_default=True)(func)
    return func


@click.command("generate")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.option("--group", "groups", required=True, multiple=True,
              help="Attribute group as 'Group:Value,Value' (repeatable).")
def combination_generate(product_id: int, groups: tuple[str, ...]) -> None:
    """Generate combinations from attribute groups."""
    parsed = _parse_groups(groups)
    handler = GenerateCombinationsHandler(
        product_repo=product_repository(),
        combination_repo=combination_repository(),
    )

    try:
        ids = handler.handle(product_id, parsed)
    except DomainException as exc:
        raise click.ClickException(error_message(exc))

    if not ids:
        click.echo("No new combinations: all of them already exist.")
        return
    click.echo(f"Generated {len(ids)} combination(s): {', '.join(map(str, ids))}")


@click.command("list")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.option("--limit", type=int, default=10, show_default=True)
@click.option("--offset", type=int, default=0, show_default=True)
@_filter_options
def combination_list(
    product_id: int,
    limit: int,
    offset: int,
    order_by: str,
    order_way: str,
    attributes: tuple[str, ...],
) -> None:
    """List a product's combinations."""
    handler = ListCombinationsHandler(
        product_repo=product_repository(),
        combination_repo=combination_repository(),
        stock_repo=stock_repository(),
    )
    filters = CombinationFilters(
        limit=limit,
        offset=offset,
        order_by=order_by,
        order_way=order_way,
        attribute_values=attributes,
    )

    try:
        listing = handler.handle(product_id, filters)
    except DomainException as exc:
        raise click.ClickException(error_message(exc))

    if not listing.total_count:
        click.echo("No combinations found.")
        return

    click.echo(
        f"  {'ID':<5} {'Combination':<28} {'Reference':<12} "
        f"{'Impact':>8} {'Price':>10} {'Qty':>6}"
    )
    click.echo(f"  {'-'*74}")
    for c in listing.combinations:
        marker = "*" if c.is_default else " "
        click.echo(
            f"{marker} {c.id:<5} {c.name:<28} {c.reference:<12} "
            f"{c.impact_on_price:>8} {c.final_price:>10} {c.quantity:>6}"
        )
    click.echo(f"  {'-'*74}")
    shown = len(listing.combinations)
    click.echo(f"  {shown} of {listing.total_count} shown (offset {offset})")


@click.command("ids")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@_filter_options
def combination_ids(
    product_id: int, order_by: str, order_way: str, attributes: tuple[str, ...]
) -> None:
    """Print IDs of all combinations matching the filters."""
    handler = GetCombinationIdsHandler(
        product_repo=product_repository(),
        combination_repo=combination_repository(),
        stock_repo=stock_repository(),
    )
    filters = CombinationFilters(
        order_by=order_by, order_way=order_way, attribute_values=attributes
    )

    try:
        ids = handler.handle(product_id, filters)
    except DomainException as exc:
        raise click.ClickException(error_message(exc))

    click.echo(",".join(map(str, ids)))


@click.command("attribute-groups")
@click.option("--product", "product_id", type=int, default=None,
              help="Product ID (omit for the whole catalog).")
def combination_attribute_groups(product_id: int | None) -> None:
    """Show the attribute groups used by combinations."""
    if product_id is None:
        groups = ListAllAttributeGroupsHandler(
            combination_repo=combination_repository(),
        ).handle()
    else:
        handler = ListProductAttributeGroupsHandler(
            product_repo=product_repository(),
            combination_repo=combination_repository(),
        )
        try:
            groups = handler.handle(product_id)
        except DomainException as exc:
            raise click.ClickException(error_message(exc))

    if not groups:
        click.echo("No attribute groups found.")
        return

    for group in groups:
        click.echo(f"{group.name}: {', '.join(group.values)}")


@click.command("update")
@click.option("--id", "combination_id", required=True, type=int, help="Combination ID.")
@_update_options
def combination_update(
    combination_id: int,
    reference: str | None,
    impact: str | None,
    quantity: int | None,
    is_default: bool | None,
) -> None:
    """Edit a single combination."""
    update = CombinationUpdate(
        reference=reference,
        impact_on_price=_parse_decimal(impact),
        quantity=quantity,
        is_default=is_default,
    )
    handler = UpdateCombinationHandler(
        product_repo=product_repository(),
        combination_repo=combination_repository(),
        stock_repo=stock_repository(),
    )

    try:
        handler.handle(combination_id, update)
    except DomainException as exc:
        raise click.ClickException(error_message(exc))

    click.echo(f"Combination #{combination_id} updated.")


@click.command("bulk-update")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.option("--ids", "raw_ids", required=True, help="Combination IDs as '1,2,3'.")
@_update_options
def combination_bulk_update(
    product_id: int,
    raw_ids: str,
    reference: str | None,
    impact: str | None,
    quantity: int | None,
    is_default: bool | None,
) -> None:
    """Apply the same edit to several combinations."""
    ids = _parse_ids(raw_ids)
    update = CombinationUpdate(
        reference=reference,
        impact_on_price=_parse_decimal(impact),
        quantity=quantity,
        is_default=is_default,
    )
    handler = BulkUpdateCombinationsHandler(
        product_repo=product_repository(),
        combination_repo=combination_repository(),
        stock_repo=stock_repository(),
    )

    try:
        handler.handle(product_id, ids, update)
    except DomainException as exc:
        raise click.ClickException(error_message(exc))

    click.echo(f"{len(ids)} combination(s) updated.")


@click.command("update-listing")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.option("--row", "rows", required=True, multiple=True,
              help="Row edit as 'ID:quantity=5,impact=1.5,reference=X,default=yes'.")
def combination_update_listing(product_id: int, rows: tuple[str, ...]) -> None:
    """Apply inline edits from the combination listing."""
    updates = dict(_parse_row(raw) for raw in rows)
    handler = UpdateCombinationsFromListingHandler(
        product_repo=product_repository(),
        combination_repo=combination_repository(),
        stock_repo=stock_repository(),
    )

    try:
        handler.handle(product_id, updates)
    except DomainException as exc:
        raise click.ClickException(error_message(exc))

    click.echo("Update successful.")


@click.command("delete")
@click.option("--id", "combination_id", required=True, type=int, help="Combination ID.")
def combination_delete(combination_id: int) -> None:
    """Delete a combination."""
    handler = DeleteCombinationHandler(
        product_repo=product_repository(),
        combination_repo=combination_repository(),
        stock_repo=stock_repository(),
    )

    try:
        handler.handle(combination_id)
    except DomainException as exc:
        raise click.ClickException(error_message(exc))

    click.echo("Successful deletion.")


@click.command("bulk-delete")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.option("--ids", "raw_ids", required=True, help="Combination IDs as '1,2,3'.")
def combination_bulk_delete(product_id: int, raw_ids: str) -> None:
    """Delete several combinations of a product."""
    ids = _parse_ids(raw_ids)
    handler = BulkDeleteCombinationsHandler(
        product_repo=product_repository(),
        combination_repo=combination_repository(),
        stock_repo=stock_repository(),
    )

    try:
        handler.handle(product_id, ids)
    except DomainException as exc:
        raise click.ClickException(error_message(exc))

    click.echo("Successful deletion.")
