"""Application service: combination listing queries.

Both the paginated list and the ID lookup share the same filtering and
sorting, so a "select all matching" action in the listing acts on
exactly the rows the user is filtering.
"""

from __future__ import annotations

from catalog.application.dto import (
    COMBINATION_SORT_FIELDS,
    CombinationFilters,
    CombinationForListingDTO,
    CombinationListDTO,
)
from catalog.domain.exceptions import ValidationError
from catalog.domain.model.combination import Combination
from catalog.domain.model.value_objects import ProductId
from catalog.domain.repository.combination_repository import CombinationRepository
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.repository.stock_repository import StockRepository


class _CombinationQuery:

    def __init__(
        self,
        product_repo: ProductRepository,
        combination_repo: CombinationRepository,
        stock_repo: StockRepository,
    ) -> None:
        self._product_repo = product_repo
        self._combination_repo = combination_repo
        self._stock_repo = stock_repo

    def _quantities(self, product_id: int) -> dict[int, int]:
        """Sum of stock over all shops, per combination."""
        totals: dict[int, int] = {}
        for row in self._stock_repo.list_for_product(product_id):
            totals[row.combination_id] = totals.get(row.combination_id, 0) + row.quantity
        return totals

    def _select(
        self, product_id: int, filters: CombinationFilters, quantities: dict[int, int]
    ) -> list[Combination]:
        if filters.order_by not in COMBINATION_SORT_FIELDS:
            raise ValidationError(
                f"Cannot sort combinations by '{filters.order_by}' "
                f"(expected one of: {', '.join(COMBINATION_SORT_FIELDS)})"
            )
        if filters.order_way not in ("asc", "desc"):
            raise ValidationError(
                f"Sort direction must be 'asc' or 'desc', got '{filters.order_way}'"
            )

        combinations = [
            c
            for c in self._combination_repo.list_for_product(product_id)
            if all(c.has_attribute_value(v) for v in filters.attribute_values)
        ]

        def sort_key(c: Combination):
            if filters.order_by == "quantity":
                return quantities.get(c.id, 0)
            return getattr(c, filters.order_by)

        return sorted(combinations, key=sort_key, reverse=filters.order_way == "desc")


class ListCombinationsHandler(_CombinationQuery):

    def handle(
        self, product_id: int, filters: CombinationFilters | None = None
    ) -> CombinationListDTO:
        filters = filters or CombinationFilters()
        if filters.limit < 1 or filters.offset < 0:
            raise ValidationError("Limit must be positive and offset non-negative")

        product = self._product_repo.get(ProductId(product_id))
        quantities = self._quantities(product.id)
        selected = self._select(product.id, filters, quantities)
        page = selected[filters.offset:filters.offset + filters.limit]

        return CombinationListDTO(
            total_count=len(selected),
            combinations=[
                CombinationForListingDTO(
                    id=c.id,
                    name=c.name,
                    reference=c.reference,
                    impact_on_price=f"{c.impact_on_price:+.2f}",
                    final_price=str(product.price.with_impact(c.impact_on_price)),
                    quantity=quantities.get(c.id, 0),
                    is_default=c.is_default,
                )
                for c in page
            ],
        )


class GetCombinationIdsHandler(_CombinationQuery):

    def handle(
        self, product_id: int, filters: CombinationFilters | None = None
    ) -> list[int]:
        """IDs of every combination matching *filters*; pagination is ignored."""
        filters = filters or CombinationFilters()
        product = self._product_repo.get(ProductId(product_id))
        quantities = self._quantities(product.id)
        return [c.id for c in self._select(product.id, filters, quantities)]
