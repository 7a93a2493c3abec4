"""Application service: attribute group queries.

Groups are derived from the combinations that use them, either those of one
product or those of the whole catalog.
"""

from __future__ import annotations

from catalog.application.dto import AttributeGroupDTO
from catalog.domain.model.combination import Combination
from catalog.domain.model.value_objects import ProductId
from catalog.domain.repository.combination_repository import CombinationRepository
from catalog.domain.repository.product_repository import ProductRepository


def _group_attributes(combinations: list[Combination]) -> list[AttributeGroupDTO]:
    """Groups and their distinct values, both in first-seen order."""
    groups: dict[str, list[str]] = {}
    for combination in combinations:
        for group, value in combination.attributes:
            values = groups.setdefault(group, [])
            if value not in values:
                values.append(value)

    return [AttributeGroupDTO(name=name, values=values) for name, values in groups.items()]


class ListProductAttributeGroupsHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        combination_repo: CombinationRepository,
    ) -> None:
        self._product_repo = product_repo
        self._combination_repo = combination_repo

    def handle(self, product_id: int) -> list[AttributeGroupDTO]:
        product = self._product_repo.get(ProductId(product_id))
        return _group_attributes(self._combination_repo.list_for_product(product.id))


class ListAllAttributeGroupsHandler:

    def __init__(self, combination_repo: CombinationRepository) -> None:
        self._combination_repo = combination_repo

    def handle(self) -> list[AttributeGroupDTO]:
        """Every group used by any combination of the catalog."""
        return _group_attributes(self._combination_repo.list_all())
