"""Domain service: combination generation.

Builds the cartesian product of attribute-group selections, e.g.
``{"Size": ["S", "M"], "Color": ["Red"]}`` gives ``S/Red`` and ``M/Red``.
Attribute sets the product already has are skipped, so generating twice
with the same selection creates nothing the second time.
"""

from __future__ import annotations

import itertools
import logging

from catalog.domain.exceptions import CombinationConstraintError
from catalog.domain.model.combination import AttributeSet, Combination
from catalog.domain.model.value_objects import ProductId, ProductType
from catalog.domain.repository.combination_repository import CombinationRepository
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.default_combination_updater import (
    DefaultCombinationUpdater,
)

logger = logging.getLogger(__name__)


class CombinationGenerator:

    def __init__(
        self,
        product_repo: ProductRepository,
        combination_repo: CombinationRepository,
        default_updater: DefaultCombinationUpdater,
    ) -> None:
        self._product_repo = product_repo
        self._combination_repo = combination_repo
        self._default_updater = default_updater

    def generate(
        self, product_id: ProductId, groups: dict[str, list[str]]
    ) -> list[int]:
        """Create the missing combinations and return their IDs."""
        product = self._product_repo.get(product_id)
        product.require_type(ProductType.COMBINATIONS, "generate combinations")
        attribute_sets = self._expand(groups)

        existing = self._combination_repo.list_for_product(product.id)
        created: list[Combination] = []
        for attributes in attribute_sets:
            if any(c.matches(attributes) for c in existing + created):
                continue
            combination = Combination(
                id=self._combination_repo.next_id(),
                product_id=product.id,
                attributes=attributes,
            )
            self._combination_repo.save(combination)
            created.append(combination)

        logger.info(
            "Generated %d combination(s) for product #%s (%d already existed)",
            len(created), product_id, len(attribute_sets) - len(created),
        )

        if not product.cache_default_attribute:
            candidates = existing + created
            if candidates:
                self._default_updater.set_default(product_id, candidates[0].id)

        return [c.id for c in created]

    @staticmethod
    def _expand(groups: dict[str, list[str]]) -> list[AttributeSet]:
        if not groups:
            raise CombinationConstraintError(
                "At least one attribute group is required",
                CombinationConstraintError.INVALID_ATTRIBUTES,
            )

        axes: list[list[tuple[str, str]]] = []
        for group, values in groups.items():
            group = group.strip()
            cleaned = [v.strip() for v in values if v.strip()]
            if not group or not cleaned:
                raise CombinationConstraintError(
                    f"Attribute group '{group}' must have a name and at least one value",
                    CombinationConstraintError.INVALID_ATTRIBUTES,
                )
            if len({v.lower() for v in cleaned}) != len(cleaned):
                raise CombinationConstraintError(
                    f"Attribute group '{group}' lists the same value twice",
                    CombinationConstraintError.INVALID_ATTRIBUTES,
                )
            axes.append([(group, v) for v in cleaned])

        return [tuple(combo) for combo in itertools.product(*axes)]
