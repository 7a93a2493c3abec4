"""Application service: Generate Combinations use case."""

from __future__ import annotations

from catalog.domain.model.value_objects import ProductId
from catalog.domain.repository.combination_repository import CombinationRepository
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.combination_generator import CombinationGenerator
from catalog.domain.service.default_combination_updater import (
    DefaultCombinationUpdater,
)


class GenerateCombinationsHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        combination_repo: CombinationRepository,
    ) -> None:
        self._product_repo = product_repo
        self._combination_repo = combination_repo

    def handle(self, product_id: int, groups: dict[str, list[str]]) -> list[int]:
        """Generate combinations from ``{group: [values]}``; returns new IDs."""
        svc = CombinationGenerator(
            self._product_repo,
            self._combination_repo,
            DefaultCombinationUpdater(self._product_repo, self._combination_repo),
        )
        return svc.generate(ProductId(product_id), groups)
