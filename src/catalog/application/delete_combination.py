"""Application service: combination deletion use cases."""

from __future__ import annotations

from catalog.domain.model.value_objects import CombinationId, ProductId
from catalog.domain.repository.combination_repository import CombinationRepository
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.repository.stock_repository import StockRepository
from catalog.domain.service.combination_deleter import CombinationDeleter
from catalog.domain.service.default_combination_updater import (
    DefaultCombinationUpdater,
)


class _DeleteCommand:

    def __init__(
        self,
        product_repo: ProductRepository,
        combination_repo: CombinationRepository,
        stock_repo: StockRepository,
    ) -> None:
        self._product_repo = product_repo
        self._deleter = CombinationDeleter(
            combination_repo,
            stock_repo,
            DefaultCombinationUpdater(product_repo, combination_repo),
        )


class DeleteCombinationHandler(_DeleteCommand):

    def handle(self, combination_id: int) -> None:
        self._deleter.delete_combination(CombinationId(combination_id))


class BulkDeleteCombinationsHandler(_DeleteCommand):

    def handle(self, product_id: int, combination_ids: list[int]) -> None:
        pid = ProductId(product_id)
        self._product_repo.get(pid)
        self._deleter.bulk_delete_combinations(
            pid, [CombinationId(cid) for cid in combination_ids]
        )
