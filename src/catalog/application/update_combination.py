"""Application service: combination edit use cases.

Three entry points share the same per-combination update:
  - a single combination edit form
  - a bulk edit applying one update to many combinations
  - inline edits from the combination listing (one update per row)
"""

from __future__ import annotations

from catalog.application.dto import CombinationUpdate
from catalog.domain.exceptions import (
    CombinationConstraintError,
    CombinationError,
    DomainException,
    ValidationError,
)
from catalog.domain.model.value_objects import CombinationId, ProductId
from catalog.domain.repository.combination_repository import CombinationRepository
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.repository.stock_repository import StockRepository
from catalog.domain.service.combination_updater import CombinationUpdater
from catalog.domain.service.default_combination_updater import (
    DefaultCombinationUpdater,
)
from catalog.domain.service.product_stock_updater import ProductStockUpdater


class _CombinationCommand:

    def __init__(
        self,
        product_repo: ProductRepository,
        combination_repo: CombinationRepository,
        stock_repo: StockRepository,
    ) -> None:
        self._product_repo = product_repo
        self._combination_repo = combination_repo
        self._svc = CombinationUpdater(
            combination_repo,
            ProductStockUpdater(stock_repo),
            DefaultCombinationUpdater(product_repo, combination_repo),
        )

    def _apply(self, combination_id: CombinationId, update: CombinationUpdate) -> None:
        self._svc.update(
            combination_id,
            reference=update.reference,
            impact_on_price=update.impact_on_price,
            quantity=update.quantity,
            is_default=update.is_default,
        )

    def _check_ownership(
        self, product_id: ProductId, combination_ids: list[CombinationId]
    ) -> None:
        self._product_repo.get(product_id)
        for combination_id in combination_ids:
            combination = self._combination_repo.get(combination_id)
            if combination.product_id != product_id.value:
                raise CombinationConstraintError(
                    f"Combination #{combination_id} does not belong to product #{product_id}",
                    CombinationConstraintError.NOT_IN_PRODUCT,
                )


class UpdateCombinationHandler(_CombinationCommand):

    def handle(self, combination_id: int, update: CombinationUpdate) -> None:
        if update.is_empty:
            raise ValidationError("Nothing to update")
        self._apply(CombinationId(combination_id), update)


class BulkUpdateCombinationsHandler(_CombinationCommand):

    def handle(
        self, product_id: int, combination_ids: list[int], update: CombinationUpdate
    ) -> None:
        """Apply *update* to each combination, stopping at the first failure.

        Making several combinations default at once is meaningless and
        rejected up front.
        """
        if update.is_empty:
            raise ValidationError("Nothing to update")
        if update.is_default and len(combination_ids) > 1:
            raise CombinationConstraintError(
                "Only one combination can be the default",
                CombinationConstraintError.DUPLICATE_DEFAULT,
            )

        ids = [CombinationId(cid) for cid in combination_ids]
        self._check_ownership(ProductId(product_id), ids)
        for combination_id in ids:
            try:
                self._apply(combination_id, update)
            except DomainException as exc:
                raise CombinationError(
                    f"Failed to update combination #{combination_id}: {exc}",
                    combination_id.value,
                ) from exc


class UpdateCombinationsFromListingHandler(_CombinationCommand):

    def handle(self, product_id: int, updates: dict[int, CombinationUpdate]) -> None:
        defaults = [cid for cid, update in updates.items() if update.is_default]
        if len(defaults) > 1:
            raise CombinationConstraintError(
                "Only one combination can be the default",
                CombinationConstraintError.DUPLICATE_DEFAULT,
            )

        self._check_ownership(
            ProductId(product_id), [CombinationId(cid) for cid in updates]
        )
        # The new default goes first so the row unticking the old one is no
        # longer an attempt to unset the current default.
        rows = sorted(updates.items(), key=lambda row: not row[1].is_default)
        for combination_id, update in rows:
            if not update.is_empty:
                self._apply(CombinationId(combination_id), update)
