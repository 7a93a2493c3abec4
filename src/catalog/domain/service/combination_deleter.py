"""Domain service: combination deletion.

A combination's stock rows go with it. When the default combination is
deleted another one is promoted so the product keeps a valid default.
"""

from __future__ import annotations

import logging

from catalog.domain.exceptions import (
    CombinationConstraintError,
    CombinationError,
    DomainException,
)
from catalog.domain.model.value_objects import CombinationId, ProductId
from catalog.domain.repository.combination_repository import CombinationRepository
from catalog.domain.repository.stock_repository import StockRepository
from catalog.domain.service.default_combination_updater import (
    DefaultCombinationUpdater,
)

logger = logging.getLogger(__name__)


class CombinationDeleter:

    def __init__(
        self,
        combination_repo: CombinationRepository,
        stock_repo: StockRepository,
        default_updater: DefaultCombinationUpdater,
    ) -> None:
        self._combination_repo = combination_repo
        self._stock_repo = stock_repo
        self._default_updater = default_updater

    def delete_all_product_combinations(self, product_id: ProductId) -> None:
        """Remove every combination of the product (idempotent).

        The product record itself is not written: callers removing all
        combinations are changing the product anyway and zero
        ``cache_default_attribute`` in their own update.
        """
        combinations = self._combination_repo.list_for_product(product_id.value)
        for combination in combinations:
            self._remove(combination.id)
        logger.info(
            "Deleted %d combination(s) of product #%s", len(combinations), product_id
        )

    def delete_combination(self, combination_id: CombinationId) -> None:
        combination = self._combination_repo.get(combination_id)
        self._remove(combination.id)
        logger.info(
            "Deleted combination #%s of product #%s",
            combination_id, combination.product_id,
        )

        if combination.is_default:
            remaining = self._combination_repo.list_for_product(combination.product_id)
            new_default = remaining[0].id if remaining else 0
            self._default_updater.set_default(
                ProductId(combination.product_id), new_default
            )

    def bulk_delete_combinations(
        self, product_id: ProductId, combination_ids: list[CombinationId]
    ) -> None:
        """Delete several combinations of one product.

        Ownership of every ID is checked before anything is deleted; a
        failure during deletion is reported with the offending ID.
        """
        for combination_id in combination_ids:
            combination = self._combination_repo.get(combination_id)
            if combination.product_id != product_id.value:
                raise CombinationConstraintError(
                    f"Combination #{combination_id} does not belong to product #{product_id}",
                    CombinationConstraintError.NOT_IN_PRODUCT,
                )

        for combination_id in combination_ids:
            try:
                self.delete_combination(combination_id)
            except DomainException as exc:
                raise CombinationError(
                    f"Failed to delete combination #{combination_id}: {exc}",
                    combination_id.value,
                ) from exc

    def _remove(self, combination_id: int) -> None:
        self._stock_repo.delete_for_combination(combination_id)
        self._combination_repo.delete(combination_id)
