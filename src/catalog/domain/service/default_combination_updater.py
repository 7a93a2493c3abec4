"""Domain service: keeps the default-combination flag consistent.

The default is stored twice, as ``is_default`` on the combinations and as
``cache_default_attribute`` on the product; both are rewritten together.
"""

from __future__ import annotations

import logging

from catalog.domain.exceptions import CannotUpdateProductError
from catalog.domain.model.value_objects import ProductId
from catalog.domain.repository.combination_repository import CombinationRepository
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DefaultCombinationUpdater:

    def __init__(
        self,
        product_repo: ProductRepository,
        combination_repo: CombinationRepository,
    ) -> None:
        self._product_repo = product_repo
        self._combination_repo = combination_repo

    def set_default(self, product_id: ProductId, combination_id: int) -> None:
        """Make *combination_id* the default (0 clears the default)."""
        product = self._product_repo.get(product_id)
        product.set_default_combination(combination_id)

        for combination in self._combination_repo.list_for_product(product_id.value):
            is_default = combination.id == combination_id
            if combination.is_default != is_default:
                combination.is_default = is_default
                self._combination_repo.save(combination)

        self._product_repo.partial_update(
            product,
            ["cache_default_attribute"],
            CannotUpdateProductError.FAILED_UPDATE_DEFAULT_COMBINATION,
        )
        logger.info(
            "Default combination of product #%s set to #%s", product_id, combination_id
        )
