"""Domain service: product type transitions.

Changing a product's type invalidates the associations that only the old
type allows. They are torn down *before* the type is written, because each
collaborator only accepts operations matching the product's current type:

  - leaving PACK          -> the pack is emptied
  - leaving COMBINATIONS  -> stock is reset, then every combination deleted
  - leaving VIRTUAL       -> the downloadable file is deleted

Entering COMBINATIONS resets stock *after* the write: a fresh combination
set starts with no stock.

Stock resets always target every shop because the product type is not a
per-shop attribute.

There is no rollback. If the write fails after a teardown ran, the
associations are gone while the old type is still stored; this is logged
and the error is re-raised.
"""

from __future__ import annotations

import logging

from catalog.domain.exceptions import CannotUpdateProductError
from catalog.domain.model.value_objects import ProductId, ProductType, ShopConstraint
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.combination_deleter import CombinationDeleter
from catalog.domain.service.product_pack_updater import ProductPackUpdater
from catalog.domain.service.product_stock_updater import ProductStockUpdater
from catalog.domain.service.virtual_product_updater import VirtualProductUpdater

logger = logging.getLogger(__name__)


class ProductTypeUpdater:

    def __init__(
        self,
        product_repo: ProductRepository,
        pack_updater: ProductPackUpdater,
        combination_deleter: CombinationDeleter,
        virtual_product_updater: VirtualProductUpdater,
        stock_updater: ProductStockUpdater,
    ) -> None:
        self._product_repo = product_repo
        self._pack_updater = pack_updater
        self._combination_deleter = combination_deleter
        self._virtual_product_updater = virtual_product_updater
        self._stock_updater = stock_updater

    def update_type(self, product_id: ProductId, product_type: ProductType) -> None:
        """Switch the product to *product_type*.

        Raises ProductNotFoundError before touching anything if the product
        does not exist, and CannotUpdateProductError (FAILED_UPDATE_TYPE)
        if the store rejects the write. Collaborator errors propagate as is.
        """
        product = self._product_repo.get(product_id)
        current_type = product.product_type
        logger.info(
            "Changing type of product #%s from '%s' to '%s'",
            product_id, current_type, product_type,
        )

        # Independent checks, one per type, rather than a dispatch on the
        # current type.
        torn_down: list[str] = []
        if current_type is ProductType.PACK and product_type is not ProductType.PACK:
            self._pack_updater.set_pack_products(product_id, [])
            torn_down.append("pack content")
        if (
            current_type is ProductType.COMBINATIONS
            and product_type is not ProductType.COMBINATIONS
        ):
            # Reset needs the combination stock rows, so it runs before deletion.
            self._reset_stock(product_id)
            self._combination_deleter.delete_all_product_combinations(product_id)
            torn_down.append("combinations and their stock")
        if current_type is ProductType.VIRTUAL and product_type is not ProductType.VIRTUAL:
            self._virtual_product_updater.delete_file_for_product(product_id)
            torn_down.append("virtual file")

        reset_stock_after = (
            current_type is not ProductType.COMBINATIONS
            and product_type is ProductType.COMBINATIONS
        )

        updated_fields = product.change_type(product_type)
        try:
            self._product_repo.partial_update(
                product, updated_fields, CannotUpdateProductError.FAILED_UPDATE_TYPE
            )
        except CannotUpdateProductError:
            if torn_down:
                logger.warning(
                    "Type update of product #%s failed after removing %s; "
                    "product keeps type '%s' without them",
                    product_id, ", ".join(torn_down), current_type,
                )
            raise

        if reset_stock_after:
            self._reset_stock(product_id)

        logger.info("Product #%s is now of type '%s'", product_id, product_type)

    def _reset_stock(self, product_id: ProductId) -> None:
        self._stock_updater.reset_stock(product_id, ShopConstraint.all_shops())
