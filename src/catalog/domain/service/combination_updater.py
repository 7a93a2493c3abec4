"""Domain service: edits to a single combination."""

from __future__ import annotations

import logging
from decimal import Decimal

from catalog.domain.exceptions import CombinationConstraintError
from catalog.domain.model.stock import DEFAULT_SHOP_ID
from catalog.domain.model.value_objects import CombinationId, ProductId
from catalog.domain.repository.combination_repository import CombinationRepository
from catalog.domain.service.default_combination_updater import (
    DefaultCombinationUpdater,
)
from catalog.domain.service.product_stock_updater import ProductStockUpdater

logger = logging.getLogger(__name__)


class CombinationUpdater:

    def __init__(
        self,
        combination_repo: CombinationRepository,
        stock_updater: ProductStockUpdater,
        default_updater: DefaultCombinationUpdater,
    ) -> None:
        self._combination_repo = combination_repo
        self._stock_updater = stock_updater
        self._default_updater = default_updater

    def update(
        self,
        combination_id: CombinationId,
        reference: str | None = None,
        impact_on_price: Decimal | None = None,
        quantity: int | None = None,
        is_default: bool | None = None,
        shop_id: int = DEFAULT_SHOP_ID,
    ) -> None:
        """Apply every non-None field.

        Unsetting the default flag is refused: a product with combinations
        always has one default, so another combination must be made default
        instead.
        """
        combination = self._combination_repo.get(combination_id)
        if is_default is False and combination.is_default:
            raise CombinationConstraintError(
                f"Combination #{combination_id} is the default; "
                "make another combination default instead",
                CombinationConstraintError.CANNOT_UNSET_DEFAULT,
            )

        if reference is not None or impact_on_price is not None:
            if reference is not None:
                combination.update_reference(reference)
            if impact_on_price is not None:
                combination.update_impact_on_price(impact_on_price)
            self._combination_repo.save(combination)

        if quantity is not None:
            self._stock_updater.set_quantity(
                combination.product_id, combination.id, shop_id, quantity
            )

        if is_default is True and not combination.is_default:
            self._default_updater.set_default(
                ProductId(combination.product_id), combination.id
            )

        logger.info("Updated combination #%s", combination_id)
