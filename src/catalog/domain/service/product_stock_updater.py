"""Domain service: product stock updates.

Every quantity change is journaled as a StockMovement so the stock history
can explain the current quantity. Resets therefore need the rows to still
exist when they run: resetting after a combination was deleted would lose
that combination's movement.
"""

from __future__ import annotations

import logging

from catalog.domain.exceptions import StockConstraintError
from catalog.domain.model.stock import StockAvailable, StockMovement
from catalog.domain.model.value_objects import ProductId, ShopConstraint
from catalog.domain.repository.stock_repository import StockRepository

logger = logging.getLogger(__name__)

REASON_RESET = "reset"
REASON_MANUAL = "manual"


class ProductStockUpdater:

    def __init__(self, stock_repo: StockRepository) -> None:
        self._stock_repo = stock_repo

    def reset_stock(self, product_id: ProductId, shop_constraint: ShopConstraint) -> None:
        """Zero every stock row of the product within *shop_constraint*.

        Combination-level rows are included. Rows already at zero are left
        untouched and produce no movement.
        """
        reset_rows = 0
        for stock in self._stock_repo.list_for_product(product_id.value):
            if not shop_constraint.applies_to(stock.shop_id) or stock.quantity == 0:
                continue
            logger.debug(
                "Resetting stock of product #%s combination #%s in shop #%s (was %s)",
                stock.product_id, stock.combination_id, stock.shop_id, stock.quantity,
            )
            self._apply(stock, 0, REASON_RESET)
            reset_rows += 1
        logger.info(
            "Stock reset for product #%s (%s): %d row(s) zeroed",
            product_id, shop_constraint, reset_rows,
        )

    def set_quantity(
        self,
        product_id: int,
        combination_id: int,
        shop_id: int,
        quantity: int,
        reason: str = REASON_MANUAL,
    ) -> StockAvailable:
        """Set an absolute quantity, creating the stock row if needed."""
        if not isinstance(quantity, int) or isinstance(quantity, bool):
            raise StockConstraintError(
                f"Stock quantity must be an integer, got {quantity!r}",
                StockConstraintError.INVALID_QUANTITY,
            )
        ShopConstraint.shop(shop_id)  # validates the shop ID

        stock = self._stock_repo.get(product_id, combination_id, shop_id)
        if stock is None:
            stock = StockAvailable(product_id, combination_id, shop_id, 0)
        self._apply(stock, quantity, reason)
        return stock

    def _apply(self, stock: StockAvailable, quantity: int, reason: str) -> None:
        delta = quantity - stock.quantity
        stock.quantity = quantity
        self._stock_repo.save(stock)
        if delta:
            self._stock_repo.add_movement(
                StockMovement(
                    product_id=stock.product_id,
                    combination_id=stock.combination_id,
                    shop_id=stock.shop_id,
                    delta=delta,
                    reason=reason,
                )
            )
