"""Application service: Set Stock use case."""

from __future__ import annotations

from catalog.domain.exceptions import CombinationConstraintError
from catalog.domain.model.stock import DEFAULT_SHOP_ID, PRODUCT_LEVEL
from catalog.domain.model.value_objects import CombinationId, ProductId
from catalog.domain.repository.combination_repository import CombinationRepository
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.repository.stock_repository import StockRepository
from catalog.domain.service.product_stock_updater import ProductStockUpdater


class SetStockHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        combination_repo: CombinationRepository,
        stock_repo: StockRepository,
    ) -> None:
        self._product_repo = product_repo
        self._combination_repo = combination_repo
        self._stock_repo = stock_repo

    def handle(
        self,
        product_id: int,
        quantity: int,
        combination_id: int = PRODUCT_LEVEL,
        shop_id: int = DEFAULT_SHOP_ID,
    ) -> None:
        """Set the quantity of a product (or one of its combinations) in a shop."""
        product = self._product_repo.get(ProductId(product_id))

        if combination_id != PRODUCT_LEVEL:
            combination = self._combination_repo.get(CombinationId(combination_id))
            if combination.product_id != product.id:
                raise CombinationConstraintError(
                    f"Combination #{combination_id} does not belong to product #{product_id}",
                    CombinationConstraintError.NOT_IN_PRODUCT,
                )

        svc = ProductStockUpdater(self._stock_repo)
        svc.set_quantity(product.id, combination_id, shop_id, quantity)
