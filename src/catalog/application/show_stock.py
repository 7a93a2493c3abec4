"""Application service: Show Stock use case (query)."""

from __future__ import annotations

from catalog.application.dto import StockLineDTO
from catalog.domain.model.stock import PRODUCT_LEVEL
from catalog.domain.model.value_objects import ProductId
from catalog.domain.repository.combination_repository import CombinationRepository
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.repository.stock_repository import StockRepository


class ShowStockHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        combination_repo: CombinationRepository,
        stock_repo: StockRepository,
    ) -> None:
        self._product_repo = product_repo
        self._combination_repo = combination_repo
        self._stock_repo = stock_repo

    def handle(self, product_id: int) -> list[StockLineDTO]:
        product = self._product_repo.get(ProductId(product_id))
        names = {
            c.id: c.name for c in self._combination_repo.list_for_product(product.id)
        }
        rows = sorted(
            self._stock_repo.list_for_product(product.id),
            key=lambda s: (s.combination_id, s.shop_id),
        )
        return [
            StockLineDTO(
                combination_id=row.combination_id,
                combination_name=(
                    "(product)" if row.combination_id == PRODUCT_LEVEL
                    else names.get(row.combination_id, "?")
                ),
                shop_id=row.shop_id,
                quantity=row.quantity,
            )
            for row in rows
        ]
