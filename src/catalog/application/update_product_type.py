"""Application service: Update Product Type use case.

Wires the concrete collaborators into the ProductTypeUpdater domain
service; the transition rules themselves live in the domain.
"""

from __future__ import annotations

from catalog.domain.model.value_objects import ProductId, ProductType
from catalog.domain.repository.combination_repository import CombinationRepository
from catalog.domain.repository.pack_repository import PackRepository
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.repository.stock_repository import StockRepository
from catalog.domain.repository.virtual_file_repository import (
    VirtualProductFileRepository,
)
from catalog.domain.service.combination_deleter import CombinationDeleter
from catalog.domain.service.default_combination_updater import (
    DefaultCombinationUpdater,
)
from catalog.domain.service.product_pack_updater import ProductPackUpdater
from catalog.domain.service.product_stock_updater import ProductStockUpdater
from catalog.domain.service.product_type_updater import ProductTypeUpdater
from catalog.domain.service.virtual_product_updater import VirtualProductUpdater


class UpdateProductTypeHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        combination_repo: CombinationRepository,
        stock_repo: StockRepository,
        pack_repo: PackRepository,
        file_repo: VirtualProductFileRepository,
    ) -> None:
        self._updater = ProductTypeUpdater(
            product_repo=product_repo,
            pack_updater=ProductPackUpdater(product_repo, pack_repo),
            combination_deleter=CombinationDeleter(
                combination_repo,
                stock_repo,
                DefaultCombinationUpdater(product_repo, combination_repo),
            ),
            virtual_product_updater=VirtualProductUpdater(product_repo, file_repo),
            stock_updater=ProductStockUpdater(stock_repo),
        )

    def handle(self, product_id: int, product_type: str) -> None:
        # Parse both inputs before any collaborator runs
        self._updater.update_type(ProductId(product_id), ProductType.of(product_type))
