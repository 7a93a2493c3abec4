"""Application service: Set Pack Products use case."""

from __future__ import annotations

from catalog.domain.model.pack import PackItem
from catalog.domain.model.value_objects import ProductId
from catalog.domain.repository.pack_repository import PackRepository
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.product_pack_updater import ProductPackUpdater


class SetPackProductsHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        pack_repo: PackRepository,
    ) -> None:
        self._product_repo = product_repo
        self._pack_repo = pack_repo

    def handle(self, pack_id: int, items: dict[int, int]) -> None:
        """Replace the pack content with ``{product_id: quantity}``."""
        svc = ProductPackUpdater(self._product_repo, self._pack_repo)
        svc.set_pack_products(
            ProductId(pack_id),
            [PackItem(product_id=pid, quantity=qty) for pid, qty in items.items()],
        )
