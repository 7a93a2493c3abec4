"""Application service: Set Virtual File use case."""

from __future__ import annotations

from catalog.domain.model.value_objects import ProductId
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.repository.virtual_file_repository import (
    VirtualProductFileRepository,
)
from catalog.domain.service.virtual_product_updater import VirtualProductUpdater


class SetVirtualFileHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        file_repo: VirtualProductFileRepository,
    ) -> None:
        self._product_repo = product_repo
        self._file_repo = file_repo

    def handle(
        self, product_id: int, filename: str, display_name: str | None = None
    ) -> None:
        svc = VirtualProductUpdater(self._product_repo, self._file_repo)
        svc.add_file(ProductId(product_id), filename, display_name)
