"""Application service: Show Product use case (query).

Besides the product itself, gathers what its type unlocks: pack content,
combination count or the downloadable file.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from catalog.application.dto import ProductDTO
from catalog.domain.model.value_objects import ProductId
from catalog.domain.repository.combination_repository import CombinationRepository
from catalog.domain.repository.pack_repository import PackRepository
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.repository.virtual_file_repository import (
    VirtualProductFileRepository,
)


@dataclass(frozen=True)
class ProductDetailsDTO:
    product: ProductDTO
    pack_items: list[tuple[int, int]] = field(default_factory=list)  # (product_id, qty)
    combination_count: int = 0
    in_packs: list[int] = field(default_factory=list)
    virtual_file: str | None = None


class ShowProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        combination_repo: CombinationRepository,
        pack_repo: PackRepository,
        file_repo: VirtualProductFileRepository,
    ) -> None:
        self._product_repo = product_repo
        self._combination_repo = combination_repo
        self._pack_repo = pack_repo
        self._file_repo = file_repo

    def handle(self, product_id: int) -> ProductDetailsDTO:
        product = self._product_repo.get(ProductId(product_id))
        file = self._file_repo.get_by_product_id(product.id)
        return ProductDetailsDTO(
            product=ProductDTO.from_product(product),
            pack_items=[
                (item.product_id, item.quantity)
                for item in self._pack_repo.get_items(product.id)
            ],
            combination_count=len(self._combination_repo.list_for_product(product.id)),
            in_packs=self._pack_repo.list_packs_containing(product.id),
            virtual_file=file.display_name if file is not None else None,
        )
