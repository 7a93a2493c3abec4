"""Domain service: pack contents.

Only products of type PACK may bundle other products, and a pack never
contains itself or another pack. Clearing a pack is always allowed, which
is what a type change away from PACK relies on.
"""

from __future__ import annotations

import logging

from catalog.domain.exceptions import PackConstraintError
from catalog.domain.model.pack import PackItem
from catalog.domain.model.value_objects import ProductId, ProductType
from catalog.domain.repository.pack_repository import PackRepository
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductPackUpdater:

    def __init__(
        self,
        product_repo: ProductRepository,
        pack_repo: PackRepository,
    ) -> None:
        self._product_repo = product_repo
        self._pack_repo = pack_repo

    def set_pack_products(self, pack_id: ProductId, items: list[PackItem]) -> None:
        """Replace the pack content with *items* (idempotent).

        Items naming the same product are merged by summing quantities.
        """
        if not items:
            self._pack_repo.set_items(pack_id.value, [])
            logger.info("Cleared content of pack #%s", pack_id)
            return

        pack = self._product_repo.get(pack_id)
        if pack.product_type is not ProductType.PACK:
            raise PackConstraintError(
                f"Product #{pack_id} is not a pack (type '{pack.product_type}')",
                PackConstraintError.NOT_A_PACK,
            )

        merged: dict[int, int] = {}
        for item in items:
            if item.product_id == pack_id.value:
                raise PackConstraintError(
                    f"Pack #{pack_id} cannot contain itself",
                    PackConstraintError.CANNOT_ADD_ITSELF,
                )
            packed = self._product_repo.get(ProductId(item.product_id))
            if packed.product_type is ProductType.PACK:
                raise PackConstraintError(
                    f"Product #{packed.id} is a pack and cannot be added to pack #{pack_id}",
                    PackConstraintError.CANNOT_ADD_PACK_INTO_PACK,
                )
            merged[item.product_id] = merged.get(item.product_id, 0) + item.quantity

        self._pack_repo.set_items(
            pack_id.value, [PackItem(pid, qty) for pid, qty in merged.items()]
        )
        logger.info("Pack #%s now bundles %d product(s)", pack_id, len(merged))
