"""Domain service: downloadable files of virtual products."""

from __future__ import annotations

import logging

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.value_objects import ProductId, ProductType
from catalog.domain.model.virtual_file import VirtualProductFile
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.repository.virtual_file_repository import (
    VirtualProductFileRepository,
)

logger = logging.getLogger(__name__)


class VirtualProductUpdater:

    def __init__(
        self,
        product_repo: ProductRepository,
        file_repo: VirtualProductFileRepository,
    ) -> None:
        self._product_repo = product_repo
        self._file_repo = file_repo

    def add_file(
        self, product_id: ProductId, filename: str, display_name: str | None = None
    ) -> VirtualProductFile:
        """Attach a file to a virtual product, replacing any previous one."""
        if not filename or not filename.strip():
            raise ValidationError("Virtual product filename is required")

        product = self._product_repo.get(product_id)
        product.require_type(ProductType.VIRTUAL, "attach a downloadable file")

        file = VirtualProductFile(
            product_id=product.id,
            filename=filename.strip(),
            display_name=(display_name or filename).strip(),
        )
        self._file_repo.save(file)
        logger.info("Attached file '%s' to product #%s", file.filename, product_id)
        return file

    def delete_file_for_product(self, product_id: ProductId) -> None:
        """Remove the product's file; no-op if it has none."""
        if self._file_repo.get_by_product_id(product_id.value) is None:
            return
        self._file_repo.delete(product_id.value)
        logger.info("Deleted downloadable file of product #%s", product_id)
