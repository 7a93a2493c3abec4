"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import logging
from decimal import Decimal
from pathlib import Path

from catalog.domain.exceptions import CannotUpdateProductError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money, ProductType
from catalog.domain.repository.product_repository import (
    UPDATABLE_FIELDS,
    ProductRepository,
)
from catalog.infrastructure.persistence.json_file import JsonFile

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, [])

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        for raw in self._file.read():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._file.read()]

    def next_id(self) -> int:
        records = self._file.read()
        if not records:
            return 1
        return max(r["id"] for r in records) + 1

    def save(self, product: Product) -> None:
        records = self._file.read()
        for i, raw in enumerate(records):
            if raw["id"] == product.id:
                records[i] = self._to_raw(product)
                break
        else:
            records.append(self._to_raw(product))
        self._file.write(records)

    def partial_update(
        self, product: Product, field_names: list[str], error_code: int
    ) -> None:
        unknown = set(field_names) - UPDATABLE_FIELDS
        if unknown:
            raise CannotUpdateProductError(
                f"Cannot update product #{product.id}: unknown field(s) "
                f"{', '.join(sorted(unknown))}",
                error_code,
            )

        records = self._file.read()
        for raw in records:
            if raw["id"] == product.id:
                break
        else:
            raise CannotUpdateProductError(
                f"Cannot update product #{product.id}: record no longer exists",
                error_code,
            )

        if raw.get("version", 0) != product.version:
            raise CannotUpdateProductError(
                f"Cannot update product #{product.id}: it was modified concurrently "
                f"(version {raw.get('version', 0)}, expected {product.version})",
                error_code,
            )

        fresh = self._to_raw(product)
        for name in field_names:
            raw[name] = fresh[name]
            if name == "price":
                raw["currency"] = fresh["currency"]
        raw["version"] = product.version + 1
        self._file.write(records)
        product.version += 1
        logger.debug("Product #%s partially updated: %s", product.id, field_names)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "product_type": product.product_type.value,
            "is_virtual": product.is_virtual,
            "cache_is_pack": product.cache_is_pack,
            "cache_default_attribute": product.cache_default_attribute,
            "version": product.version,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            product_type=ProductType(raw.get("product_type", "standard")),
            is_virtual=raw.get("is_virtual", False),
            cache_is_pack=raw.get("cache_is_pack", False),
            cache_default_attribute=raw.get("cache_default_attribute", 0),
            version=raw.get("version", 0),
        )
