"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

The data directory defaults to ``<repo>/data`` and can be moved with the
``CATALOG_DATA_DIR`` environment variable.
"""

from __future__ import annotations

import os
from pathlib import Path

from catalog.infrastructure.persistence.json_combination_repository import (
    JsonCombinationRepository,
)
from catalog.infrastructure.persistence.json_pack_repository import (
    JsonPackRepository,
)
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from catalog.infrastructure.persistence.json_stock_repository import (
    JsonStockRepository,
)
from catalog.infrastructure.persistence.json_virtual_file_repository import (
    JsonVirtualProductFileRepository,
)

DATA_DIR_ENV = "CATALOG_DATA_DIR"

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override) if override else _DEFAULT_DATA_DIR


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(data_dir() / "products.json")


def combination_repository() -> JsonCombinationRepository:
    return JsonCombinationRepository(data_dir() / "combinations.json")


def stock_repository() -> JsonStockRepository:
    return JsonStockRepository(data_dir() / "stock.json")


def pack_repository() -> JsonPackRepository:
    return JsonPackRepository(data_dir() / "packs.json")


def virtual_file_repository() -> JsonVirtualProductFileRepository:
    return JsonVirtualProductFileRepository(data_dir() / "virtual_files.json")
