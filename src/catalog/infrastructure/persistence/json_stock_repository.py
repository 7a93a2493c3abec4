"""JSON-file-backed implementation of StockRepository.

Rows and the movement journal share one file so a stock change and its
movement are read back together.
"""

from __future__ import annotations

from pathlib import Path

from catalog.domain.model.stock import StockAvailable, StockMovement
from catalog.domain.repository.stock_repository import StockRepository
from catalog.infrastructure.persistence.json_file import JsonFile

_ROW_FIELDS = ("product_id", "combination_id", "shop_id", "quantity")
_MOVEMENT_FIELDS = ("product_id", "combination_id", "shop_id", "delta", "reason")


class JsonStockRepository(StockRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, {"rows": [], "movements": []})

    # --- StockRepository interface --------------------------------------------

    def get(
        self, product_id: int, combination_id: int, shop_id: int
    ) -> StockAvailable | None:
        key = (product_id, combination_id, shop_id)
        for raw in self._file.read()["rows"]:
            if self._key(raw) == key:
                return StockAvailable(**raw)
        return None

    def list_for_product(self, product_id: int) -> list[StockAvailable]:
        return [
            StockAvailable(**raw)
            for raw in self._file.read()["rows"]
            if raw["product_id"] == product_id
        ]

    def save(self, stock: StockAvailable) -> None:
        data = self._file.read()
        rows = data["rows"]
        raw_row = {name: getattr(stock, name) for name in _ROW_FIELDS}
        for i, raw in enumerate(rows):
            if self._key(raw) == stock.key:
                rows[i] = raw_row
                break
        else:
            rows.append(raw_row)
        self._file.write(data)

    def delete_for_combination(self, combination_id: int) -> None:
        data = self._file.read()
        data["rows"] = [
            raw for raw in data["rows"] if raw["combination_id"] != combination_id
        ]
        self._file.write(data)

    def add_movement(self, movement: StockMovement) -> None:
        data = self._file.read()
        data["movements"].append(
            {name: getattr(movement, name) for name in _MOVEMENT_FIELDS}
        )
        self._file.write(data)

    def list_movements(self, product_id: int) -> list[StockMovement]:
        return [
            StockMovement(**raw)
            for raw in self._file.read()["movements"]
            if raw["product_id"] == product_id
        ]

    @staticmethod
    def _key(raw: dict) -> tuple[int, int, int]:
        return (raw["product_id"], raw["combination_id"], raw["shop_id"])
