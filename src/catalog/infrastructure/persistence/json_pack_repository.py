"""JSON-file-backed implementation of PackRepository."""

from __future__ import annotations

from pathlib import Path

from catalog.domain.model.pack import PackItem
from catalog.domain.repository.pack_repository import PackRepository
from catalog.infrastructure.persistence.json_file import JsonFile


class JsonPackRepository(PackRepository):
    """Stores ``{pack_id: [{product_id, quantity}, ...]}``."""

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, {})

    def get_items(self, pack_id: int) -> list[PackItem]:
        raw_items = self._file.read().get(str(pack_id), [])
        return [PackItem(raw["product_id"], raw["quantity"]) for raw in raw_items]

    def set_items(self, pack_id: int, items: list[PackItem]) -> None:
        data = self._file.read()
        if items:
            data[str(pack_id)] = [
                {"product_id": item.product_id, "quantity": item.quantity}
                for item in items
            ]
        else:
            data.pop(str(pack_id), None)
        self._file.write(data)

    def list_packs_containing(self, product_id: int) -> list[int]:
        return sorted(
            int(pack_id)
            for pack_id, raw_items in self._file.read().items()
            if any(raw["product_id"] == product_id for raw in raw_items)
        )
