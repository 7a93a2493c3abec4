"""JSON-file-backed implementation of VirtualProductFileRepository."""

from __future__ import annotations

from pathlib import Path

from catalog.domain.model.virtual_file import VirtualProductFile
from catalog.domain.repository.virtual_file_repository import (
    VirtualProductFileRepository,
)
from catalog.infrastructure.persistence.json_file import JsonFile


class JsonVirtualProductFileRepository(VirtualProductFileRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, [])

    def get_by_product_id(self, product_id: int) -> VirtualProductFile | None:
        for raw in self._file.read():
            if raw["product_id"] == product_id:
                return VirtualProductFile(**raw)
        return None

    def save(self, file: VirtualProductFile) -> None:
        records = [r for r in self._file.read() if r["product_id"] != file.product_id]
        records.append(
            {
                "product_id": file.product_id,
                "filename": file.filename,
                "display_name": file.display_name,
            }
        )
        self._file.write(records)

    def delete(self, product_id: int) -> None:
        records = self._file.read()
        self._file.write([r for r in records if r["product_id"] != product_id])
