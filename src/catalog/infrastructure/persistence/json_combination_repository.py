"""JSON-file-backed implementation of CombinationRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from catalog.domain.model.combination import Combination
from catalog.domain.repository.combination_repository import CombinationRepository
from catalog.infrastructure.persistence.json_file import JsonFile


class JsonCombinationRepository(CombinationRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, {"next_id": 1, "combinations": []})

    # --- CombinationRepository interface --------------------------------------

    def next_id(self) -> int:
        # IDs are never reused, even after deletions
        data = self._file.read()
        combination_id = data["next_id"]
        data["next_id"] = combination_id + 1
        self._file.write(data)
        return combination_id

    def get_by_id(self, combination_id: int) -> Combination | None:
        for raw in self._file.read()["combinations"]:
            if raw["id"] == combination_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Combination]:
        return sorted(
            (self._to_domain(raw) for raw in self._file.read()["combinations"]),
            key=lambda c: c.id,
        )

    def list_for_product(self, product_id: int) -> list[Combination]:
        return sorted(
            (
                self._to_domain(raw)
                for raw in self._file.read()["combinations"]
                if raw["product_id"] == product_id
            ),
            key=lambda c: c.id,
        )

    def save(self, combination: Combination) -> None:
        data = self._file.read()
        records = data["combinations"]
        for i, raw in enumerate(records):
            if raw["id"] == combination.id:
                records[i] = self._to_raw(combination)
                break
        else:
            records.append(self._to_raw(combination))
        self._file.write(data)

    def delete(self, combination_id: int) -> None:
        data = self._file.read()
        data["combinations"] = [
            raw for raw in data["combinations"] if raw["id"] != combination_id
        ]
        self._file.write(data)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(combination: Combination) -> dict:
        return {
            "id": combination.id,
            "product_id": combination.product_id,
            "attributes": [[group, value] for group, value in combination.attributes],
            "reference": combination.reference,
            "impact_on_price": str(combination.impact_on_price),
            "is_default": combination.is_default,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Combination:
        return Combination(
            id=raw["id"],
            product_id=raw["product_id"],
            attributes=tuple((group, value) for group, value in raw["attributes"]),
            reference=raw.get("reference", ""),
            impact_on_price=Decimal(raw.get("impact_on_price", "0")),
            is_default=raw.get("is_default", False),
        )
