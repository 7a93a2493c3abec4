"""Abstract repository for virtual product files."""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.virtual_file import VirtualProductFile


class VirtualProductFileRepository(ABC):

    @abstractmethod
    def get_by_product_id(self, product_id: int) -> VirtualProductFile | None:
        """Return the product's file record, or None."""

    @abstractmethod
    def save(self, file: VirtualProductFile) -> None:
        """Persist the product's file record, replacing any previous one."""

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Remove the product's file record; no-op if absent."""
