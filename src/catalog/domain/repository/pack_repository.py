"""Abstract repository for pack contents."""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.pack import PackItem


class PackRepository(ABC):

    @abstractmethod
    def get_items(self, pack_id: int) -> list[PackItem]:
        """Return the items bundled in a pack (empty if none)."""

    @abstractmethod
    def set_items(self, pack_id: int, items: list[PackItem]) -> None:
        """Replace the whole content of a pack; an empty list clears it."""

    @abstractmethod
    def list_packs_containing(self, product_id: int) -> list[int]:
        """Return IDs of the packs that bundle the product."""
