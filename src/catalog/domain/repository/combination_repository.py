"""Abstract repository for Combination entities."""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.exceptions import CombinationNotFoundError
from catalog.domain.model.combination import Combination
from catalog.domain.model.value_objects import CombinationId


class CombinationRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique combination ID."""

    @abstractmethod
    def get_by_id(self, combination_id: int) -> Combination | None:
        """Return a combination by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Combination]:
        """Return every combination of the catalog ordered by ID."""

    @abstractmethod
    def list_for_product(self, product_id: int) -> list[Combination]:
        """Return the product's combinations ordered by ID."""

    @abstractmethod
    def save(self, combination: Combination) -> None:
        """Persist a new or updated combination."""

    @abstractmethod
    def delete(self, combination_id: int) -> None:
        """Remove a combination; no-op if it does not exist."""

    def get(self, combination_id: CombinationId) -> Combination:
        combination = self.get_by_id(combination_id.value)
        if combination is None:
            raise CombinationNotFoundError(f"Combination #{combination_id} not found")
        return combination
