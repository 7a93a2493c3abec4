"""Abstract repository for stock rows and stock movements."""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.stock import StockAvailable, StockMovement


class StockRepository(ABC):

    @abstractmethod
    def get(
        self, product_id: int, combination_id: int, shop_id: int
    ) -> StockAvailable | None:
        """Return one stock row, or None."""

    @abstractmethod
    def list_for_product(self, product_id: int) -> list[StockAvailable]:
        """Return every stock row of the product, combinations included."""

    @abstractmethod
    def save(self, stock: StockAvailable) -> None:
        """Persist a new or updated stock row."""

    @abstractmethod
    def delete_for_combination(self, combination_id: int) -> None:
        """Drop every stock row of a combination."""

    @abstractmethod
    def add_movement(self, movement: StockMovement) -> None:
        """Append a movement to the stock journal."""

    @abstractmethod
    def list_movements(self, product_id: int) -> list[StockMovement]:
        """Return the product's movements, oldest first."""
