"""Stock records: quantities per (product, combination, shop) and the
movements that explain every change to them.
"""

from __future__ import annotations

from dataclasses import dataclass

# combination_id used for product-level stock rows
PRODUCT_LEVEL = 0


@dataclass
class StockAvailable:
    product_id: int
    combination_id: int
    shop_id: int
    quantity: int = 0

    @property
    def key(self) -> tuple[int, int, int]:
        return (self.product_id, self.combination_id, self.shop_id)


@dataclass(frozen=True)
class StockMovement:
    """Signed quantity change applied to one stock row."""

    product_id: int
    combination_id: int
    shop_id: int
    delta: int
    reason: str

# Shop targeted when a caller does not name one
DEFAULT_SHOP_ID = 1
