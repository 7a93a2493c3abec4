"""Pack contents: which products (and how many of each) a pack bundles."""

from __future__ import annotations

from dataclasses import dataclass

from catalog.domain.exceptions import PackConstraintError


@dataclass(frozen=True)
class PackItem:
    product_id: int
    quantity: int = 1

    def __post_init__(self) -> None:
        if not isinstance(self.quantity, int) or self.quantity < 1:
            raise PackConstraintError(
                f"Pack item quantity must be at least 1, got {self.quantity!r}",
                PackConstraintError.INVALID_QUANTITY,
            )
