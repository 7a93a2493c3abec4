"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum

from catalog.domain.exceptions import (
    CombinationConstraintError,
    ProductConstraintError,
    StockConstraintError,
    ValidationError,
)


def _is_positive_int(value: object) -> bool:
    # bool is an int subclass; True is not an ID
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


@dataclass(frozen=True)
class ProductId:
    value: int

    def __post_init__(self) -> None:
        if not _is_positive_int(self.value):
            raise ProductConstraintError(
                f"Product ID must be a positive integer, got {self.value!r}",
                ProductConstraintError.INVALID_ID,
            )

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class CombinationId:
    value: int

    def __post_init__(self) -> None:
        if not _is_positive_int(self.value):
            raise CombinationConstraintError(
                f"Combination ID must be a positive integer, got {self.value!r}",
                CombinationConstraintError.INVALID_ID,
            )

    def __str__(self) -> str:
        return str(self.value)


class ProductType(Enum):
    """Commercial type of a catalog item.

    A product has exactly one type; each type unlocks its own associations
    (pack items, combinations, a downloadable file).
    """

    STANDARD = "standard"
    PACK = "pack"
    COMBINATIONS = "combinations"
    VIRTUAL = "virtual"

    @staticmethod
    def of(raw: ProductType | str) -> ProductType:
        """Coerce a member or its string value, rejecting anything else."""
        if isinstance(raw, ProductType):
            return raw
        try:
            return ProductType(str(raw).strip().lower())
        except ValueError as exc:
            allowed = ", ".join(t.value for t in ProductType)
            raise ProductConstraintError(
                f"Invalid product type {raw!r} (expected one of: {allowed})",
                ProductConstraintError.INVALID_TYPE,
            ) from exc

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ShopConstraint:
    """Selects the shops an operation applies to.

    ``shop_id=None`` means every shop of a multi-shop deployment.
    """

    shop_id: int | None = None

    def __post_init__(self) -> None:
        if self.shop_id is not None and not _is_positive_int(self.shop_id):
            raise StockConstraintError(
                f"Shop ID must be a positive integer, got {self.shop_id!r}",
                StockConstraintError.INVALID_SHOP,
            )

    @staticmethod
    def all_shops() -> ShopConstraint:
        return ShopConstraint(None)

    @staticmethod
    def shop(shop_id: int) -> ShopConstraint:
        return ShopConstraint(shop_id)

    @property
    def for_all_shops(self) -> bool:
        return self.shop_id is None

    def applies_to(self, shop_id: int) -> bool:
        return self.shop_id is None or self.shop_id == shop_id

    def __str__(self) -> str:
        return "all shops" if self.shop_id is None else f"shop #{self.shop_id}"


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    def with_impact(self, impact: Decimal) -> Money:
        """Apply a signed price impact; the result never drops below zero."""
        return Money(max(self.amount + impact, Decimal("0")), self.currency)

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
