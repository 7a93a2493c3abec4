"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from catalog.domain.model.product import Product

COMBINATION_SORT_FIELDS = ("id", "reference", "quantity", "impact_on_price")


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    price: str  # formatted, e.g. "$15.00"
    product_type: str
    is_virtual: bool
    cache_is_pack: bool
    default_combination_id: int

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            price=str(product.price),
            product_type=product.product_type.value,
            is_virtual=product.is_virtual,
            cache_is_pack=product.cache_is_pack,
            default_combination_id=product.cache_default_attribute,
        )


@dataclass(frozen=True)
class CombinationFilters:
    """Input: listing filters for a product's combinations."""

    limit: int = 10
    offset: int = 0
    order_by: str = "id"
    order_way: str = "asc"
    attribute_values: tuple[str, ...] = ()


@dataclass(frozen=True)
class CombinationUpdate:
    """Input: fields to change on a combination; None means unchanged."""

    reference: str | None = None
    impact_on_price: Decimal | None = None
    quantity: int | None = None
    is_default: bool | None = None

    @property
    def is_empty(self) -> bool:
        return all(
            value is None
            for value in (self.reference, self.impact_on_price, self.quantity, self.is_default)
        )


@dataclass(frozen=True)
class CombinationForListingDTO:
    """Output: one row of the combination list."""

    id: int
    name: str
    reference: str
    impact_on_price: str  # signed, e.g. "+2.50"
    final_price: str
    quantity: int
    is_default: bool


@dataclass(frozen=True)
class CombinationListDTO:
    total_count: int
    combinations: list[CombinationForListingDTO] = field(default_factory=list)


@dataclass(frozen=True)
class AttributeGroupDTO:
    name: str
    values: list[str]


@dataclass(frozen=True)
class StockLineDTO:
    combination_id: int
    combination_name: str
    shop_id: int
    quantity: int
