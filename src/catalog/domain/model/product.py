"""Product aggregate.

A product's commercial type drives three cached flags that the storefront
reads directly (``is_virtual``, ``cache_is_pack``, ``cache_default_attribute``).
They must never be persisted out of sync with ``product_type``, so they are
only ever changed through the methods below.
"""

from __future__ import annotations

from dataclasses import dataclass

from catalog.domain.exceptions import ProductConstraintError
from catalog.domain.model.value_objects import Money, ProductType

MAX_NAME_LENGTH = 128


@dataclass
class Product:
    """A product in the catalog.

    ``version`` is bumped by the repository on every successful write and
    checked on partial updates, so two concurrent writers cannot both win.
    """

    id: int
    name: str
    price: Money
    product_type: ProductType = ProductType.STANDARD
    is_virtual: bool = False
    cache_is_pack: bool = False
    cache_default_attribute: int = 0
    version: int = 0

    @staticmethod
    def create(
        id: int,
        name: str,
        price: Money,
        product_type: ProductType = ProductType.STANDARD,
    ) -> Product:
        """Create a new product with flags derived from its type."""
        if not name or not name.strip():
            raise ProductConstraintError(
                "Product name is required", ProductConstraintError.INVALID_NAME
            )
        if len(name.strip()) > MAX_NAME_LENGTH:
            raise ProductConstraintError(
                f"Product name cannot exceed {MAX_NAME_LENGTH} characters",
                ProductConstraintError.INVALID_NAME,
            )
        product = Product(id=id, name=name.strip(), price=price)
        product.change_type(product_type)
        return product

    def change_type(self, new_type: ProductType) -> list[str]:
        """Switch to *new_type* in memory and return the fields that must be saved.

        The type and both boolean flags are always returned; the default
        combination is zeroed (and returned) unless the product now has
        combinations.
        """
        updated = ["product_type", "is_virtual", "cache_is_pack"]
        self.product_type = new_type
        self.is_virtual = new_type is ProductType.VIRTUAL
        self.cache_is_pack = new_type is ProductType.PACK
        if new_type is not ProductType.COMBINATIONS:
            self.cache_default_attribute = 0
            updated.append("cache_default_attribute")
        return updated

    def set_default_combination(self, combination_id: int) -> None:
        if combination_id and self.product_type is not ProductType.COMBINATIONS:
            raise ProductConstraintError(
                f"Product #{self.id} is of type '{self.product_type}', "
                "only products with combinations have a default combination",
                ProductConstraintError.INVALID_TYPE_FOR_OPERATION,
            )
        self.cache_default_attribute = combination_id

    def require_type(self, expected: ProductType, action: str) -> None:
        """Raise unless the product is of *expected* type."""
        if self.product_type is not expected:
            raise ProductConstraintError(
                f"Cannot {action}: product #{self.id} is of type "
                f"'{self.product_type}', expected '{expected}'",
                ProductConstraintError.INVALID_TYPE_FOR_OPERATION,
            )
