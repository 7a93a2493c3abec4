"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory)
live in the infrastructure layer and the test suite.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.exceptions import ProductNotFoundError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import ProductId

# Fields a partial update may name.
UPDATABLE_FIELDS = frozenset(
    {
        "name",
        "price",
        "product_type",
        "is_virtual",
        "cache_is_pack",
        "cache_default_attribute",
    }
)


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique product ID."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product (all fields)."""

    @abstractmethod
    def partial_update(
        self, product: Product, field_names: list[str], error_code: int
    ) -> None:
        """Persist only *field_names* of *product*.

        Raises CannotUpdateProductError tagged with *error_code* when the
        stored record is missing, was written by someone else since it was
        loaded (``version`` mismatch), or a field name is not updatable.
        Bumps ``product.version`` on success.
        """

    def get(self, product_id: ProductId) -> Product:
        """Like ``get_by_id`` but raises ProductNotFoundError when absent."""
        product = self.get_by_id(product_id.value)
        if product is None:
            raise ProductNotFoundError(f"Product #{product_id} not found")
        return product
