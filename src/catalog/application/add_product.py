"""Application service: Add Product use case."""

from __future__ import annotations

from catalog.application.dto import ProductDTO
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money, ProductType
from catalog.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str, price: str, product_type: str = "standard") -> ProductDTO:
        """Add a new product to the catalog."""
        product = Product.create(
            id=self._product_repo.next_id(),
            name=name,
            price=Money.of(price),
            product_type=ProductType.of(product_type),
        )
        self._product_repo.save(product)
        return ProductDTO.from_product(product)
