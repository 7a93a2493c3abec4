"""Unit tests for the Product aggregate."""

import pytest

from catalog.domain.exceptions import ProductConstraintError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money, ProductType


def _product(product_type=ProductType.STANDARD) -> Product:
    return Product.create(1, "Shirt", Money.of("20.00"), product_type)


class TestCreate:

    def test_flags_derived_from_type(self):
        pack = _product(ProductType.PACK)
        assert pack.cache_is_pack
        assert not pack.is_virtual

        virtual = _product(ProductType.VIRTUAL)
        assert virtual.is_virtual
        assert not virtual.cache_is_pack

    def test_name_is_trimmed(self):
        assert Product.create(1, "  Shirt ", Money.of("1")).name == "Shirt"

    def test_blank_name_rejected(self):
        with pytest.raises(ProductConstraintError, match="name is required"):
            Product.create(1, "   ", Money.of("1"))

    def test_overlong_name_rejected(self):
        with pytest.raises(ProductConstraintError, match="cannot exceed"):
            Product.create(1, "x" * 129, Money.of("1"))


class TestChangeType:

    def test_returns_the_fields_to_write(self):
        product = _product()
        assert product.change_type(ProductType.VIRTUAL) == [
            "product_type", "is_virtual", "cache_is_pack", "cache_default_attribute",
        ]

    def test_combinations_keep_default(self):
        product = _product(ProductType.COMBINATIONS)
        product.cache_default_attribute = 5

        fields = product.change_type(ProductType.COMBINATIONS)

        assert "cache_default_attribute" not in fields
        assert product.cache_default_attribute == 5

    def test_leaving_combinations_zeroes_default(self):
        product = _product(ProductType.COMBINATIONS)
        product.cache_default_attribute = 5

        product.change_type(ProductType.PACK)

        assert product.cache_default_attribute == 0
        assert product.cache_is_pack
        assert not product.is_virtual


class TestDefaultCombination:

    def test_set_on_combinations_product(self):
        product = _product(ProductType.COMBINATIONS)
        product.set_default_combination(9)
        assert product.cache_default_attribute == 9

    def test_rejected_on_other_types(self):
        product = _product(ProductType.STANDARD)
        with pytest.raises(ProductConstraintError) as exc_info:
            product.set_default_combination(9)
        assert exc_info.value.code == ProductConstraintError.INVALID_TYPE_FOR_OPERATION

    def test_clearing_always_allowed(self):
        product = _product(ProductType.STANDARD)
        product.set_default_combination(0)
        assert product.cache_default_attribute == 0
