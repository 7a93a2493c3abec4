"""Unit tests for combination generation, edition and deletion."""

from decimal import Decimal

import pytest

from catalog.domain.exceptions import (
    CombinationConstraintError,
    CombinationError,
    CombinationNotFoundError,
    ProductConstraintError,
)
from catalog.domain.model.combination import Combination
from catalog.domain.model.product import Product
from catalog.domain.model.stock import StockAvailable
from catalog.domain.model.value_objects import (
    CombinationId,
    Money,
    ProductId,
    ProductType,
)
from catalog.domain.service.combination_deleter import CombinationDeleter
from catalog.domain.service.combination_generator import CombinationGenerator
from catalog.domain.service.combination_updater import CombinationUpdater
from catalog.domain.service.default_combination_updater import (
    DefaultCombinationUpdater,
)
from catalog.domain.service.product_stock_updater import ProductStockUpdater
from tests.fakes import (
    FakeCombinationRepository,
    FakeProductRepository,
    FakeStockRepository,
)


def _setup(combinations=(), default=0, stock=()):
    shirt = Product.create(1, "Shirt", Money.of("20"), ProductType.COMBINATIONS)
    shirt.cache_default_attribute = default
    mug = Product.create(2, "Mug", Money.of("8"))
    products = FakeProductRepository([shirt, mug])
    combination_repo = FakeCombinationRepository(list(combinations))
    stock_repo = FakeStockRepository(list(stock))
    default_updater = DefaultCombinationUpdater(products, combination_repo)
    return products, combination_repo, stock_repo, default_updater


def _three_sizes():
    return [
        Combination(1, 1, (("Size", "S"),), is_default=True),
        Combination(2, 1, (("Size", "M"),)),
        Combination(3, 1, (("Size", "L"),)),
    ]


# ── Generation ───────────────────────────────────────────────────────────────


class TestGenerate:

    def test_cartesian_product_in_order(self):
        products, combinations, _, default_updater = _setup()
        svc = CombinationGenerator(products, combinations, default_updater)

        ids = svc.generate(ProductId(1), {"Size": ["S", "M"], "Color": ["Red", "Blue"]})

        assert ids == [1, 2, 3, 4]
        assert [c.name for c in combinations.list_for_product(1)] == [
            "Size - S, Color - Red",
            "Size - S, Color - Blue",
            "Size - M, Color - Red",
            "Size - M, Color - Blue",
        ]

    def test_first_combination_becomes_default(self):
        products, combinations, _, default_updater = _setup()
        svc = CombinationGenerator(products, combinations, default_updater)

        svc.generate(ProductId(1), {"Size": ["S", "M"]})

        assert products.get_by_id(1).cache_default_attribute == 1
        assert [c.is_default for c in combinations.list_for_product(1)] == [True, False]

    def test_existing_combinations_are_skipped(self):
        products, combinations, _, default_updater = _setup(_three_sizes(), default=1)
        svc = CombinationGenerator(products, combinations, default_updater)

        ids = svc.generate(ProductId(1), {"Size": ["M", "XL"]})

        assert ids == [4]
        assert products.get_by_id(1).cache_default_attribute == 1

    def test_regenerating_creates_nothing(self):
        products, combinations, _, default_updater = _setup()
        svc = CombinationGenerator(products, combinations, default_updater)
        svc.generate(ProductId(1), {"Size": ["S"]})

        assert svc.generate(ProductId(1), {"size": ["s"]}) == []

    def test_requires_combinations_type(self):
        products, combinations, _, default_updater = _setup()
        svc = CombinationGenerator(products, combinations, default_updater)

        with pytest.raises(ProductConstraintError, match="generate combinations"):
            svc.generate(ProductId(2), {"Size": ["S"]})

    @pytest.mark.parametrize(
        "groups", [{}, {"Size": []}, {"Size": [" "]}, {"": ["S"]}, {"Size": ["S", "s"]}]
    )
    def test_invalid_groups_rejected(self, groups):
        products, combinations, _, default_updater = _setup()
        svc = CombinationGenerator(products, combinations, default_updater)

        with pytest.raises(CombinationConstraintError) as exc_info:
            svc.generate(ProductId(1), groups)
        assert exc_info.value.code == CombinationConstraintError.INVALID_ATTRIBUTES


# ── Edition ──────────────────────────────────────────────────────────────────


class TestUpdate:

    def _svc(self, products, combinations, stock, default_updater):
        return CombinationUpdater(combinations, ProductStockUpdater(stock), default_updater)

    def test_reference_and_impact(self):
        products, combinations, stock, default_updater = _setup(_three_sizes(), default=1)
        svc = self._svc(products, combinations, stock, default_updater)

        svc.update(CombinationId(2), reference="SHIRT-M", impact_on_price=Decimal("-1.5"))

        updated = combinations.get_by_id(2)
        assert updated.reference == "SHIRT-M"
        assert updated.impact_on_price == Decimal("-1.5")

    def test_quantity_goes_to_default_shop(self):
        products, combinations, stock, default_updater = _setup(_three_sizes(), default=1)
        svc = self._svc(products, combinations, stock, default_updater)

        svc.update(CombinationId(2), quantity=7)

        assert stock.get(1, 2, 1).quantity == 7

    def test_make_default(self):
        products, combinations, stock, default_updater = _setup(_three_sizes(), default=1)
        svc = self._svc(products, combinations, stock, default_updater)

        svc.update(CombinationId(3), is_default=True)

        assert products.get_by_id(1).cache_default_attribute == 3
        assert [c.is_default for c in combinations.list_for_product(1)] == [False, False, True]

    def test_unsetting_the_default_rejected(self):
        products, combinations, stock, default_updater = _setup(_three_sizes(), default=1)
        svc = self._svc(products, combinations, stock, default_updater)

        with pytest.raises(CombinationConstraintError) as exc_info:
            svc.update(CombinationId(1), is_default=False, reference="X")

        assert exc_info.value.code == CombinationConstraintError.CANNOT_UNSET_DEFAULT
        assert combinations.get_by_id(1).reference == ""

    def test_unknown_combination(self):
        products, combinations, stock, default_updater = _setup()
        svc = self._svc(products, combinations, stock, default_updater)

        with pytest.raises(CombinationNotFoundError):
            svc.update(CombinationId(42), quantity=1)


# ── Deletion ─────────────────────────────────────────────────────────────────


class TestDelete:

    def test_delete_all_is_idempotent_and_drops_stock(self):
        products, combinations, stock, default_updater = _setup(
            _three_sizes(), default=1, stock=[StockAvailable(1, 2, 1, 5)]
        )
        svc = CombinationDeleter(combinations, stock, default_updater)

        svc.delete_all_product_combinations(ProductId(1))
        svc.delete_all_product_combinations(ProductId(1))

        assert combinations.list_for_product(1) == []
        assert stock.get(1, 2, 1) is None

    def test_deleting_the_default_promotes_the_next(self):
        products, combinations, stock, default_updater = _setup(_three_sizes(), default=1)
        svc = CombinationDeleter(combinations, stock, default_updater)

        svc.delete_combination(CombinationId(1))

        assert products.get_by_id(1).cache_default_attribute == 2
        assert combinations.get_by_id(2).is_default

    def test_deleting_the_last_clears_the_default(self):
        products, combinations, stock, default_updater = _setup(
            [Combination(1, 1, (("Size", "S"),), is_default=True)], default=1
        )
        svc = CombinationDeleter(combinations, stock, default_updater)

        svc.delete_combination(CombinationId(1))

        assert products.get_by_id(1).cache_default_attribute == 0

    def test_deleting_another_keeps_the_default(self):
        products, combinations, stock, default_updater = _setup(_three_sizes(), default=1)
        svc = CombinationDeleter(combinations, stock, default_updater)

        svc.delete_combination(CombinationId(3))

        assert products.get_by_id(1).cache_default_attribute == 1
        assert [c.id for c in combinations.list_for_product(1)] == [1, 2]

    def test_bulk_delete(self):
        products, combinations, stock, default_updater = _setup(_three_sizes(), default=1)
        svc = CombinationDeleter(combinations, stock, default_updater)

        svc.bulk_delete_combinations(ProductId(1), [CombinationId(1), CombinationId(2)])

        assert [c.id for c in combinations.list_for_product(1)] == [3]
        assert products.get_by_id(1).cache_default_attribute == 3

    def test_bulk_delete_checks_ownership_first(self):
        foreign = Combination(9, 2, (("Size", "S"),))
        products, combinations, stock, default_updater = _setup(
            _three_sizes() + [foreign], default=1
        )
        svc = CombinationDeleter(combinations, stock, default_updater)

        with pytest.raises(CombinationConstraintError, match="does not belong"):
            svc.bulk_delete_combinations(ProductId(1), [CombinationId(2), CombinationId(9)])

        assert len(combinations.list_for_product(1)) == 3

    def test_bulk_delete_failure_names_the_combination(self):
        products, combinations, stock, default_updater = _setup(_three_sizes(), default=1)

        class _FailingStock(FakeStockRepository):
            def delete_for_combination(self, combination_id):
                if combination_id == 3:
                    raise CombinationNotFoundError("gone")
                super().delete_for_combination(combination_id)

        svc = CombinationDeleter(combinations, _FailingStock(), default_updater)

        with pytest.raises(CombinationError) as exc_info:
            svc.bulk_delete_combinations(ProductId(1), [CombinationId(2), CombinationId(3)])

        assert exc_info.value.combination_id == 3
        assert [c.id for c in combinations.list_for_product(1)] == [1, 3]
