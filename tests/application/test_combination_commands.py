"""Integration tests for combination generation, edition and deletion use cases."""

from decimal import Decimal

import pytest

from catalog.application.delete_combination import (
    BulkDeleteCombinationsHandler,
    DeleteCombinationHandler,
)
from catalog.application.dto import CombinationUpdate
from catalog.application.generate_combinations import GenerateCombinationsHandler
from catalog.application.list_combinations import ListCombinationsHandler
from catalog.application.update_combination import (
    BulkUpdateCombinationsHandler,
    UpdateCombinationHandler,
    UpdateCombinationsFromListingHandler,
)
from catalog.domain.exceptions import (
    CombinationConstraintError,
    CombinationError,
    ProductNotFoundError,
    ValidationError,
)
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money, ProductType
from tests.fakes import (
    FakeCombinationRepository,
    FakeProductRepository,
    FakeStockRepository,
)


def _setup():
    """A shirt with four generated combinations (IDs 1-4, default 1)."""
    products = FakeProductRepository(
        [
            Product.create(1, "Shirt", Money.of("20.00"), ProductType.COMBINATIONS),
            Product.create(2, "Hat", Money.of("10.00"), ProductType.COMBINATIONS),
        ]
    )
    combinations = FakeCombinationRepository()
    stock = FakeStockRepository()
    GenerateCombinationsHandler(products, combinations).handle(
        1, {"Size": ["S", "M"], "Color": ["Red", "Blue"]}
    )
    return products, combinations, stock


class TestGenerateCombinations:

    def test_returns_new_ids_and_sets_default(self):
        products, combinations, _ = _setup()

        assert [c.id for c in combinations.list_for_product(1)] == [1, 2, 3, 4]
        assert products.get_by_id(1).cache_default_attribute == 1

    def test_ids_keep_growing_across_products(self):
        products, combinations, _ = _setup()

        ids = GenerateCombinationsHandler(products, combinations).handle(2, {"Size": ["L"]})

        assert ids == [5]


class TestUpdateCombination:

    def test_single_update(self):
        products, combinations, stock = _setup()
        handler = UpdateCombinationHandler(products, combinations, stock)

        handler.handle(2, CombinationUpdate(reference="SH-S-B", quantity=4))

        assert combinations.get_by_id(2).reference == "SH-S-B"
        assert stock.get(1, 2, 1).quantity == 4

    def test_empty_update_rejected(self):
        handler = UpdateCombinationHandler(*_setup())
        with pytest.raises(ValidationError, match="Nothing to update"):
            handler.handle(2, CombinationUpdate())

    @pytest.mark.parametrize("impact", ["NaN", "Infinity", "-Infinity", "sNaN"])
    def test_non_finite_price_impact_rejected(self, impact):
        products, combinations, stock = _setup()
        handler = UpdateCombinationHandler(products, combinations, stock)

        with pytest.raises(CombinationConstraintError) as exc_info:
            handler.handle(1, CombinationUpdate(impact_on_price=Decimal(impact)))

        assert exc_info.value.code == CombinationConstraintError.INVALID_PRICE_IMPACT
        assert combinations.get_by_id(1).impact_on_price == Decimal("0")
        listing = ListCombinationsHandler(products, combinations, stock).handle(1)
        assert listing.combinations[0].final_price == "$20.00"


class TestBulkUpdateCombinations:

    def test_applies_to_each(self):
        products, combinations, stock = _setup()
        handler = BulkUpdateCombinationsHandler(products, combinations, stock)

        handler.handle(1, [2, 3], CombinationUpdate(impact_on_price=Decimal("3")))

        assert [c.impact_on_price for c in combinations.list_for_product(1)] == [
            Decimal("0"), Decimal("3"), Decimal("3"), Decimal("0"),
        ]

    def test_several_defaults_rejected(self):
        handler = BulkUpdateCombinationsHandler(*_setup())
        with pytest.raises(CombinationConstraintError) as exc_info:
            handler.handle(1, [2, 3], CombinationUpdate(is_default=True))
        assert exc_info.value.code == CombinationConstraintError.DUPLICATE_DEFAULT

    def test_stops_at_first_failure_and_names_it(self):
        products, combinations, stock = _setup()
        handler = BulkUpdateCombinationsHandler(products, combinations, stock)

        with pytest.raises(CombinationError) as exc_info:
            handler.handle(1, [2, 1, 3], CombinationUpdate(is_default=False, reference="R"))

        assert exc_info.value.combination_id == 1
        assert combinations.get_by_id(2).reference == "R"
        assert combinations.get_by_id(3).reference == ""

    def test_foreign_combination_rejected(self):
        products, combinations, stock = _setup()
        GenerateCombinationsHandler(products, combinations).handle(2, {"Size": ["L"]})
        handler = BulkUpdateCombinationsHandler(products, combinations, stock)

        with pytest.raises(CombinationConstraintError, match="does not belong"):
            handler.handle(1, [2, 5], CombinationUpdate(quantity=1))


class TestUpdateFromListing:

    def test_row_updates(self):
        products, combinations, stock = _setup()
        handler = UpdateCombinationsFromListingHandler(products, combinations, stock)

        handler.handle(
            1,
            {
                2: CombinationUpdate(quantity=8),
                4: CombinationUpdate(is_default=True, impact_on_price=Decimal("-1")),
            },
        )

        assert stock.get(1, 2, 1).quantity == 8
        assert products.get_by_id(1).cache_default_attribute == 4
        assert combinations.get_by_id(4).impact_on_price == Decimal("-1")
        assert not combinations.get_by_id(1).is_default

    @pytest.mark.parametrize("rows", [[1, 3], [3, 1]])
    def test_moving_the_default_ignores_row_order(self, rows):
        products, combinations, stock = _setup()
        handler = UpdateCombinationsFromListingHandler(products, combinations, stock)
        edits = {
            1: CombinationUpdate(is_default=False),
            3: CombinationUpdate(is_default=True),
        }

        handler.handle(1, {cid: edits[cid] for cid in rows})

        assert products.get_by_id(1).cache_default_attribute == 3
        assert [c.id for c in combinations.list_for_product(1) if c.is_default] == [3]

    def test_unticking_the_default_alone_still_rejected(self):
        handler = UpdateCombinationsFromListingHandler(*_setup())
        with pytest.raises(CombinationConstraintError) as exc_info:
            handler.handle(1, {1: CombinationUpdate(is_default=False)})
        assert exc_info.value.code == CombinationConstraintError.CANNOT_UNSET_DEFAULT

    def test_two_defaults_rejected(self):
        handler = UpdateCombinationsFromListingHandler(*_setup())
        with pytest.raises(CombinationConstraintError, match="Only one combination"):
            handler.handle(
                1,
                {2: CombinationUpdate(is_default=True), 3: CombinationUpdate(is_default=True)},
            )


class TestDeleteCombinations:

    def test_delete(self):
        products, combinations, stock = _setup()

        DeleteCombinationHandler(products, combinations, stock).handle(1)

        assert [c.id for c in combinations.list_for_product(1)] == [2, 3, 4]
        assert products.get_by_id(1).cache_default_attribute == 2

    def test_bulk_delete(self):
        products, combinations, stock = _setup()

        BulkDeleteCombinationsHandler(products, combinations, stock).handle(1, [3, 4])

        assert [c.id for c in combinations.list_for_product(1)] == [1, 2]

    def test_bulk_delete_unknown_product(self):
        handler = BulkDeleteCombinationsHandler(*_setup())
        with pytest.raises(ProductNotFoundError):
            handler.handle(99, [1])
