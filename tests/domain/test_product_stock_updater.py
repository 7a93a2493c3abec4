"""Unit tests for the ProductStockUpdater domain service."""

import pytest

from catalog.domain.exceptions import StockConstraintError
from catalog.domain.model.stock import StockAvailable
from catalog.domain.model.value_objects import ProductId, ShopConstraint
from catalog.domain.service.product_stock_updater import ProductStockUpdater
from tests.fakes import FakeStockRepository


def _repo() -> FakeStockRepository:
    return FakeStockRepository(
        [
            StockAvailable(1, 0, 1, 10),
            StockAvailable(1, 0, 2, 4),
            StockAvailable(1, 7, 1, 3),
            StockAvailable(1, 8, 2, 0),
            StockAvailable(2, 0, 1, 99),
        ]
    )


class TestResetStock:

    def test_all_shops_zeroes_every_row_of_the_product(self):
        repo = _repo()

        ProductStockUpdater(repo).reset_stock(ProductId(1), ShopConstraint.all_shops())

        assert all(row.quantity == 0 for row in repo.list_for_product(1))
        assert repo.get(2, 0, 1).quantity == 99

    def test_movements_only_for_non_zero_rows(self):
        repo = _repo()

        ProductStockUpdater(repo).reset_stock(ProductId(1), ShopConstraint.all_shops())

        movements = repo.list_movements(1)
        assert sorted((m.combination_id, m.shop_id, m.delta) for m in movements) == [
            (0, 1, -10), (0, 2, -4), (7, 1, -3),
        ]
        assert {m.reason for m in movements} == {"reset"}

    def test_single_shop(self):
        repo = _repo()

        ProductStockUpdater(repo).reset_stock(ProductId(1), ShopConstraint.shop(2))

        assert repo.get(1, 0, 2).quantity == 0
        assert repo.get(1, 0, 1).quantity == 10
        assert repo.get(1, 7, 1).quantity == 3


class TestSetQuantity:

    def test_creates_row_and_movement(self):
        repo = FakeStockRepository()

        ProductStockUpdater(repo).set_quantity(1, 0, 1, 12)

        assert repo.get(1, 0, 1).quantity == 12
        assert [(m.delta, m.reason) for m in repo.list_movements(1)] == [(12, "manual")]

    def test_unchanged_quantity_records_no_movement(self):
        repo = _repo()

        ProductStockUpdater(repo).set_quantity(1, 0, 1, 10)

        assert repo.list_movements(1) == []

    def test_negative_quantity_allowed(self):
        repo = _repo()

        ProductStockUpdater(repo).set_quantity(1, 0, 1, -2)

        assert repo.get(1, 0, 1).quantity == -2
        assert repo.list_movements(1)[0].delta == -12

    def test_non_integer_rejected(self):
        with pytest.raises(StockConstraintError, match="must be an integer"):
            ProductStockUpdater(FakeStockRepository()).set_quantity(1, 0, 1, 2.5)

    def test_invalid_shop_rejected(self):
        with pytest.raises(StockConstraintError, match="Shop ID"):
            ProductStockUpdater(FakeStockRepository()).set_quantity(1, 0, 0, 2)
