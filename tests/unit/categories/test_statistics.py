"""Unit tests for the category statistics aggregation."""

from __future__ import annotations

import random
from decimal import Decimal

import pytest

from factories import make_product
from modules.categories.statistics import (
    DEFAULT_LOW_STOCK_THRESHOLD,
    compute_category_statistics,
    is_low_stock,
)

pytestmark = pytest.mark.unit


class TestEmptyCategory:
    @pytest.mark.parametrize("products", [[], None])
    def test_every_metric_is_zero(self, products):
        stats = compute_category_statistics("Empty", products)

        assert stats.category_name == "Empty"
        assert stats.total_products == 0
        assert stats.total_stock == 0
        assert stats.total_inventory_value == 0
        assert stats.average_price == 0
        assert stats.min_price == 0
        assert stats.max_price == 0
        assert stats.low_stock_products == 0
        assert stats.low_stock_percentage == 0.0

    def test_zero_values_are_present_in_the_mapping(self):
        data = compute_category_statistics("Empty", []).as_dict()

        assert data == {
            "categoriaNombre": "Empty",
            "totalProductos": 0,
            "totalStock": 0,
            "valorTotalInventario": 0.0,
            "precioPromedio": 0.0,
            "precioMinimo": 0.0,
            "precioMaximo": 0.0,
            "productosConStockBajo": 0,
            "porcentajeProductosConStockBajo": 0.0,
        }


class TestTechScenario:
    @pytest.fixture()
    def products(self):
        return [
            make_product(id=1, price=Decimal("100"), stock=10, low_stock=True),
            make_product(id=2, price=Decimal("200"), stock=20, low_stock=False),
        ]

    def test_metrics(self, products):
        stats = compute_category_statistics("Tech", products)

        assert stats.total_products == 2
        assert stats.total_stock == 30
        assert stats.total_inventory_value == Decimal("5000.00")
        assert stats.average_price == Decimal("150.00")
        assert stats.min_price == Decimal("100")
        assert stats.max_price == Decimal("200")
        assert stats.low_stock_products == 1
        assert stats.low_stock_percentage == 50.0

    def test_wire_names(self, products):
        data = compute_category_statistics("Tech", products).as_dict()

        assert data["totalProductos"] == 2
        assert data["totalStock"] == 30
        assert data["valorTotalInventario"] == 5000.0
        assert data["precioPromedio"] == 150.0
        assert data["productosConStockBajo"] == 1
        assert data["porcentajeProductosConStockBajo"] == 50.0


class TestRounding:
    def test_inventory_value_rounds_half_up(self):
        products = [make_product(price=Decimal("0.125"), stock=1)]
        stats = compute_category_statistics("X", products)
        assert stats.total_inventory_value == Decimal("0.13")

    def test_average_rounds_half_up(self):
        products = [
            make_product(id=1, price=Decimal("0.01")),
            make_product(id=2, price=Decimal("0.02")),
        ]
        stats = compute_category_statistics("X", products)
        assert stats.average_price == Decimal("0.02")

    def test_percentage_two_decimals(self):
        products = [
            make_product(id=1, low_stock=True),
            make_product(id=2, low_stock=False),
            make_product(id=3, low_stock=False),
        ]
        stats = compute_category_statistics("X", products)
        assert stats.low_stock_percentage == 33.33

    def test_value_independent_of_order(self):
        products = [
            make_product(id=i, price=Decimal(f"{i}.15"), stock=i * 3)
            for i in range(1, 8)
        ]
        expected = compute_category_statistics("X", products).total_inventory_value
        shuffled = list(products)
        random.Random(7).shuffle(shuffled)

        assert compute_category_statistics("X", shuffled).total_inventory_value == expected


class TestNullHandling:
    def test_null_stock_counts_as_zero(self):
        products = [
            make_product(id=1, price=Decimal("10"), stock=None),
            make_product(id=2, price=Decimal("10"), stock=5),
        ]
        stats = compute_category_statistics("X", products)
        assert stats.total_stock == 5
        assert stats.total_inventory_value == Decimal("50.00")

    def test_null_price_excluded_from_price_metrics(self):
        products = [
            make_product(id=1, price=None, stock=100),
            make_product(id=2, price=Decimal("40"), stock=1),
            make_product(id=3, price=Decimal("20"), stock=1),
        ]
        stats = compute_category_statistics("X", products)
        assert stats.total_products == 3
        assert stats.total_inventory_value == Decimal("60.00")
        assert stats.average_price == Decimal("30.00")
        assert stats.min_price == Decimal("20")
        assert stats.max_price == Decimal("40")

    def test_no_prices_defaults_to_zero(self):
        products = [make_product(id=1, price=None), make_product(id=2, price=None)]
        stats = compute_category_statistics("X", products)
        assert stats.average_price == 0
        assert stats.min_price == 0
        assert stats.max_price == 0


class TestLowStock:
    def test_flag_wins_over_threshold(self):
        assert is_low_stock(make_product(stock=500, low_stock=True))
        assert not is_low_stock(make_product(stock=1, low_stock=False))

    def test_threshold_fallback_is_inclusive(self):
        at = make_product(stock=DEFAULT_LOW_STOCK_THRESHOLD, low_stock=None)
        above = make_product(stock=DEFAULT_LOW_STOCK_THRESHOLD + 1, low_stock=None)
        assert is_low_stock(at)
        assert not is_low_stock(above)

    def test_unknown_stock_without_flag_is_not_low(self):
        assert not is_low_stock(make_product(stock=None, low_stock=None))
