"""Builders for the DTOs returned by the data service."""

from __future__ import annotations

from decimal import Decimal

from modules.categories.dtos import CategoryDTO
from modules.inventory.dtos import InventoryDTO
from modules.products.dtos import ProductDTO, ProductRequestDTO


def make_product(**overrides) -> ProductDTO:
    defaults = {
        "id": 1,
        "name": "Laptop",
        "description": "14 inch",
        "price": Decimal("100.00"),
        "category_name": "Tech",
        "stock": 10,
        "low_stock": False,
    }
    defaults.update(overrides)
    return ProductDTO(**defaults)


def make_product_request(**overrides) -> ProductRequestDTO:
    defaults = {
        "name": "Laptop",
        "description": "14 inch",
        "price": Decimal("100.00"),
        "category_name": "Tech",
        "stock": 10,
    }
    defaults.update(overrides)
    return ProductRequestDTO(**defaults)


def make_category(**overrides) -> CategoryDTO:
    defaults = {"id": 1, "name": "Tech", "description": "Gadgets"}
    defaults.update(overrides)
    return CategoryDTO(**defaults)


def make_inventory(**overrides) -> InventoryDTO:
    defaults = {
        "id": 1,
        "product": make_product(),
        "quantity": 10,
        "minimum_stock": 5,
    }
    defaults.update(overrides)
    return InventoryDTO(**defaults)
