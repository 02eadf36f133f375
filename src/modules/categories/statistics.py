"""Category statistics aggregation.

Derives reporting metrics from the products of one category.  Nothing is
cached: the product list is fetched fresh for every request, so two
consecutive calls may disagree if the catalog changed in between.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

from modules.categories.dtos import CategoryStatisticsDTO
from modules.products.dtos import ProductDTO

#: Stock at or below which a product without a low-stock flag counts as low.
DEFAULT_LOW_STOCK_THRESHOLD = 10

CENT = Decimal("0.01")
ZERO = Decimal("0")


def _money(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def _stock(product: ProductDTO) -> int:
    return product.stock if product.stock is not None else 0


def is_low_stock(product: ProductDTO) -> bool:
    """Use the data service's flag when present, else the default threshold."""
    if product.low_stock is not None:
        return product.low_stock
    return product.stock is not None and product.stock <= DEFAULT_LOW_STOCK_THRESHOLD


def compute_category_statistics(
    category_name: str,
    products: Optional[Iterable[ProductDTO]],
) -> CategoryStatisticsDTO:
    products = [p for p in products or () if p is not None]
    if not products:
        return CategoryStatisticsDTO(category_name=category_name)

    total_products = len(products)
    total_stock = sum(_stock(p) for p in products)
    total_value = sum(
        ((p.price if p.price is not None else ZERO) * _stock(p) for p in products),
        ZERO,
    )

    prices = [p.price for p in products if p.price is not None]
    if prices:
        average_price = _money(sum(prices, ZERO) / len(prices))
        min_price, max_price = min(prices), max(prices)
    else:
        average_price = min_price = max_price = ZERO

    low_stock = sum(1 for p in products if is_low_stock(p))

    return CategoryStatisticsDTO(
        category_name=category_name,
        total_products=total_products,
        total_stock=total_stock,
        total_inventory_value=_money(total_value),
        average_price=average_price,
        min_price=min_price,
        max_price=max_price,
        low_stock_products=low_stock,
        low_stock_percentage=round(low_stock * 100 / total_products, 2),
    )
