"""Category DTOs.

- ``CategoryDTO``: input and output for category CRUD.
- ``CategoryStatisticsDTO``: metrics computed per request by
  ``modules.categories.statistics``; never persisted.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Optional

from pydantic import Field

from modules.core.dtos import WireDecimal, WireModel


class CategoryDTO(WireModel):
    id: Optional[int] = None
    name: Optional[str] = Field(default=None, alias="nombre")
    description: Optional[str] = Field(default=None, alias="descripcion")


class CategoryStatisticsDTO(WireModel):
    """Flat set of category metrics.

    Monetary values are rounded half-up to two decimals; the low-stock
    percentage uses Python's built-in ``round``.
    """

    category_name: str = Field(alias="categoriaNombre")
    total_products: int = Field(default=0, alias="totalProductos")
    total_stock: int = Field(default=0, alias="totalStock")
    total_inventory_value: WireDecimal = Field(
        default=Decimal("0"), alias="valorTotalInventario"
    )
    average_price: WireDecimal = Field(default=Decimal("0"), alias="precioPromedio")
    min_price: WireDecimal = Field(default=Decimal("0"), alias="precioMinimo")
    max_price: WireDecimal = Field(default=Decimal("0"), alias="precioMaximo")
    low_stock_products: int = Field(default=0, alias="productosConStockBajo")
    low_stock_percentage: float = Field(
        default=0.0, alias="porcentajeProductosConStockBajo"
    )

    def as_dict(self) -> Dict[str, Any]:
        """Metrics keyed by their wire names, including zero values."""
        return self.model_dump(mode="json", by_alias=True)
