"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF views), the
orchestrators and the data service gateway.  DTOs are immutable
(``frozen=True``).

- ``ProductDTO``: a product as returned by the data service.
- ``ProductRequestDTO``: input for product creation and update.
- ``PriceRangeDTO``: optional inclusive bounds for the price filter.

Business rules are *not* enforced here: the DTOs only coerce types.
``modules.products.rules`` checks them so every violation surfaces as a
``BusinessValidationError`` before the gateway is called.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from modules.core.dtos import WireDecimal, WireModel


class ProductDTO(WireModel):
    """Product as stored by the data service."""

    id: Optional[int] = None
    name: Optional[str] = Field(default=None, alias="nombre")
    description: Optional[str] = Field(default=None, alias="descripcion")
    price: Optional[WireDecimal] = Field(default=None, alias="precio")
    category_name: Optional[str] = Field(default=None, alias="categoriaNombre")
    stock: Optional[int] = None
    low_stock: Optional[bool] = Field(default=None, alias="stockBajo")


class ProductRequestDTO(WireModel):
    """Immutable DTO for product create/update requests."""

    name: Optional[str] = Field(default=None, alias="nombre")
    description: Optional[str] = Field(default=None, alias="descripcion")
    price: Optional[WireDecimal] = Field(default=None, alias="precio")
    category_name: Optional[str] = Field(default=None, alias="categoriaNombre")
    stock: Optional[int] = None


class PriceRangeDTO(WireModel):
    """Inclusive price bounds; either side may be omitted."""

    min_price: Optional[WireDecimal] = Field(default=None, alias="minPrice")
    max_price: Optional[WireDecimal] = Field(default=None, alias="maxPrice")
