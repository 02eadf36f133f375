"""Inventory DTOs.

- ``InventoryDTO``: records returned by the data service, and the minimal
  quantity-update payload.
- ``MovementDTO``: a stock movement.  Only the product reference is
  typed; the request body is kept as received and forwarded unchanged,
  unknown and explicitly null keys included.
"""

from __future__ import annotations

import copy
from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import ConfigDict, Field, PrivateAttr

from modules.core.dtos import WireModel, parse_request
from modules.products.dtos import ProductDTO


class InventoryDTO(WireModel):
    id: Optional[int] = None
    product: Optional[ProductDTO] = Field(default=None, alias="producto")
    quantity: Optional[int] = Field(default=None, alias="cantidad")
    minimum_stock: Optional[int] = Field(default=None, alias="stockMinimo")
    updated_at: Optional[datetime] = Field(default=None, alias="fechaActualizacion")

    @property
    def product_id(self) -> Optional[int]:
        return self.product.id if self.product is not None else None

    @classmethod
    def quantity_update(cls, product_id: int, quantity: int) -> InventoryDTO:
        """Minimal absolute-set payload: product reference and new quantity."""
        return cls(product=ProductDTO(id=product_id), quantity=quantity)


class ProductReferenceDTO(WireModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    id: Optional[int] = None


class MovementDTO(WireModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    product: Optional[ProductReferenceDTO] = Field(default=None, alias="producto")

    _payload: Optional[Dict[str, Any]] = PrivateAttr(default=None)

    @classmethod
    def from_payload(cls, data: Any) -> MovementDTO:
        """Parse a request body, keeping a copy of it for ``to_wire``.

        Raises:
            BusinessValidationError: if the body is not an object or the
                product reference is malformed.
        """
        movement = parse_request(cls, data)
        movement._payload = copy.deepcopy(data)
        return movement

    @property
    def product_id(self) -> Optional[int]:
        return self.product.id if self.product is not None else None

    def to_wire(self) -> Dict[str, Any]:
        if self._payload is not None:
            return copy.deepcopy(self._payload)
        return super().to_wire()
