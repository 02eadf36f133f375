"""Inventory business rules.

- RN-INV-001: a quantity update names a product and sets a whole quantity >= 0.
- RN-INV-002: a movement references a product with a non-null id.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from modules.core.exceptions import BusinessValidationError
from modules.inventory.dtos import MovementDTO

QUANTITY_RANGE_MESSAGE = "New quantity must be greater than or equal to zero."


def parse_quantity(value: Any) -> Optional[int]:
    """Read ``cantidad`` from a request body.

    ``5``, ``5.0`` and ``"5"`` all give ``5``.  A missing, boolean or
    non-numeric value gives ``None``.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        return None
    if not amount.is_finite():
        return None
    if amount != amount.to_integral_value():
        raise BusinessValidationError("New quantity must be a whole number.")
    return int(amount)


def validate_quantity_update(product_id: Optional[int], quantity: Optional[int]) -> None:
    if product_id is None:
        raise BusinessValidationError("Product id is required.")
    if quantity is None or quantity < 0:
        raise BusinessValidationError(QUANTITY_RANGE_MESSAGE)


def validate_movement(movement: Optional[MovementDTO]) -> int:
    """Return the referenced product id or reject the movement."""
    if movement is None or movement.product_id is None:
        raise BusinessValidationError(
            "Invalid inventory movement: product id is required."
        )
    return movement.product_id
