"""Product business rules.

Pure functions run by ``ProductService`` before any call to the data
service.  Each raises ``BusinessValidationError`` with a human-readable
message on the first violated rule.

- RN-PRO-001: name is required on creation, never blank, at most 100 chars.
- RN-PRO-002: description at most 500 chars.
- RN-PRO-003: price is required and greater than zero.
- RN-PRO-004: category name is required, at most 100 chars.
- RN-PRO-005: stock, when given, is not negative.
- RN-PRO-006: price filter bounds are not negative and ``min <= max``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from modules.core.exceptions import BusinessValidationError
from modules.products.dtos import PriceRangeDTO, ProductRequestDTO

NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500
CATEGORY_NAME_MAX_LENGTH = 100


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def require_id(id: Optional[int], message: str = "Product id is required.") -> int:
    if id is None:
        raise BusinessValidationError(message)
    return id


def require_category_name(name: Optional[str]) -> str:
    """Return the stripped category name or reject a blank one."""
    if _is_blank(name):
        raise BusinessValidationError("Category name is required.")
    return name.strip()


def validate_product(dto: Optional[ProductRequestDTO], *, creating: bool) -> None:
    """Check a create (``creating=True``) or update request.

    On update the name may be omitted, but a name that is supplied blank
    is rejected all the same.
    """
    if dto is None:
        raise BusinessValidationError("Product request is empty.")

    if dto.name is None:
        if creating:
            raise BusinessValidationError("Product name is required.")
    elif not dto.name.strip():
        raise BusinessValidationError("Product name is required.")
    elif len(dto.name) > NAME_MAX_LENGTH:
        raise BusinessValidationError(
            f"Product name cannot exceed {NAME_MAX_LENGTH} characters."
        )

    if dto.description is not None and len(dto.description) > DESCRIPTION_MAX_LENGTH:
        raise BusinessValidationError(
            f"Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters."
        )

    if dto.price is None:
        raise BusinessValidationError("Product price is required.")
    if dto.price <= 0:
        raise BusinessValidationError("Price must be greater than zero.")

    if _is_blank(dto.category_name):
        raise BusinessValidationError("Category name is required.")
    if len(dto.category_name) > CATEGORY_NAME_MAX_LENGTH:
        raise BusinessValidationError(
            f"Category name cannot exceed {CATEGORY_NAME_MAX_LENGTH} characters."
        )

    if dto.stock is not None and dto.stock < 0:
        raise BusinessValidationError("Stock cannot be negative.")


def validate_price_range(price_range: PriceRangeDTO) -> None:
    low, high = price_range.min_price, price_range.max_price
    for bound in (low, high):
        if bound is not None and bound < Decimal("0"):
            raise BusinessValidationError("Price bounds cannot be negative.")
    if low is not None and high is not None and low > high:
        raise BusinessValidationError(
            "Minimum price cannot be greater than maximum price."
        )


def price_in_range(price: Optional[Decimal], price_range: PriceRangeDTO) -> bool:
    """Inclusive bound check; a product without price never matches."""
    if price is None:
        return False
    if price_range.min_price is not None and price < price_range.min_price:
        return False
    if price_range.max_price is not None and price > price_range.max_price:
        return False
    return True
