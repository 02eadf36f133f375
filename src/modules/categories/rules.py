"""Category business rules.

- RN-CAT-001: name is required, never blank, at most 100 chars.
- RN-CAT-002: description at most 500 chars.
- RN-CAT-003: unique name; enforced by the data service and surfaced as
  a conflict, see ``CategoryService``.
"""

from __future__ import annotations

from typing import Optional

from modules.categories.dtos import CategoryDTO
from modules.core.exceptions import BusinessValidationError

NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500


def validate_category(dto: Optional[CategoryDTO]) -> None:
    if dto is None or dto.name is None or not dto.name.strip():
        raise BusinessValidationError("Category name is required.")
    if len(dto.name) > NAME_MAX_LENGTH:
        raise BusinessValidationError(
            f"Category name cannot exceed {NAME_MAX_LENGTH} characters."
        )
    if dto.description is not None and len(dto.description) > DESCRIPTION_MAX_LENGTH:
        raise BusinessValidationError(
            f"Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters."
        )
