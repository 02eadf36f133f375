"""Shared building blocks for the catalog DTOs.

The data service speaks camelCase Spanish JSON (``nombre``, ``precio``,
``categoriaNombre``...).  DTOs expose English attribute names and declare
the wire names as pydantic aliases; both are accepted on input.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any, Dict, Type, TypeVar

from pydantic import BaseModel, ConfigDict, PlainSerializer, ValidationError

from modules.core.exceptions import BusinessValidationError

M = TypeVar("M", bound=BaseModel)

# Decimals travel as JSON numbers, not strings.
WireDecimal = Annotated[
    Decimal,
    PlainSerializer(float, return_type=float, when_used="json"),
]


class WireModel(BaseModel):
    """Immutable DTO that (de)serializes using the data service field names."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_wire(self) -> Dict[str, Any]:
        """JSON-ready dict with wire names; ``None`` fields are omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def parse_request(model: Type[M], data: Any) -> M:
    """Build a DTO from request data, rejecting malformed input.

    Type errors (``"precio": "abc"``) become a ``BusinessValidationError``
    naming the offending field, so the API answers 400 like any other
    business rule violation.
    """
    if not isinstance(data, dict):
        raise BusinessValidationError("Request body must be a JSON object.")
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        error = exc.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or "body"
        raise BusinessValidationError(f"Invalid value for '{field}': {error['msg']}.") from exc
