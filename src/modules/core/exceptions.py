"""Catalog domain exceptions.

Raised by the Service Layer (orchestrators) when a business rule is
violated or the data service reports a failure.  Every exception carries
an ``ErrorKind`` so the API layer can translate it into an HTTP response
without knowing which entity raised it.

- ``BusinessValidationError``: client input is invalid (400).
- ``ProductNotFound`` / ``CategoryNotFound`` / ``InventoryNotFound``:
  the entity is absent in the data service (404).
- ``CommunicationError``: the data service is unreachable or answered
  with an unclassified failure (502).
- ``InternalError``: unexpected failure, last resort (500).
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    COMMUNICATION = "communication"
    INTERNAL = "internal"


#: Kinds the caller can fix by correcting the request.
CLIENT_FACING_KINDS = frozenset({ErrorKind.VALIDATION, ErrorKind.NOT_FOUND})


class CatalogError(Exception):
    """Base class for every error raised by the orchestrators."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def client_facing(self) -> bool:
        return self.kind in CLIENT_FACING_KINDS


class BusinessValidationError(CatalogError):
    """The request breaks a business rule; no remote call was made."""

    kind = ErrorKind.VALIDATION


class EntityNotFound(CatalogError):
    kind = ErrorKind.NOT_FOUND


class ProductNotFound(EntityNotFound):
    """The requested product does not exist in the data service."""


class CategoryNotFound(EntityNotFound):
    """The requested category does not exist (or has no products)."""


class InventoryNotFound(EntityNotFound):
    """No inventory record exists for the referenced product."""


class CommunicationError(CatalogError):
    """The data service failed to answer with a usable response."""

    kind = ErrorKind.COMMUNICATION


class InternalError(CatalogError):
    """Unexpected failure inside the business service."""

    kind = ErrorKind.INTERNAL


COMMUNICATION_ERROR_MESSAGE = "Error communicating with the data service."
INTERNAL_ERROR_MESSAGE = "Unexpected error in the business service."
