"""Translation of data service failures into catalog domain errors.

Two entry points are used by every orchestrator:

- ``remote_call``: context manager around a single gateway call.  A
  ``RemoteFailure`` raised inside the block is translated into the
  matching ``CatalogError`` and re-raised, chained to the original.
- ``normalize_errors``: decorator applied once to each public
  orchestrator operation.  ``CatalogError`` subclasses pass through
  untouched; anything else is logged and re-raised as ``InternalError``.

Client-facing errors (validation, not-found) are not logged as server
errors.  Communication and internal errors are logged with the operation
name, the identifying parameters and the remote failure detail.
"""

from __future__ import annotations

import functools
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional, TypeVar

import structlog

from modules.core.exceptions import (
    COMMUNICATION_ERROR_MESSAGE,
    INTERNAL_ERROR_MESSAGE,
    BusinessValidationError,
    CatalogError,
    CommunicationError,
    EntityNotFound,
    InternalError,
)
from modules.gateway.exceptions import RemoteFailure, RemoteFailureKind

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def translate_remote_failure(
    failure: RemoteFailure,
    operation: str,
    *,
    not_found: Optional[EntityNotFound] = None,
    conflict: Optional[str] = None,
    **context: Any,
) -> CatalogError:
    """Return the domain error matching a classified remote failure.

    ``not_found`` is the entity-specific error to use for a remote 404;
    ``conflict`` is the validation message to use for a remote 409.  A
    failure kind with no mapping for this operation becomes a
    ``CommunicationError``.
    """
    if failure.kind is RemoteFailureKind.NOT_FOUND and not_found is not None:
        logger.info(f"{operation}.not_found", **context)
        return not_found

    if failure.kind is RemoteFailureKind.CONFLICT and conflict is not None:
        logger.info(f"{operation}.conflict", **context)
        return BusinessValidationError(conflict)

    logger.error(
        f"{operation}.communication_error",
        **context,
        **failure.context(),
    )
    return CommunicationError(COMMUNICATION_ERROR_MESSAGE)


@contextmanager
def remote_call(
    operation: str,
    *,
    not_found: Optional[EntityNotFound] = None,
    conflict: Optional[str] = None,
    **context: Any,
) -> Iterator[None]:
    """Translate a ``RemoteFailure`` raised inside the block.

    Usage::

        with remote_call("product.get", not_found=ProductNotFound(msg), product_id=id):
            return self._gateway.get_product(id)
    """
    try:
        yield
    except RemoteFailure as exc:
        raise translate_remote_failure(
            exc,
            operation,
            not_found=not_found,
            conflict=conflict,
            **context,
        ) from exc


def normalize_errors(func: F) -> F:
    """Map any non-domain exception escaping ``func`` to ``InternalError``."""

    operation = func.__qualname__

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except CatalogError:
            raise
        except Exception as exc:
            logger.exception(
                "orchestrator.internal_error",
                operation=operation,
                arguments=repr(args[1:]),
                keyword_arguments=repr(kwargs),
                error_type=type(exc).__name__,
            )
            raise InternalError(INTERNAL_ERROR_MESSAGE) from exc

    return wrapper  # type: ignore[return-value]
