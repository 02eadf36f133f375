"""DRF exception handler producing the catalog's standard error body.

Every error response, whether raised by an orchestrator or by DRF itself
(malformed JSON, unsupported method), has the shape::

    {"timestamp": ..., "status": 404, "error": "Not Found",
     "message": "...", "path": "/api/productos/7"}
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.utils import timezone
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from modules.core.exceptions import (
    INTERNAL_ERROR_MESSAGE,
    CatalogError,
    ErrorKind,
)

logger = structlog.get_logger(__name__)

STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.COMMUNICATION: status.HTTP_502_BAD_GATEWAY,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

REASON_BY_STATUS: Dict[int, str] = {
    status.HTTP_400_BAD_REQUEST: "Bad Request",
    status.HTTP_404_NOT_FOUND: "Not Found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "Method Not Allowed",
    status.HTTP_415_UNSUPPORTED_MEDIA_TYPE: "Unsupported Media Type",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "Internal Server Error",
    status.HTTP_502_BAD_GATEWAY: "Bad Gateway",
}


def build_error_body(status_code: int, message: str, path: str) -> Dict[str, Any]:
    return {
        "timestamp": timezone.now().isoformat(),
        "status": status_code,
        "error": REASON_BY_STATUS.get(status_code, "Error"),
        "message": message,
        "path": path,
    }


def _flatten_detail(detail: Any) -> str:
    if isinstance(detail, dict):
        return "; ".join(f"{key}: {_flatten_detail(value)}" for key, value in detail.items())
    if isinstance(detail, list):
        return "; ".join(_flatten_detail(item) for item in detail)
    return str(detail)


def catalog_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    request = context.get("request")
    path = request.path if request is not None else ""

    if isinstance(exc, CatalogError):
        status_code = STATUS_BY_KIND[exc.kind]
        if not exc.client_facing:
            logger.warning(
                "api.error_response",
                status_code=status_code,
                kind=exc.kind.value,
                path=path,
            )
        return Response(build_error_body(status_code, exc.message, path), status=status_code)

    response = exception_handler(exc, context)
    if response is not None:
        data = response.data
        detail = data.get("detail", data) if isinstance(data, dict) else data
        response.data = build_error_body(response.status_code, _flatten_detail(detail), path)
        return response

    logger.exception("api.unhandled_exception", path=path, error_type=type(exc).__name__)
    return Response(
        build_error_body(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE, path),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
