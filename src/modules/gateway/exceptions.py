"""Classified failures raised by the data service gateway.

The gateway never leaks transport exceptions (``requests`` errors, HTTP
status codes) to the orchestrators.  Every failure is a single
``RemoteFailure`` tagged with a ``RemoteFailureKind``; the orchestrators
branch on the tag, not on an exception hierarchy.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class RemoteFailureKind(str, Enum):
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    OTHER = "other"


def classify_status(status_code: Optional[int]) -> RemoteFailureKind:
    """Map an HTTP status code onto the three-way remote classification."""
    if status_code == 404:
        return RemoteFailureKind.NOT_FOUND
    if status_code == 409:
        return RemoteFailureKind.CONFLICT
    return RemoteFailureKind.OTHER


class RemoteFailure(Exception):
    """A data service call did not produce a usable 2xx response."""

    def __init__(
        self,
        kind: RemoteFailureKind,
        operation: str,
        *,
        method: str = "",
        url: str = "",
        status_code: Optional[int] = None,
        detail: str = "",
    ) -> None:
        self.kind = kind
        self.operation = operation
        self.method = method
        self.url = url
        self.status_code = status_code
        self.detail = detail
        super().__init__(
            f"{operation} failed ({kind.value}, status={status_code}): {detail}"
        )

    def context(self) -> Dict[str, Any]:
        """Structured fields for log lines."""
        return {
            "remote_operation": self.operation,
            "remote_kind": self.kind.value,
            "http_method": self.method,
            "url": self.url,
            "status_code": self.status_code,
            "remote_detail": self.detail,
        }
