import time
import uuid
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

from modules.gateway.client import REQUEST_ID_HEADER, correlation_id_var

logger = structlog.get_logger()


class CorrelationIdMiddleware:
    """Tie every log line and data service call to the inbound request.

    The id comes from the ``X-Request-ID`` header or is a fresh UUID4.
    It is bound into structlog's context, set on ``correlation_id_var``
    for the duration of the request (the gateway forwards it downstream)
    and echoed on the response.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            correlation_id=cid,
            method=request.method,
            path=request.path,
        )
        logger.info("request_started")

        started = time.monotonic()
        token = correlation_id_var.set(cid)
        try:
            response = self.get_response(request)
        finally:
            correlation_id_var.reset(token)

        logger.info(
            "request_finished",
            status_code=response.status_code,
            duration_ms=round((time.monotonic() - started) * 1000, 2),
        )
        response[REQUEST_ID_HEADER] = cid
        return response
