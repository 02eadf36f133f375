import time
from typing import Any, Dict

import structlog
from django.http import HttpRequest, JsonResponse
from django.utils import timezone

from modules.gateway.client import get_gateway
from modules.gateway.exceptions import RemoteFailure

logger = structlog.get_logger()


def health_check(request: HttpRequest) -> JsonResponse:
    services: Dict[str, Dict[str, Any]] = {}
    overall_healthy = True

    # Check data service
    start = time.monotonic()
    try:
        get_gateway().ping()
        services["data_service"] = {
            "status": "up",
            "response_time_ms": round((time.monotonic() - start) * 1000, 2),
        }
    except RemoteFailure as exc:
        services["data_service"] = {"status": "down"}
        overall_healthy = False
        logger.error("health_check_data_service_failure", **exc.context())

    status_code = 200 if overall_healthy else 503

    logger.info(
        "health_check_completed", status="healthy" if overall_healthy else "unhealthy"
    )

    return JsonResponse(
        {
            "status": "healthy" if overall_healthy else "unhealthy",
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=status_code,
    )
