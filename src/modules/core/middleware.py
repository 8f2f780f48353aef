import time
import uuid
from contextvars import ContextVar
from typing import Callable

import structlog
from django.conf import settings
from django.http import HttpRequest, HttpResponse

correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"


class CorrelationIdMiddleware:
    """Tag every request with a correlation ID and log its lifecycle.

    The ID comes from the ``X-Request-ID`` header when the POS client sends
    one, otherwise a UUID4 is generated.  It is bound into structlog's
    context vars so every log line of the request carries it, and echoed
    back on the response.  Static and media requests are not logged.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response
        self._quiet_prefixes = tuple(
            "/" + prefix.lstrip("/")
            for prefix in (settings.STATIC_URL, settings.MEDIA_URL)
            if prefix
        )

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = request.META.get("HTTP_X_REQUEST_ID") or str(uuid.uuid4())
        correlation_id_var.set(cid)

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=cid)

        quiet = request.path.startswith(self._quiet_prefixes)
        if not quiet:
            logger.info(
                "request_started",
                method=request.method,
                path=request.get_full_path(),
            )

        start = time.monotonic()
        response = self.get_response(request)

        if not quiet:
            logger.info(
                "request_finished",
                method=request.method,
                path=request.get_full_path(),
                status_code=response.status_code,
                duration_ms=round((time.monotonic() - start) * 1000, 2),
            )

        response[REQUEST_ID_HEADER] = cid
        return response
