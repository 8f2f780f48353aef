import time
from typing import Any, Callable, Dict

import structlog
from django.conf import settings
from django.core.cache import cache
from django.db import connections
from django.http import HttpRequest, JsonResponse
from django.utils import timezone
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.core.permissions import get_role

logger = structlog.get_logger()


def _ping_database() -> None:
    conn = connections["default"]
    conn.ensure_connection()
    with conn.cursor() as cursor:
        cursor.execute("SELECT 1")
        cursor.fetchone()


def _ping_cache() -> None:
    cache.set("_health_check", "ok", 10)
    if cache.get("_health_check") != "ok":
        raise ConnectionError("Cache read failed")


def _probe(name: str, ping: Callable[[], None]) -> Dict[str, Any]:
    start = time.monotonic()
    try:
        ping()
    except Exception:
        logger.error("health_check.probe_failed", service=name, exc_info=True)
        return {"status": "down"}
    return {
        "status": "up",
        "response_time_ms": round((time.monotonic() - start) * 1000, 2),
    }


def health_check(request: HttpRequest) -> JsonResponse:
    """Liveness of the database and cache; 503 when either is down.

    The WhatsApp gateway is reported by configuration only; the probe never
    calls Fonnte.
    """
    services: Dict[str, Dict[str, Any]] = {
        "database": _probe("database", _ping_database),
        "cache": _probe("cache", _ping_cache),
        "whatsapp": {
            "status": "configured" if settings.FONNTE_TOKEN else "not_configured",
        },
    }
    healthy = all(services[name]["status"] == "up" for name in ("database", "cache"))
    status = "healthy" if healthy else "unhealthy"
    logger.info("health_check.completed", status=status)

    return JsonResponse(
        {
            "status": status,
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=200 if healthy else 503,
    )


class MeView(APIView):
    """Who is logged in at the register.

    The POS client uses ``role`` to decide which screens to show:
    ``owner`` sees the back office, ``cashier`` only the register.
    """

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        user = request.user
        return Response(
            {
                "id": user.pk,
                "username": user.get_username(),
                "name": user.get_full_name() or user.get_username(),
                "role": get_role(user),
            }
        )
