"""Standardised error payloads for the API.

Every error raised through DRF (validation, authentication, permission,
throttling, 404) is rendered as::

    {
        "type": "client_error",
        "errors": [{"code": "required", "detail": "...", "attr": "name"}]
    }

Domain exceptions are translated by the views themselves and keep the
plain ``{"detail": ...}`` body.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from rest_framework.exceptions import ErrorDetail
from rest_framework.views import exception_handler

logger = structlog.get_logger(__name__)


def api_exception_handler(exc: Exception, context: Dict[str, Any]):
    response = exception_handler(exc, context)
    if response is None:
        return None

    error_type = "server_error" if response.status_code >= 500 else "client_error"
    response.data = {
        "type": error_type,
        "errors": _flatten(response.data),
    }

    view = context.get("view")
    logger.warning(
        "api.error",
        status_code=response.status_code,
        view=view.__class__.__name__ if view else None,
        error_type=error_type,
    )
    return response


def _flatten(data: Any, attr: Optional[str] = None) -> List[Dict[str, Any]]:
    """Turn DRF's nested error structure into a flat list."""
    if isinstance(data, list):
        errors: List[Dict[str, Any]] = []
        for index, item in enumerate(data):
            if isinstance(item, (dict, list)):
                child = f"{attr}.{index}" if attr else str(index)
                errors.extend(_flatten(item, child))
            else:
                errors.extend(_flatten(item, attr))
        return errors

    if isinstance(data, dict):
        errors = []
        for key, value in data.items():
            if key == "detail" and attr is None and not isinstance(value, (dict, list)):
                errors.extend(_flatten(value, None))
                continue
            if key == "non_field_errors":
                child = attr
            else:
                child = f"{attr}.{key}" if attr else str(key)
            errors.extend(_flatten(value, child))
        return errors

    code = data.code if isinstance(data, ErrorDetail) else "error"
    return [{"code": code, "detail": str(data), "attr": attr}]
