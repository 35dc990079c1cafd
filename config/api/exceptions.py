from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from rest_framework.response import Response

logger = logging.getLogger(__name__)

JSONValue: TypeAlias = (
    None
    | bool
    | int
    | float
    | str
    | list["JSONValue"]
    | dict[str, "JSONValue"]
)


def _to_json_value(value: object) -> JSONValue:
    if value is None or isinstance(value, str | int | float | bool):
        return value
    if isinstance(value, Mapping):
        return {str(k): _to_json_value(v) for k, v in value.items()}
    if isinstance(value, list | tuple):
        return [_to_json_value(v) for v in value]
    return str(value)


def _first_message(detail: JSONValue) -> str | None:
    """Pick a human readable message out of a DRF error payload."""

    if isinstance(detail, str):
        return detail
    if isinstance(detail, list) and detail:
        return _first_message(detail[0])
    if isinstance(detail, dict):
        maybe = detail.get("detail")
        if isinstance(maybe, str):
            return maybe
        for key in ("non_field_errors", "location"):
            if key in detail:
                return _first_message(detail[key])
    return None


def custom_exception_handler(
    exc: Exception,
    context: dict[str, Any],
) -> Response:
    # Lazy imports: safe even if settings aren't configured at import time.
    from rest_framework import status
    from rest_framework.exceptions import Throttled
    from rest_framework.response import Response
    from rest_framework.views import exception_handler as drf_exception_handler

    response = drf_exception_handler(exc, context)

    if response is None:
        logger.exception(
            "api.unhandled_error error_type=%s", exc.__class__.__name__
        )
        return Response(
            {
                "status": 1,
                "message": "Internal server error",
                "data": None,
                "errors": None,
            },
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, Throttled):
        detail = _to_json_value(response.data)
        errors: dict[str, JSONValue]
        if isinstance(detail, dict):
            errors = {**detail}
        else:
            errors = {"detail": detail}

        wait = getattr(exc, "wait", None)
        if wait is not None:
            errors["wait"] = wait

        response.data = {
            "status": 1,
            "message": "Too Many Requests",
            "data": None,
            "errors": errors,
        }
        return response

    detail = _to_json_value(response.data)
    message = _first_message(detail) or "Request failed"
    if response.status_code >= 500:
        logger.warning(
            "api.upstream_error status_code=%s error_type=%s message=%s",
            response.status_code,
            exc.__class__.__name__,
            message,
        )

    response.data = {
        "status": 1,
        "message": message,
        "data": None,
        "errors": detail,
    }
    return response
