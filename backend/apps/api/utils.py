from collections.abc import Mapping
from typing import Any, Dict, Optional

from django.conf import settings
from django.utils.functional import Promise
from django.utils.translation import gettext_lazy as _
from rest_framework import status
from rest_framework.renderers import JSONRenderer
from rest_framework.response import Response

DEFAULT_ERROR_STATUS = status.HTTP_400_BAD_REQUEST

ERROR_STATUS_MAP = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "PASSWORD_MISMATCH": status.HTTP_400_BAD_REQUEST,
    "UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "METHOD_NOT_ALLOWED": status.HTTP_405_METHOD_NOT_ALLOWED,
    "CONFLICT": status.HTTP_409_CONFLICT,
    "SERVER_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "SERVICE_UNAVAILABLE": status.HTTP_503_SERVICE_UNAVAILABLE,
}

# Validation failures never echo field-level detail back to the client.
GENERIC_VALIDATION_MESSAGE = _("Request data format is invalid")
AUTHENTICATION_REQUIRED_MESSAGE = _("Log in to use this feature")


def _normalize_details(details: Any) -> Any:
    if isinstance(details, Mapping):
        return dict(details)
    if isinstance(details, Exception):
        return {"type": details.__class__.__name__}
    return details


def error_response(
    code: str,
    message: str,
    details: Optional[Any] = None,
    http_status: Optional[int] = None,
    *,
    headers: Optional[Mapping[str, str]] = None,
) -> Response:
    """
    Return a consistently structured error response for API endpoints.

    Args:
        code: Machine-readable error identifier.
        message: Human-readable explanation of the error.
        details: Optional machine-readable context. Never internals.
        http_status: Explicit HTTP status code to override the default mapping.
        headers: Optional response headers to include alongside the payload.
    """

    if isinstance(message, Promise):
        message = str(message)
    if not isinstance(code, str):
        raise TypeError("error_response requires code to be a string")
    if not isinstance(message, str):
        raise TypeError("error_response requires message to be a string")

    code = code.strip()
    message = message.strip()

    if not code:
        raise ValueError("error_response requires a non-empty code")
    if not message:
        raise ValueError("error_response requires a non-empty message")

    normalized_code = code.upper()

    status_code = (
        int(http_status)
        if http_status is not None
        else ERROR_STATUS_MAP.get(normalized_code, DEFAULT_ERROR_STATUS)
    )

    if headers is not None and not isinstance(headers, Mapping):
        raise TypeError("error_response headers must be a mapping if provided")
    if not 100 <= status_code <= 599:
        raise ValueError("error_response status must be a valid HTTP status code")

    payload: Dict[str, Any] = {
        "error": {
            "code": normalized_code,
            "message": message,
            "status": status_code,
        }
    }
    if details is not None:
        payload["error"]["details"] = _normalize_details(details)

    headers_dict = (
        {str(key): str(value) for key, value in headers.items()} if headers else None
    )

    return Response(payload, status=status_code, headers=headers_dict)


def validation_error_response() -> Response:
    return error_response("VALIDATION_ERROR", GENERIC_VALIDATION_MESSAGE)


def unauthorized_response() -> Response:
    return error_response(
        "UNAUTHORIZED",
        AUTHENTICATION_REQUIRED_MESSAGE,
        headers={"WWW-Authenticate": settings.AUTH_HEADER_SCHEME},
    )


def render_outside_view(response: Response) -> Response:
    """Attach a JSON renderer so a DRF response can leave middleware directly."""
    response.accepted_renderer = JSONRenderer()
    response.accepted_media_type = "application/json"
    response.renderer_context = {}
    response.render()
    return response
