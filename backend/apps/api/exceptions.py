from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple

from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import Http404
from django.utils.translation import gettext_lazy as _
from rest_framework import status
from rest_framework.exceptions import (
    AuthenticationFailed,
    MethodNotAllowed,
    NotAuthenticated,
    NotFound,
    ParseError,
    UnsupportedMediaType,
    ValidationError,
)
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from apps.api.utils import (
    AUTHENTICATION_REQUIRED_MESSAGE,
    GENERIC_VALIDATION_MESSAGE,
    error_response,
)
from apps.common import get_logger

logger = get_logger(__name__).bind(component="api", layer="exception")

STATUS_CODE_DEFAULTS: Dict[int, Tuple[str, str]] = {
    status.HTTP_400_BAD_REQUEST: ("VALIDATION_ERROR", GENERIC_VALIDATION_MESSAGE),
    status.HTTP_401_UNAUTHORIZED: ("UNAUTHORIZED", AUTHENTICATION_REQUIRED_MESSAGE),
    status.HTTP_403_FORBIDDEN: (
        "FORBIDDEN",
        _("You do not have permission to perform this action"),
    ),
    status.HTTP_404_NOT_FOUND: ("NOT_FOUND", _("Resource not found")),
    status.HTTP_405_METHOD_NOT_ALLOWED: ("METHOD_NOT_ALLOWED", _("Method not allowed")),
    status.HTTP_409_CONFLICT: ("CONFLICT", _("Resource conflict")),
    status.HTTP_500_INTERNAL_SERVER_ERROR: ("SERVER_ERROR", _("Something went wrong")),
}


class ApplicationError(Exception):
    """
    Domain-level application error meant to be raised from services or views.

    Args:
        code: Machine readable error code.
        message: Human readable explanation of the error.
        status_code: Optional explicit HTTP status. If omitted, code mapping is used.
        details: Optional structured details for clients.
        headers: Optional mapping of headers to include in the response.
    """

    def __init__(
        self,
        code: str,
        message: str,
        *,
        status_code: Optional[int] = None,
        details: Optional[Any] = None,
        headers: Optional[Mapping[str, Any]] = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details
        self.headers = headers

    def to_response(self) -> Response:
        return error_response(
            self.code,
            self.message,
            self.details,
            http_status=self.status_code,
            headers=self.headers,
        )


class ProductNotFoundError(ApplicationError):
    def __init__(self, product_id: int):
        super().__init__(
            "NOT_FOUND",
            _("Product not found"),
            details={"productId": str(product_id)},
        )
        self.product_id = product_id


def global_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """
    Central exception handler for DRF views returning structured JSON errors.
    """

    bound_logger = _bind_logger(context)

    if isinstance(exc, ApplicationError):
        bound_logger.info(
            "Handled application error",
            code=exc.code,
            status=exc.status_code,
        )
        return exc.to_response()

    if isinstance(exc, DjangoValidationError):
        exc = ValidationError(list(getattr(exc, "messages", [])))

    response = drf_exception_handler(exc, context)
    if response is not None:
        return _from_drf_exception(exc, response, bound_logger)

    bound_logger.exception("Unhandled exception bubbled to global handler")
    return error_response(
        "SERVER_ERROR",
        _("Something went wrong"),
        http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _bind_logger(context: Dict[str, Any]):
    log = logger
    view = context.get("view")
    request = context.get("request")
    if view:
        view_name = getattr(view, "__class__", type(view)).__name__
        log = log.bind(view=view_name)
    if request is not None:
        log = log.bind(
            method=getattr(request, "method", None),
            path=getattr(request, "path", None),
        )
    return log


def _from_drf_exception(exc: Exception, response: Response, bound_logger) -> Response:
    status_code = response.status_code
    code, message, details = _normalize(exc, response.data, status_code)
    headers = dict(response.headers) if getattr(response, "headers", None) else None

    if status_code >= 500:
        bound_logger.error("Converted server error", code=code, status=status_code)
    else:
        bound_logger.info("Converted API exception", code=code, status=status_code)

    return error_response(code, message, details, http_status=status_code, headers=headers)


def _normalize(
    exc: Exception, payload: Any, status_code: int
) -> Tuple[str, str, Optional[Any]]:
    if isinstance(exc, (ValidationError, ParseError, UnsupportedMediaType)):
        # Field errors stay server side
        return "VALIDATION_ERROR", GENERIC_VALIDATION_MESSAGE, None
    if isinstance(exc, (NotAuthenticated, AuthenticationFailed)):
        return "UNAUTHORIZED", AUTHENTICATION_REQUIRED_MESSAGE, None
    if isinstance(exc, (NotFound, Http404)):
        return "NOT_FOUND", _("Resource not found"), None
    if isinstance(exc, MethodNotAllowed):
        return "METHOD_NOT_ALLOWED", _("Method not allowed"), None

    code, default_message = STATUS_CODE_DEFAULTS.get(
        status_code,
        (
            "SERVER_ERROR" if status_code >= 500 else "UNKNOWN_ERROR",
            _("Something went wrong") if status_code >= 500 else _("Request failed"),
        ),
    )
    return code, _extract_message(payload, default_message, status_code), None


def _extract_message(payload: Any, fallback: str, status_code: int) -> str:
    if status_code >= 500:
        return STATUS_CODE_DEFAULTS[status.HTTP_500_INTERNAL_SERVER_ERROR][1]
    if isinstance(payload, dict):
        detail = payload.get("detail")
        if isinstance(detail, str):
            return detail
    return fallback


__all__ = ["ApplicationError", "ProductNotFoundError", "global_exception_handler"]
