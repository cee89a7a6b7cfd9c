from typing import Any, Optional

from django.http import HttpRequest

from apps.auth.gate import AuthGate, Authenticated
from apps.api.utils import unauthorized_response
from apps.common import get_logger

logger = get_logger(__name__).bind(component="api", layer="validation")


def requires_authentication(view_class) -> bool:
    return bool(getattr(view_class, "auth_required", False))


def get_authenticated_user(request) -> Optional[Any]:
    """Return the user the gate attached to this request, if any."""
    return getattr(request, "authenticated_user", None)


def validate_request_context(
    request: HttpRequest, view_class, view_kwargs, gate: AuthGate
) -> Any:
    """
    Runs the auth gate for views that declare ``auth_required``.
    Returns a DRF Response when the request is rejected; otherwise None and
    attaches the resolved user to the request instance.
    """
    view_name = getattr(view_class, "__name__", "")
    request.authenticated_user = None
    if not requires_authentication(view_class):
        return None

    header = request.META.get("HTTP_AUTHORIZATION")
    result = gate.evaluate(header)
    if not isinstance(result, Authenticated):
        logger.info(
            "Protected view rejected request",
            view=view_name,
            method=getattr(request, "method", None),
            reason=result.reason.value,
        )
        return unauthorized_response()

    request.authenticated_user = result.user
    logger.debug(
        "Validated request user",
        view=view_name,
        method=getattr(request, "method", None),
        user_id=result.user.id,
    )
    return None
