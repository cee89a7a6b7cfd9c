from django.utils.deprecation import MiddlewareMixin

from apps.api.utils import render_outside_view
from apps.api.validation import validate_request_context
from apps.auth.container import build_auth_gate
from apps.common import get_logger

logger = get_logger(__name__).bind(component='api', layer='middleware')


class AuthGateMiddleware(MiddlewareMixin):
    """
    Runs the bearer-token gate before protected views are dispatched, so a
    view only executes once its caller has been resolved to a user.
    """

    def __init__(self, get_response):
        super().__init__(get_response)
        self.gate = build_auth_gate()

    def process_view(self, request, view_func, view_args, view_kwargs):
        view_class = getattr(view_func, 'view_class', None)
        if not view_class:
            return None
        view_name = getattr(view_class, '__name__', str(view_class))
        logger.debug('Running auth gate', view=view_name, method=getattr(request, 'method', None))
        response = validate_request_context(request, view_class, view_kwargs, self.gate)
        if response is None:
            return None
        logger.info(
            'Request blocked by auth gate',
            view=view_name,
            method=getattr(request, 'method', None),
            status=getattr(response, 'status_code', None),
        )
        return render_outside_view(response)
