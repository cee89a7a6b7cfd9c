from django.conf import settings
from rest_framework.exceptions import NotAuthenticated
from rest_framework.views import APIView

from apps.api.validation import get_authenticated_user


class ProtectedAPIView(APIView):
    """APIView whose handlers only run once the auth gate attached a user."""

    auth_required = True

    def get_authenticate_header(self, request):
        # Keeps NotAuthenticated a 401 even though no DRF authenticators are configured
        return settings.AUTH_HEADER_SCHEME

    def initial(self, request, *args, **kwargs):
        super().initial(request, *args, **kwargs)
        # Reached without the gate (e.g. middleware misconfigured): reject, never crash
        if get_authenticated_user(request) is None:
            raise NotAuthenticated()

    @property
    def current_user(self):
        return get_authenticated_user(self.request)
