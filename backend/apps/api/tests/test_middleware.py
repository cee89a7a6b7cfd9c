import json
import unittest
from types import SimpleNamespace

from django.http import HttpResponse
from rest_framework.test import APIRequestFactory

from apps.api.middleware import AuthGateMiddleware
from apps.api.validation import get_authenticated_user, validate_request_context
from apps.auth.gate import Authenticated, Rejected, RejectionReason


class StubGate:
    def __init__(self, result):
        self.result = result
        self.headers = []

    def evaluate(self, header):
        self.headers.append(header)
        return self.result


class ProtectedStub:
    auth_required = True


class PublicStub:
    auth_required = False


def _view_func(view_class):
    def view(request, *args, **kwargs):
        return HttpResponse("ok")

    view.view_class = view_class
    return view


class ValidateRequestContextTests(unittest.TestCase):
    def setUp(self):
        self.factory = APIRequestFactory()
        self.user = SimpleNamespace(id=7, email="a@example.com", nickname="alice")

    def test_public_view_skips_gate(self):
        gate = StubGate(Rejected(RejectionReason.MISSING_HEADER))
        request = self.factory.post("/api/users/")
        self.assertIsNone(validate_request_context(request, PublicStub, {}, gate))
        self.assertEqual(gate.headers, [])
        self.assertIsNone(get_authenticated_user(request))

    def test_authenticated_request_gets_user_attached(self):
        gate = StubGate(Authenticated(user=self.user, token="tok"))
        request = self.factory.get("/api/users/me/", HTTP_AUTHORIZATION="Bearer tok")
        self.assertIsNone(validate_request_context(request, ProtectedStub, {}, gate))
        self.assertEqual(gate.headers, ["Bearer tok"])
        self.assertIs(get_authenticated_user(request), self.user)

    def test_rejected_request_returns_unauthorized(self):
        gate = StubGate(Rejected(RejectionReason.INVALID_TOKEN))
        request = self.factory.get("/api/users/me/", HTTP_AUTHORIZATION="Bearer bad")
        response = validate_request_context(request, ProtectedStub, {}, gate)
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.data["error"]["code"], "UNAUTHORIZED")
        self.assertIsNone(get_authenticated_user(request))


class AuthGateMiddlewareTests(unittest.TestCase):
    def setUp(self):
        self.factory = APIRequestFactory()
        self.middleware = AuthGateMiddleware(lambda request: HttpResponse("ok"))

    def test_plain_function_views_pass_through(self):
        def plain(request):
            return HttpResponse("ok")

        request = self.factory.get("/health/live")
        self.assertIsNone(self.middleware.process_view(request, plain, (), {}))

    def test_rejection_is_rendered_as_json(self):
        self.middleware.gate = StubGate(Rejected(RejectionReason.MALFORMED_HEADER))
        request = self.factory.get("/api/products/cart/", HTTP_AUTHORIZATION="Bearer")
        response = self.middleware.process_view(request, _view_func(ProtectedStub), (), {})
        self.assertEqual(response.status_code, 401)
        payload = json.loads(response.content)
        self.assertEqual(payload["error"]["code"], "UNAUTHORIZED")
        self.assertEqual(payload["error"]["status"], 401)

    def test_authenticated_request_continues(self):
        user = SimpleNamespace(id=3)
        self.middleware.gate = StubGate(Authenticated(user=user, token="tok"))
        request = self.factory.get("/api/products/cart/", HTTP_AUTHORIZATION="Bearer tok")
        self.assertIsNone(
            self.middleware.process_view(request, _view_func(ProtectedStub), (), {})
        )
        self.assertIs(request.authenticated_user, user)
