from __future__ import annotations

from django.conf import settings

from apps.users.repositories import UserRepository
from .gate import AuthGate
from .services import LoginService, RegistrationService
from .tokens import build_token_service


def build_registration_service() -> RegistrationService:
    return RegistrationService(users=UserRepository())


def build_login_service() -> LoginService:
    return LoginService(users=UserRepository(), tokens=build_token_service())


def build_auth_gate() -> AuthGate:
    return AuthGate(
        tokens=build_token_service(),
        users=UserRepository(),
        scheme=settings.AUTH_HEADER_SCHEME,
    )
