"""
Stateless bearer tokens.

A token is a signed claim set ``{"userId": <id>, "iat": <epoch seconds>}``
(plus ``exp`` when a lifetime is configured). Nothing is stored server side:
validity is the signature check alone, so ``verify`` is a pure function of
the token and the process-wide signing key.
"""
from __future__ import annotations

import time
from typing import Any, Dict, Optional

from django.conf import settings
from rest_framework_simplejwt.backends import TokenBackend
from rest_framework_simplejwt.exceptions import TokenBackendError

from apps.common import get_logger

logger = get_logger(__name__).bind(component="auth", layer="tokens")

USER_ID_CLAIM = "userId"


class InvalidToken(Exception):
    """Raised when a bearer token cannot be decoded into a user identity."""


class TokenService:
    def __init__(
        self,
        signing_key: str,
        algorithm: str = "HS256",
        lifetime_seconds: Optional[int] = None,
        clock=time.time,
    ):
        if not signing_key:
            raise ValueError("TokenService requires a non-empty signing key")
        self.algorithm = algorithm
        self.lifetime_seconds = lifetime_seconds
        self._clock = clock
        self._backend = TokenBackend(algorithm=algorithm, signing_key=signing_key)
        self.logger = logger.bind(service="TokenService")

    def _claims(self, user_id: Any) -> Dict[str, Any]:
        issued_at = int(self._clock())
        claims: Dict[str, Any] = {USER_ID_CLAIM: user_id, "iat": issued_at}
        if self.lifetime_seconds:
            claims["exp"] = issued_at + self.lifetime_seconds
        return claims

    def issue(self, user_id: Any) -> str:
        token = self._backend.encode(self._claims(user_id))
        self.logger.debug("Issued token", user_id=user_id)
        return token

    def verify(self, token: Optional[str]) -> Any:
        """Return the ``userId`` claim of a valid token or raise ``InvalidToken``."""
        if not token or not isinstance(token, str):
            raise InvalidToken("Token is missing")
        try:
            payload = self._backend.decode(token, verify=True)
        except TokenBackendError as exc:
            self.logger.debug("Token rejected by backend", error=str(exc))
            raise InvalidToken(str(exc)) from exc
        user_id = payload.get(USER_ID_CLAIM)
        if user_id is None:
            raise InvalidToken("Token has no userId claim")
        return user_id


def build_token_service() -> TokenService:
    return TokenService(
        signing_key=settings.TOKEN_SIGNING_KEY,
        algorithm=settings.TOKEN_ALGORITHM,
        lifetime_seconds=settings.TOKEN_LIFETIME_SECONDS,
    )
