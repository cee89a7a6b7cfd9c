"""
Bearer-token gate run before protected views.

``AuthGate.evaluate`` never raises: it turns an ``Authorization`` header into
either ``Authenticated`` or ``Rejected`` so callers branch on a value instead
of on exceptions.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Optional, Union

from apps.common import get_logger
from apps.users.protocols import CredentialStoreProtocol
from .tokens import InvalidToken, TokenService

logger = get_logger(__name__).bind(component="auth", layer="gate")


class RejectionReason(str, enum.Enum):
    MISSING_HEADER = "missing_header"
    MALFORMED_HEADER = "malformed_header"
    BAD_SCHEME = "bad_scheme"
    INVALID_TOKEN = "invalid_token"
    USER_NOT_FOUND = "user_not_found"


@dataclass(frozen=True)
class Authenticated:
    user: Any
    token: str

    @property
    def is_authenticated(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    reason: RejectionReason

    @property
    def is_authenticated(self) -> bool:
        return False


AuthResult = Union[Authenticated, Rejected]


def parse_authorization_header(header: Optional[str]):
    """Split ``"<scheme> <credential>"``; returns ``None`` when the shape is wrong."""
    if not header:
        return None
    scheme, sep, credential = header.partition(" ")
    if not sep or not scheme or not credential:
        return None
    return scheme, credential


class AuthGate:
    def __init__(
        self,
        tokens: TokenService,
        users: CredentialStoreProtocol,
        scheme: str = "Bearer",
    ):
        self.tokens = tokens
        self.users = users
        self.scheme = scheme
        self.logger = logger.bind(service="AuthGate")

    def _reject(self, reason: RejectionReason, **context) -> Rejected:
        self.logger.warning("Request rejected by auth gate", reason=reason.value, **context)
        return Rejected(reason)

    def evaluate(self, header: Optional[str]) -> AuthResult:
        if header is None or not header.strip():
            return self._reject(RejectionReason.MISSING_HEADER)
        parts = parse_authorization_header(header)
        if parts is None:
            return self._reject(RejectionReason.MALFORMED_HEADER)
        scheme, credential = parts
        if scheme != self.scheme:
            return self._reject(RejectionReason.BAD_SCHEME, scheme=scheme)
        try:
            user_id = self.tokens.verify(credential)
        except InvalidToken as exc:
            return self._reject(RejectionReason.INVALID_TOKEN, error=str(exc))
        user = self.users.find_by_identity(user_id)
        if user is None:
            return self._reject(RejectionReason.USER_NOT_FOUND, user_id=user_id)
        self.logger.debug("Request authenticated", user_id=user_id)
        return Authenticated(user=user, token=credential)
