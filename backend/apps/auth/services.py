from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from django.utils.translation import gettext_lazy as _

from apps.common import get_logger
from apps.users.protocols import CredentialStoreProtocol
from apps.users.repositories import UserConflictError
from .tokens import TokenService

logger = get_logger(__name__).bind(component="auth", layer="service")

ServiceError = Tuple[str, str, Optional[Dict[str, Any]]]


class RegistrationService:
    def __init__(self, users: CredentialStoreProtocol):
        self.users = users
        self.logger = logger.bind(service="RegistrationService")

    def _check_uniqueness(self, email: str, nickname: str) -> Optional[ServiceError]:
        # Either field colliding blocks the registration
        existing = self.users.find_by_email_or_nickname(email, nickname)
        if existing:
            self.logger.info(
                "Registration rejected: email or nickname already exists",
                email=email,
                nickname=nickname,
                matches=len(existing),
            )
            return ("CONFLICT", _("Email or nickname is already registered"), None)
        return None

    def register(self, data: Dict[str, Any]) -> Optional[ServiceError]:
        """Create a user; returns ``None`` on success or an error tuple."""
        email = data["email"].strip()
        nickname = data["nickname"].strip()
        self.logger.debug("Received registration request", email=email, nickname=nickname)
        if data["password"] != data["confirmPassword"]:
            self.logger.info("Registration rejected: password confirmation mismatch", email=email)
            return ("PASSWORD_MISMATCH", _("Password does not match the confirmation"), None)
        conflict = self._check_uniqueness(email, nickname)
        if conflict:
            return conflict
        try:
            user = self.users.create(email=email, nickname=nickname, password=data["password"])
        except UserConflictError:
            # A concurrent registration won the unique constraint after our check
            self.logger.info("Registration lost race on unique fields", email=email, nickname=nickname)
            return ("CONFLICT", _("Email or nickname is already registered"), None)
        self.logger.info("User registered successfully", user_id=user.id, nickname=user.nickname)
        return None


class LoginService:
    def __init__(self, users: CredentialStoreProtocol, tokens: TokenService):
        self.users = users
        self.tokens = tokens
        self.logger = logger.bind(service="LoginService")

    def login(self, email: str, password: str) -> Tuple[Optional[str], Optional[ServiceError]]:
        user = self.users.verify_credentials(email.strip(), password)
        if user is None:
            self.logger.info("Login rejected: credentials did not match", email=email)
            return None, ("UNAUTHORIZED", _("Email or password is incorrect"), None)
        token = self.tokens.issue(user.id)
        self.logger.info("User logged in", user_id=user.id)
        return token, None
