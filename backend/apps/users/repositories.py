from __future__ import annotations

from typing import List, Optional

from django.contrib.auth.hashers import check_password, make_password
from django.db import IntegrityError, transaction
from django.db.models import Q

from apps.common import get_logger
from apps.common.repository import GenericRepository
from .models import User

logger = get_logger(__name__).bind(component="users", layer="repository")


class UserConflictError(Exception):
    """Raised when an email or nickname is already registered."""


class UserRepository(GenericRepository[User]):
    ordering = ("id",)

    def __init__(self):
        super().__init__(User)

    def find_by_identity(self, user_id) -> Optional[User]:
        # Only integer ids or their decimal string form identify a user
        if (
            isinstance(user_id, str)
            and user_id.isascii()
            and user_id.isdigit()
            and len(user_id) <= 19
        ):
            user_id = int(user_id)
        return self.get_by_id(user_id)

    def find_by_email_or_nickname(self, email: str, nickname: str) -> List[User]:
        return list(self.list().filter(Q(email=email) | Q(nickname=nickname)))

    def create(self, *, email: str, nickname: str, password: str) -> User:
        try:
            with transaction.atomic():
                return super().create(
                    email=email, nickname=nickname, password=make_password(password)
                )
        except IntegrityError as exc:
            logger.info("User insert hit unique constraint", email=email, nickname=nickname)
            raise UserConflictError("Email or nickname already registered") from exc

    def verify_credentials(self, email: str, secret: str) -> Optional[User]:
        user = self.get(email=email)
        if user is None:
            return None
        if not check_password(secret, user.password):
            return None
        return user
