from __future__ import annotations

from typing import List, Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from apps.users.models import User


class CredentialStoreProtocol(Protocol):
    def find_by_identity(self, user_id) -> Optional["User"]: ...

    def find_by_email_or_nickname(self, email: str, nickname: str) -> List["User"]: ...

    def create(self, *, email: str, nickname: str, password: str) -> "User": ...

    def verify_credentials(self, email: str, secret: str) -> Optional["User"]: ...
