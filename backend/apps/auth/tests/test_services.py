import unittest
from types import SimpleNamespace

from apps.auth.services import LoginService, RegistrationService
from apps.auth.tokens import TokenService
from apps.users.repositories import UserConflictError

SIGNING_KEY = "service-test-signing-key-0123456789abcdef"


class FakeUserRepository:
    """In-memory credential store; passwords kept in plain text."""

    def __init__(self):
        self.users = []
        self.raise_conflict_on_create = False

    def find_by_identity(self, user_id):
        return next((u for u in self.users if u.id == user_id), None)

    def find_by_email_or_nickname(self, email, nickname):
        return [u for u in self.users if u.email == email or u.nickname == nickname]

    def create(self, *, email, nickname, password):
        if self.raise_conflict_on_create:
            raise UserConflictError("duplicate")
        user = SimpleNamespace(
            id=len(self.users) + 1, email=email, nickname=nickname, password=password
        )
        self.users.append(user)
        return user

    def verify_credentials(self, email, secret):
        return next(
            (u for u in self.users if u.email == email and u.password == secret), None
        )


def _payload(**overrides):
    data = {
        "email": "alice@example.com",
        "nickname": "alice",
        "password": "s3cret-pass",
        "confirmPassword": "s3cret-pass",
    }
    data.update(overrides)
    return data


class RegistrationServiceTests(unittest.TestCase):
    def setUp(self):
        self.repo = FakeUserRepository()
        self.service = RegistrationService(self.repo)

    def test_register_creates_user(self):
        self.assertIsNone(self.service.register(_payload()))
        self.assertEqual(len(self.repo.users), 1)
        self.assertEqual(self.repo.users[0].email, "alice@example.com")

    def test_password_mismatch(self):
        error = self.service.register(_payload(confirmPassword="other"))
        self.assertEqual(error[0], "PASSWORD_MISMATCH")
        self.assertEqual(self.repo.users, [])

    def test_duplicate_email_conflicts(self):
        self.service.register(_payload())
        error = self.service.register(_payload(nickname="bob"))
        self.assertEqual(error[0], "CONFLICT")
        self.assertEqual(len(self.repo.users), 1)

    def test_duplicate_nickname_conflicts(self):
        self.service.register(_payload())
        error = self.service.register(_payload(email="bob@example.com"))
        self.assertEqual(error[0], "CONFLICT")
        self.assertEqual(len(self.repo.users), 1)

    def test_lost_insert_race_reports_conflict(self):
        self.repo.raise_conflict_on_create = True
        error = self.service.register(_payload())
        self.assertEqual(error[0], "CONFLICT")


class LoginServiceTests(unittest.TestCase):
    def setUp(self):
        self.repo = FakeUserRepository()
        RegistrationService(self.repo).register(_payload())
        self.tokens = TokenService(signing_key=SIGNING_KEY)
        self.service = LoginService(self.repo, self.tokens)

    def test_login_issues_token_for_user(self):
        token, error = self.service.login("alice@example.com", "s3cret-pass")
        self.assertIsNone(error)
        self.assertEqual(self.tokens.verify(token), self.repo.users[0].id)

    def test_wrong_password(self):
        token, error = self.service.login("alice@example.com", "wrong")
        self.assertIsNone(token)
        self.assertEqual(error[0], "UNAUTHORIZED")

    def test_unknown_email(self):
        token, error = self.service.login("nobody@example.com", "s3cret-pass")
        self.assertIsNone(token)
        self.assertEqual(error[0], "UNAUTHORIZED")
