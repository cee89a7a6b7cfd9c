from django.urls import reverse
from rest_framework.test import APITestCase
from rest_framework import status
from apps.api.utils import AUTHENTICATION_REQUIRED_MESSAGE, GENERIC_VALIDATION_MESSAGE
from apps.auth.tokens import build_token_service
from apps.users.models import User


class TestAuth(APITestCase):
    def setUp(self):
        self.register_url = reverse('api-users-register')
        self.login_url = reverse('api-auth-login')
        self.me_url = reverse('api-users-me')
        self.user_data = {
            'email': 'alice@example.com',
            'nickname': 'alice',
            'password': 'TestPass123',
            'confirmPassword': 'TestPass123',
        }

    def _register(self, **overrides):
        data = dict(self.user_data, **overrides)
        return self.client.post(self.register_url, data, format='json')

    def _login(self, email='alice@example.com', password='TestPass123'):
        return self.client.post(self.login_url, {'email': email, 'password': password}, format='json')

    def test_register(self):
        response = self._register()
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data, {})
        user = User.objects.get(email='alice@example.com')
        self.assertEqual(user.nickname, 'alice')
        self.assertNotEqual(user.password, 'TestPass123')

    def test_register_login_me_round_trip(self):
        self._register()
        login = self._login()
        self.assertEqual(login.status_code, status.HTTP_200_OK)
        token = login.data['token']
        self.client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')
        response = self.client.get(self.me_url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {'email': 'alice@example.com', 'nickname': 'alice'})

    def test_register_duplicate_email_conflicts(self):
        self._register()
        response = self._register(nickname='bob')
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data['error']['code'], 'CONFLICT')
        self.assertEqual(User.objects.count(), 1)

    def test_register_duplicate_nickname_conflicts(self):
        self._register()
        response = self._register(email='bob@example.com')
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(User.objects.count(), 1)

    def test_register_password_mismatch(self):
        response = self._register(confirmPassword='Different123')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error']['code'], 'PASSWORD_MISMATCH')
        self.assertFalse(User.objects.exists())

    def test_register_invalid_payload_gets_generic_message(self):
        response = self.client.post(self.register_url, {'email': 'not-an-email'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        error = response.data['error']
        self.assertEqual(error['code'], 'VALIDATION_ERROR')
        self.assertEqual(error['message'], GENERIC_VALIDATION_MESSAGE)
        self.assertNotIn('details', error)

    def test_register_overlong_fields_rejected(self):
        for overrides in ({'nickname': 'n' * 101}, {'email': 'a' * 250 + '@example.com'}):
            with self.subTest(fields=sorted(overrides)):
                response = self._register(**overrides)
                self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
                self.assertEqual(response.data['error']['code'], 'VALIDATION_ERROR')
        self.assertFalse(User.objects.exists())

    def test_register_nickname_at_column_limit(self):
        response = self._register(nickname='n' * 100)
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

    def test_login_wrong_password(self):
        self._register()
        response = self._login(password='WrongPass')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data['error']['code'], 'UNAUTHORIZED')

    def test_login_invalid_payload(self):
        response = self.client.post(self.login_url, {'email': 'alice@example.com'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error']['code'], 'VALIDATION_ERROR')

    def test_me_without_header(self):
        response = self.client.get(self.me_url)
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        error = response.json()['error']
        self.assertEqual(error['code'], 'UNAUTHORIZED')
        self.assertEqual(error['message'], AUTHENTICATION_REQUIRED_MESSAGE)

    def test_me_header_without_space(self):
        self._register()
        token = self._login().data['token']
        self.client.credentials(HTTP_AUTHORIZATION=token)
        response = self.client.get(self.me_url)
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_me_lowercase_scheme(self):
        self._register()
        token = self._login().data['token']
        self.client.credentials(HTTP_AUTHORIZATION=f'bearer {token}')
        response = self.client.get(self.me_url)
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_me_tampered_token(self):
        self._register()
        token = self._login().data['token']
        self.client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}x')
        response = self.client.get(self.me_url)
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_me_token_for_deleted_identity(self):
        token = build_token_service().issue(12345)
        self.client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')
        response = self.client.get(self.me_url)
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
