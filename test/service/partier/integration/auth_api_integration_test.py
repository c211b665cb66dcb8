from fastapi.testclient import TestClient
import pytest

from src.platform.config.core_setting import settings
from src.platform.constant.route_constant import AUTH_LOGIN, AUTH_LOGOUT, AUTH_ME, AUTH_REGISTER
from test.shared.utils import assert_response_status, create_user
from test.util_constant import (
    DEFAULT_PASSWORD,
    USER_EMAIL,
    USER_FULL_NAME,
    USER_USERNAME,
)


@pytest.mark.integration
class TestRegister:
    def test_register_sets_session_cookie(self, client: TestClient):
        # Act
        response = client.post(
            AUTH_REGISTER,
            json={
                'username': USER_USERNAME,
                'password': DEFAULT_PASSWORD,
                'email': USER_EMAIL,
                'fullName': USER_FULL_NAME,
            },
        )

        # Assert
        assert_response_status(response, 201)
        body = response.json()
        assert body['username'] == USER_USERNAME
        assert body['fullName'] == USER_FULL_NAME
        assert body['isOrganizer'] is False
        assert body['isSuperAdmin'] is False
        assert 'password' not in body
        assert client.cookies.get(settings.SESSION_COOKIE_NAME)

    def test_registered_user_is_logged_in(self, client: TestClient):
        create_user(client, USER_USERNAME, DEFAULT_PASSWORD, USER_EMAIL, USER_FULL_NAME)

        response = client.get(AUTH_ME)

        assert_response_status(response, 200)
        assert response.json()['email'] == USER_EMAIL

    def test_duplicate_username(self, client: TestClient, regular_user):
        response = client.post(
            AUTH_REGISTER,
            json={
                'username': USER_USERNAME,
                'password': DEFAULT_PASSWORD,
                'email': 'someone.else@test.com',
                'fullName': 'Someone Else',
            },
        )

        assert_response_status(response, 400)
        assert response.json()['detail'] == 'Username already exists'

    def test_duplicate_email(self, client: TestClient, regular_user):
        response = client.post(
            AUTH_REGISTER,
            json={
                'username': 'someone_else',
                'password': DEFAULT_PASSWORD,
                'email': USER_EMAIL,
                'fullName': 'Someone Else',
            },
        )

        assert_response_status(response, 400)
        assert response.json()['detail'] == 'Email already exists'

    def test_invalid_email_is_bad_request(self, client: TestClient):
        response = client.post(
            AUTH_REGISTER,
            json={
                'username': USER_USERNAME,
                'password': DEFAULT_PASSWORD,
                'email': 'not-an-email',
                'fullName': USER_FULL_NAME,
            },
        )

        assert_response_status(response, 400)

    def test_multibyte_password_over_bcrypt_limit(self, client: TestClient):
        """
        Given a password of 40 characters that encodes to 80 UTF-8 bytes
        When registering with it
        Then it is rejected as a bad request instead of failing inside bcrypt
        """
        # Act
        response = client.post(
            AUTH_REGISTER,
            json={
                'username': USER_USERNAME,
                'password': 'é' * 40,
                'email': USER_EMAIL,
                'fullName': USER_FULL_NAME,
            },
        )

        # Assert
        assert_response_status(response, 400)
        messages = [error['msg'] for error in response.json()['detail']]
        assert any('at most 72 bytes' in message for message in messages)

    def test_password_of_exactly_72_bytes(self, client: TestClient):
        response = client.post(
            AUTH_REGISTER,
            json={
                'username': USER_USERNAME,
                'password': 'é' * 36,
                'email': USER_EMAIL,
                'fullName': USER_FULL_NAME,
            },
        )

        assert_response_status(response, 201)

    def test_login_with_oversized_password(self, client: TestClient, regular_user):
        response = client.post(AUTH_LOGIN, json={'username': USER_USERNAME, 'password': '€' * 25})

        assert_response_status(response, 400)


@pytest.mark.integration
class TestSession:
    def test_login_then_current_user(self, client: TestClient, regular_user):
        # Arrange
        client.cookies.clear()

        # Act
        login = client.post(
            AUTH_LOGIN, json={'username': USER_USERNAME, 'password': DEFAULT_PASSWORD}
        )
        me = client.get(AUTH_ME)

        # Assert
        assert_response_status(login, 200)
        assert login.json()['id'] == regular_user['id']
        assert_response_status(me, 200)
        assert me.json()['username'] == USER_USERNAME

    def test_wrong_password(self, client: TestClient, regular_user):
        response = client.post(
            AUTH_LOGIN, json={'username': USER_USERNAME, 'password': 'wrong-password'}
        )

        assert_response_status(response, 401)
        assert response.json()['detail'] == 'Invalid username or password'

    def test_unknown_username(self, client: TestClient):
        response = client.post(
            AUTH_LOGIN, json={'username': 'ghost', 'password': DEFAULT_PASSWORD}
        )

        assert_response_status(response, 401)

    def test_current_user_requires_session(self, client: TestClient):
        response = client.get(AUTH_ME)

        assert_response_status(response, 401)

    def test_logout_ends_session(self, client: TestClient, regular_user, login_as):
        # Arrange
        login_as(regular_user)

        # Act
        logout = client.post(AUTH_LOGOUT)
        me = client.get(AUTH_ME)

        # Assert
        assert_response_status(logout, 200)
        assert logout.json()['message'] == 'Logged out'
        assert client.cookies.get(settings.SESSION_COOKIE_NAME) is None
        assert_response_status(me, 401)

    def test_forged_cookie_rejected(self, client: TestClient):
        client.cookies.set(settings.SESSION_COOKIE_NAME, 'not-a-jwt')

        response = client.get(AUTH_ME)

        assert_response_status(response, 401)

    def test_logged_out_cookie_cannot_be_replayed(
        self, client: TestClient, regular_user, login_as
    ):
        """
        Given a session cookie copied before logout
        When the copy is presented after logout
        Then it is rejected, because logout deleted the session on the server
        """
        # Arrange
        login_as(regular_user)
        copied_token = client.cookies.get(settings.SESSION_COOKIE_NAME)
        assert_response_status(client.post(AUTH_LOGOUT), 200)

        # Act
        client.cookies.set(settings.SESSION_COOKIE_NAME, copied_token)
        response = client.get(AUTH_ME)

        # Assert
        assert_response_status(response, 401)
        assert response.json()['detail'] == 'Session has ended'

    def test_logout_only_ends_its_own_session(
        self, client: TestClient, regular_user, login_as
    ):
        # Arrange
        login_as(regular_user)
        first_token = client.cookies.get(settings.SESSION_COOKIE_NAME)
        login_as(regular_user)

        # Act
        client.post(AUTH_LOGOUT)
        client.cookies.set(settings.SESSION_COOKIE_NAME, first_token)
        response = client.get(AUTH_ME)

        # Assert
        assert_response_status(response, 200)
        assert response.json()['username'] == USER_USERNAME

    def test_logout_with_forged_cookie(self, client: TestClient):
        client.cookies.set(settings.SESSION_COOKIE_NAME, 'not-a-jwt')

        response = client.post(AUTH_LOGOUT)

        assert_response_status(response, 200)
        assert client.cookies.get(settings.SESSION_COOKIE_NAME) is None
