from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

import jwt
from pydantic import SecretStr
import pytest

from src.platform.exception.exceptions import AuthenticationError, ForbiddenError
from src.service.partier.domain.entity.user_entity import UserEntity
from src.service.partier.domain.entity.user_session_entity import UserSessionEntity
from src.service.partier.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from src.service.partier.driving_adapter.http_controller.auth.role_auth import (
    ensure_can_view_tickets_of,
)


@pytest.fixture
def session_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.create.side_effect = lambda session_entity: session_entity
    repo.get_by_id.side_effect = lambda session_id: UserSessionEntity(
        id=session_id, user_id=5, expires_at=datetime.now(timezone.utc) + timedelta(days=1)
    )
    return repo


@pytest.fixture
def jwt_auth(session_repo: AsyncMock) -> JwtAuth:
    return JwtAuth(session_repo=session_repo)


@pytest.fixture
def user() -> UserEntity:
    return UserEntity(id=5, username='raver', email='raver@test.com', full_name='Riley Raver')


@pytest.mark.unit
class TestJwtAuth:
    async def test_start_session_persists_row_named_by_token(
        self, jwt_auth: JwtAuth, session_repo: AsyncMock, user: UserEntity
    ):
        # Act
        token = await jwt_auth.start_session(user)

        # Assert
        payload = jwt_auth.decode_jwt_token(token)
        assert payload['user_id'] == 5
        assert payload['sub'] == '5'
        stored = session_repo.create.await_args.args[0]
        assert stored.id == payload['jti']
        assert stored.user_id == 5
        assert stored.expires_at > datetime.now(timezone.utc) + timedelta(days=6)

    def test_tampered_token_rejected(self, jwt_auth: JwtAuth, user: UserEntity):
        token = jwt.encode({'user_id': 5}, 'some-other-secret', algorithm=jwt_auth.algorithm)

        with pytest.raises(AuthenticationError, match='Invalid token'):
            jwt_auth.decode_jwt_token(token)

    def test_expired_token_rejected(self, jwt_auth: JwtAuth):
        expired = jwt.encode(
            {'user_id': 5, 'exp': datetime.now(timezone.utc) - timedelta(minutes=1)},
            jwt_auth.secret,
            algorithm=jwt_auth.algorithm,
        )

        with pytest.raises(AuthenticationError):
            jwt_auth.decode_jwt_token(expired)

    async def test_current_user_reloaded_from_store(self, jwt_auth: JwtAuth, user: UserEntity):
        # Arrange
        promoted = UserEntity(
            id=5, username='raver', email='raver@test.com', full_name='R', is_organizer=True
        )
        repo = AsyncMock()
        repo.get_by_id.return_value = promoted

        # Act
        current = await jwt_auth.get_current_user(
            user_query_repo=repo, token=await jwt_auth.start_session(user)
        )

        # Assert
        assert current.is_organizer
        repo.get_by_id.assert_awaited_once_with(5)

    async def test_missing_cookie(self, jwt_auth: JwtAuth):
        with pytest.raises(AuthenticationError, match='Not authenticated'):
            await jwt_auth.get_current_user(user_query_repo=AsyncMock(), token=None)

    async def test_deleted_user(self, jwt_auth: JwtAuth, user: UserEntity):
        repo = AsyncMock()
        repo.get_by_id.return_value = None

        with pytest.raises(AuthenticationError):
            await jwt_auth.get_current_user(
                user_query_repo=repo, token=await jwt_auth.start_session(user)
            )

    async def test_bad_credentials(self, jwt_auth: JwtAuth):
        repo = AsyncMock()
        repo.verify_password.return_value = None

        with pytest.raises(AuthenticationError, match='Invalid username or password'):
            await jwt_auth.authenticate_user(repo, 'raver', SecretStr('wrong'))

    def test_cookie_max_age_matches_session_days(self, jwt_auth: JwtAuth):
        assert jwt_auth.cookie_max_age == jwt_auth.token_expire_days * 86400

    async def test_logged_out_session_rejected(
        self, jwt_auth: JwtAuth, session_repo: AsyncMock, user: UserEntity
    ):
        # Arrange
        token = await jwt_auth.start_session(user)
        session_repo.get_by_id.side_effect = None
        session_repo.get_by_id.return_value = None
        user_query_repo = AsyncMock()

        # Act & Assert
        with pytest.raises(AuthenticationError, match='Session has ended'):
            await jwt_auth.get_current_user(user_query_repo=user_query_repo, token=token)
        user_query_repo.get_by_id.assert_not_awaited()

    async def test_expired_session_row_rejected(
        self, jwt_auth: JwtAuth, session_repo: AsyncMock, user: UserEntity
    ):
        token = await jwt_auth.start_session(user)
        session_repo.get_by_id.side_effect = lambda session_id: UserSessionEntity(
            id=session_id, user_id=5, expires_at=datetime(2020, 1, 1)
        )

        with pytest.raises(AuthenticationError, match='Session has ended'):
            await jwt_auth.get_current_user(user_query_repo=AsyncMock(), token=token)

    async def test_session_of_another_user_rejected(
        self, jwt_auth: JwtAuth, session_repo: AsyncMock, user: UserEntity
    ):
        token = await jwt_auth.start_session(user)
        session_repo.get_by_id.side_effect = lambda session_id: UserSessionEntity(
            id=session_id, user_id=6, expires_at=datetime.now(timezone.utc) + timedelta(days=1)
        )

        with pytest.raises(AuthenticationError):
            await jwt_auth.get_current_user(user_query_repo=AsyncMock(), token=token)

    async def test_token_without_session_id_rejected(self, jwt_auth: JwtAuth):
        token = jwt.encode({'user_id': 5}, jwt_auth.secret, algorithm=jwt_auth.algorithm)

        with pytest.raises(AuthenticationError, match='Invalid token'):
            await jwt_auth.get_current_user(user_query_repo=AsyncMock(), token=token)

    async def test_end_session_deletes_row(
        self, jwt_auth: JwtAuth, session_repo: AsyncMock, user: UserEntity
    ):
        token = await jwt_auth.start_session(user)

        await jwt_auth.end_session(token)

        session_repo.delete.assert_awaited_once_with(jwt_auth.decode_jwt_token(token)['jti'])

    @pytest.mark.parametrize('token', [None, '', 'not-a-jwt'])
    async def test_end_session_without_readable_token(
        self, jwt_auth: JwtAuth, session_repo: AsyncMock, token
    ):
        await jwt_auth.end_session(token)

        session_repo.delete.assert_not_awaited()


@pytest.mark.unit
class TestTicketVisibility:
    def test_owner_can_view(self, user: UserEntity):
        ensure_can_view_tickets_of(user, 5)

    def test_organizer_can_view_anyone(self):
        organizer = UserEntity(id=1, is_organizer=True)

        ensure_can_view_tickets_of(organizer, 5)

    def test_other_user_forbidden(self, user: UserEntity):
        with pytest.raises(ForbiddenError):
            ensure_can_view_tickets_of(user, 6)
