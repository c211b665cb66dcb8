"""
Session authentication: a signed JWT carried in an http-only cookie.

The token names a server-side session row (its ``jti``). A request is
authenticated only while that row exists and has not expired, so logout
revokes the cookie everywhere it was copied. The user row is re-read on
every request so role changes take effect immediately.
"""

from datetime import datetime, timedelta, timezone
import secrets
from typing import Any, Dict, Optional

import jwt
from pydantic import SecretStr

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import AuthenticationError
from src.platform.logging.loguru_io import Logger
from src.service.partier.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.partier.app.interface.i_user_session_repo import IUserSessionRepo
from src.service.partier.domain.entity.user_entity import UserEntity
from src.service.partier.domain.entity.user_session_entity import UserSessionEntity


class JwtAuth:
    def __init__(self, session_repo: IUserSessionRepo) -> None:
        self.session_repo = session_repo
        self.secret = settings.SECRET_KEY.get_secret_value()
        self.algorithm = settings.ALGORITHM
        self.token_expire_days = settings.SESSION_EXPIRE_DAYS

    @property
    def cookie_max_age(self) -> int:
        return self.token_expire_days * 24 * 60 * 60

    def create_jwt_token(
        self, user_entity: UserEntity, session_id: str, expires_at: datetime
    ) -> str:
        payload = {
            'sub': str(user_entity.id),
            'jti': session_id,
            'exp': expires_at,
            'iat': datetime.now(timezone.utc),
            'user_id': user_entity.id,
        }

        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_jwt_token(self, token: str) -> Dict[str, Any]:
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.PyJWTError as e:
            raise AuthenticationError('Invalid token') from e

    async def start_session(self, user_entity: UserEntity) -> str:
        """Persist a new session for the user and return its signed token"""
        expires_at = datetime.now(timezone.utc) + timedelta(days=self.token_expire_days)
        session_entity = await self.session_repo.create(
            UserSessionEntity(
                id=secrets.token_urlsafe(32),
                user_id=user_entity.id,
                expires_at=expires_at,
            )
        )
        return self.create_jwt_token(user_entity, session_entity.id, expires_at)

    async def end_session(self, token: Optional[str]) -> None:
        if not token:
            return
        try:
            payload = self.decode_jwt_token(token)
        except AuthenticationError:
            Logger.base.info('🔓 [Auth] Logout with an unreadable session cookie')
            return
        session_id = payload.get('jti')
        if isinstance(session_id, str):
            await self.session_repo.delete(session_id)

    async def authenticate_user(
        self, user_query_repo: IUserQueryRepo, username: str, password: SecretStr
    ) -> UserEntity:
        user_entity = await user_query_repo.verify_password(
            username=username, plain_password=password.get_secret_value()
        )
        return UserEntity.validate_credentials(user_entity)

    async def get_current_user(
        self, *, user_query_repo: IUserQueryRepo, token: Optional[str]
    ) -> UserEntity:
        if not token:
            raise AuthenticationError('Not authenticated')

        payload = self.decode_jwt_token(token)
        user_id = payload.get('user_id')
        session_id = payload.get('jti')
        if not isinstance(user_id, int) or not isinstance(session_id, str):
            raise AuthenticationError('Invalid token')

        session_entity = await self.session_repo.get_by_id(session_id)
        if (
            session_entity is None
            or session_entity.user_id != user_id
            or not session_entity.is_active(datetime.now(timezone.utc))
        ):
            raise AuthenticationError('Session has ended')

        user_entity = await user_query_repo.get_by_id(user_id)
        if user_entity is None:
            raise AuthenticationError('Not authenticated')

        return user_entity
