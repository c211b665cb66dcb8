"""
Super-admin user management
"""

from typing import Any, Dict, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.partier.app.interface.i_password_hasher import IPasswordHasher
from src.service.partier.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.partier.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.partier.domain.entity.user_entity import UserEntity


USER_UPDATABLE_FIELDS = frozenset(
    {'username', 'email', 'full_name', 'is_organizer', 'is_super_admin', 'password'}
)


class ManageUserUseCase:
    def __init__(
        self,
        user_command_repo: IUserCommandRepo,
        user_query_repo: IUserQueryRepo,
        password_hasher: IPasswordHasher,
    ) -> None:
        self.user_command_repo = user_command_repo
        self.user_query_repo = user_query_repo
        self.password_hasher = password_hasher

    @classmethod
    @inject
    def depends(
        cls,
        user_command_repo: IUserCommandRepo = Depends(Provide[Container.user_command_repo]),
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
    ) -> Self:
        return cls(
            user_command_repo=user_command_repo,
            user_query_repo=user_query_repo,
            password_hasher=password_hasher,
        )

    async def _get_existing(self, user_id: int) -> UserEntity:
        user = await self.user_query_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError('User not found')
        return user

    @Logger.io
    async def update_user(self, *, user_id: int, changes: Dict[str, Any]) -> UserEntity:
        """Partial update; only keys present in `changes` are touched."""
        user = await self._get_existing(user_id)
        changes = {key: value for key, value in changes.items() if key in USER_UPDATABLE_FIELDS}

        username: Optional[str] = changes.get('username')
        if username is not None and username != user.username:
            if await self.user_query_repo.get_by_username(username):
                raise DomainError('Username already exists')
            user.username = username

        email: Optional[str] = changes.get('email')
        if email is not None and email != user.email:
            if await self.user_query_repo.get_by_email(email):
                raise DomainError('Email already exists')
            user.email = email

        if changes.get('full_name') is not None:
            user.full_name = changes['full_name']
        if changes.get('is_organizer') is not None:
            user.is_organizer = bool(changes['is_organizer'])
        if changes.get('is_super_admin') is not None:
            user.is_super_admin = bool(changes['is_super_admin'])

        user.validate_profile()
        if changes.get('password'):
            user.set_password(changes['password'], self.password_hasher)

        updated = await self.user_command_repo.update(user)
        Logger.base.info(f'🛠️ [ADMIN] Updated user {user_id}: {sorted(changes)}')
        return updated

    @Logger.io
    async def set_organizer_status(self, *, user_id: int, is_organizer: Any) -> UserEntity:
        if not isinstance(is_organizer, bool):
            raise DomainError('isOrganizer must be a boolean value')

        user = await self._get_existing(user_id)
        user.is_organizer = is_organizer
        updated = await self.user_command_repo.update(user)

        Logger.base.info(f'🛠️ [ADMIN] User {user_id} organizer={is_organizer}')
        return updated
