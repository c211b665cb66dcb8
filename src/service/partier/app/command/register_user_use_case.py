from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.partier.app.interface.i_password_hasher import IPasswordHasher
from src.service.partier.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.partier.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.partier.domain.entity.user_entity import UserEntity


class RegisterUserUseCase:
    """Creates accounts: self-service registration and super-admin organizer creation."""

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

    @Logger.io
    async def register(
        self,
        *,
        username: str,
        password: str,
        email: str,
        full_name: str,
        is_organizer: bool = False,
    ) -> UserEntity:
        user_entity = UserEntity(
            username=username.strip(),
            email=email.strip(),
            full_name=full_name.strip(),
            is_organizer=is_organizer,
        )
        user_entity.validate_profile()

        if await self.user_query_repo.get_by_username(user_entity.username):
            raise DomainError('Username already exists')
        if await self.user_query_repo.get_by_email(user_entity.email):
            raise DomainError('Email already exists')

        user_entity.set_password(password, self.password_hasher)
        created = await self.user_command_repo.create(user_entity)

        role = 'organizer' if is_organizer else 'user'
        Logger.base.info(f'👤 [REGISTER] Created {role} {created.username} (id={created.id})')
        return created
