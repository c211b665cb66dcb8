from typing import AsyncContextManager, Callable

from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.partier.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.partier.domain.entity.user_entity import UserEntity
from src.service.partier.driven_adapter.model.user_model import UserModel


class UserCommandRepoImpl(IUserCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, user_entity: UserEntity) -> UserEntity:
        async with self.session_factory() as session:
            user_model = UserModel(
                username=user_entity.username,
                hashed_password=user_entity.hashed_password,
                email=user_entity.email,
                full_name=user_entity.full_name,
                is_organizer=user_entity.is_organizer,
                is_super_admin=user_entity.is_super_admin,
            )

            session.add(user_model)
            await session.commit()
            await session.refresh(user_model)

            return self._model_to_entity(user_model)

    @Logger.io
    async def update(self, user_entity: UserEntity) -> UserEntity:
        async with self.session_factory() as session:
            user_model = await session.get(UserModel, user_entity.id)
            if user_model is None:
                raise NotFoundError('User not found')

            user_model.username = user_entity.username
            user_model.email = user_entity.email
            user_model.full_name = user_entity.full_name
            user_model.hashed_password = user_entity.hashed_password
            user_model.is_organizer = user_entity.is_organizer
            user_model.is_super_admin = user_entity.is_super_admin

            await session.commit()
            await session.refresh(user_model)

            return self._model_to_entity(user_model)

    def _model_to_entity(self, user_model: UserModel) -> UserEntity:
        return UserEntity(
            id=user_model.id,
            username=user_model.username,
            email=user_model.email,
            full_name=user_model.full_name,
            hashed_password=user_model.hashed_password,
            is_organizer=user_model.is_organizer,
            is_super_admin=user_model.is_super_admin,
        )
