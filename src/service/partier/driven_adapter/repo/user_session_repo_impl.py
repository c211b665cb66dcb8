from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.partier.app.interface.i_user_session_repo import IUserSessionRepo
from src.service.partier.domain.entity.user_session_entity import UserSessionEntity
from src.service.partier.driven_adapter.model.user_session_model import UserSessionModel


class UserSessionRepoImpl(IUserSessionRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, session_entity: UserSessionEntity) -> UserSessionEntity:
        async with self.session_factory() as session:
            session_model = UserSessionModel(
                id=session_entity.id,
                user_id=session_entity.user_id,
                expires_at=session_entity.expires_at,
            )

            session.add(session_model)
            await session.commit()
            await session.refresh(session_model)

            return self._model_to_entity(session_model)

    @Logger.io
    async def get_by_id(self, session_id: str) -> Optional[UserSessionEntity]:
        async with self.session_factory() as session:
            session_model = await session.get(UserSessionModel, session_id)
            return self._model_to_entity(session_model) if session_model else None

    @Logger.io
    async def delete(self, session_id: str) -> None:
        async with self.session_factory() as session:
            await session.execute(delete(UserSessionModel).where(UserSessionModel.id == session_id))
            await session.commit()

    def _model_to_entity(self, session_model: UserSessionModel) -> UserSessionEntity:
        return UserSessionEntity(
            id=session_model.id,
            user_id=session_model.user_id,
            expires_at=session_model.expires_at,
            created_at=session_model.created_at,
        )
