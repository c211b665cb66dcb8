from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.partier.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.partier.domain.entity.user_entity import UserEntity


class ListUsersUseCase:
    def __init__(self, user_query_repo: IUserQueryRepo) -> None:
        self.user_query_repo = user_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
    ) -> Self:
        return cls(user_query_repo=user_query_repo)

    @Logger.io
    async def list_all(self) -> List[UserEntity]:
        users = await self.user_query_repo.list_all()
        Logger.base.info(f'✅ [LIST_USERS] Found {len(users)} users')
        return users
