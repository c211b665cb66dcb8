from abc import ABC, abstractmethod
from typing import Optional

from src.service.partier.domain.entity.user_session_entity import UserSessionEntity


class IUserSessionRepo(ABC):
    """Login session store - a session is valid only while its row exists"""

    @abstractmethod
    async def create(self, session_entity: UserSessionEntity) -> UserSessionEntity:
        pass

    @abstractmethod
    async def get_by_id(self, session_id: str) -> Optional[UserSessionEntity]:
        pass

    @abstractmethod
    async def delete(self, session_id: str) -> None:
        pass
