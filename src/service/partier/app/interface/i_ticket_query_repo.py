from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.partier.domain.entity.ticket_entity import TicketEntity


class ITicketQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, ticket_id: int) -> Optional[TicketEntity]:
        pass

    @abstractmethod
    async def get_by_reference(self, *, reference_number: str) -> Optional[TicketEntity]:
        pass

    @abstractmethod
    async def list_by_user(self, *, user_id: int) -> List[TicketEntity]:
        pass

    @abstractmethod
    async def list_all(self) -> List[TicketEntity]:
        pass
