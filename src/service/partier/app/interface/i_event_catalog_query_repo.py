from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.partier.domain.entity.event_entity import EventEntity
from src.service.partier.domain.entity.performer_entity import PerformerEntity
from src.service.partier.domain.entity.ticket_type_entity import TicketTypeEntity


class IEventCatalogQueryRepo(ABC):
    @abstractmethod
    async def list_events(self) -> List[EventEntity]:
        pass

    @abstractmethod
    async def list_featured_events(self) -> List[EventEntity]:
        pass

    @abstractmethod
    async def get_event(self, *, event_id: int) -> Optional[EventEntity]:
        pass

    @abstractmethod
    async def list_events_by_organizer(self, *, organizer_id: int) -> List[EventEntity]:
        pass

    @abstractmethod
    async def list_ticket_types_by_event(self, *, event_id: int) -> List[TicketTypeEntity]:
        pass

    @abstractmethod
    async def get_ticket_type(self, *, ticket_type_id: int) -> Optional[TicketTypeEntity]:
        pass

    @abstractmethod
    async def list_ticket_types(self) -> List[TicketTypeEntity]:
        pass

    @abstractmethod
    async def list_performers_by_event(self, *, event_id: int) -> List[PerformerEntity]:
        pass
