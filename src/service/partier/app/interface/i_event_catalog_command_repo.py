from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from src.service.partier.domain.entity.event_entity import EventEntity
from src.service.partier.domain.entity.performer_entity import PerformerEntity
from src.service.partier.domain.entity.ticket_type_entity import TicketTypeEntity


class IEventCatalogCommandRepo(ABC):
    """Writes for events, ticket types and performers"""

    @abstractmethod
    async def create_event(self, *, event: EventEntity) -> EventEntity:
        pass

    @abstractmethod
    async def update_event(self, *, event_id: int, changes: Dict[str, Any]) -> Optional[EventEntity]:
        """Apply a partial update; None when the event does not exist."""
        pass

    @abstractmethod
    async def delete_event(self, *, event_id: int) -> bool:
        pass

    @abstractmethod
    async def create_ticket_type(self, *, ticket_type: TicketTypeEntity) -> TicketTypeEntity:
        pass

    @abstractmethod
    async def update_ticket_type(
        self, *, ticket_type_id: int, changes: Dict[str, Any]
    ) -> Optional[TicketTypeEntity]:
        pass

    @abstractmethod
    async def create_performer(self, *, performer: PerformerEntity) -> PerformerEntity:
        pass
