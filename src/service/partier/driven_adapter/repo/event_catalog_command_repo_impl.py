from typing import Any, AsyncContextManager, Callable, Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.partier.app.interface.i_event_catalog_command_repo import (
    IEventCatalogCommandRepo,
)
from src.service.partier.domain.entity.event_entity import EventEntity
from src.service.partier.domain.entity.performer_entity import PerformerEntity
from src.service.partier.domain.entity.ticket_type_entity import TicketTypeEntity
from src.service.partier.driven_adapter.model.event_model import EventModel
from src.service.partier.driven_adapter.model.performer_model import PerformerModel
from src.service.partier.driven_adapter.model.ticket_type_model import TicketTypeModel
from src.service.partier.driven_adapter.repo.model_mapper import (
    event_to_entity,
    performer_to_entity,
    ticket_type_to_entity,
)


class EventCatalogCommandRepoImpl(IEventCatalogCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create_event(self, *, event: EventEntity) -> EventEntity:
        async with self.session_factory() as session:
            event_model = EventModel(
                title=event.title,
                description=event.description,
                image_url=event.image_url,
                date=event.date,
                location=event.location,
                address=event.address,
                organized_by_id=event.organized_by_id,
                featured=event.featured,
                tags=list(event.tags),
            )
            session.add(event_model)
            await session.commit()
            await session.refresh(event_model)

            return event_to_entity(event_model)

    @Logger.io
    async def update_event(self, *, event_id: int, changes: Dict[str, Any]) -> Optional[EventEntity]:
        async with self.session_factory() as session:
            event_model = await session.get(EventModel, event_id)
            if event_model is None:
                return None

            for field, value in changes.items():
                setattr(event_model, field, value)

            await session.commit()
            await session.refresh(event_model)

            return event_to_entity(event_model)

    @Logger.io
    async def delete_event(self, *, event_id: int) -> bool:
        async with self.session_factory() as session:
            event_model = await session.get(EventModel, event_id)
            if event_model is None:
                return False

            # Ticket types, performers and tickets keep their event_id
            await session.delete(event_model)
            await session.commit()
            return True

    @Logger.io
    async def create_ticket_type(self, *, ticket_type: TicketTypeEntity) -> TicketTypeEntity:
        async with self.session_factory() as session:
            ticket_type_model = TicketTypeModel(
                event_id=ticket_type.event_id,
                name=ticket_type.name,
                description=ticket_type.description,
                price=ticket_type.price,
                available=ticket_type.available,
            )
            session.add(ticket_type_model)
            await session.commit()
            await session.refresh(ticket_type_model)

            return ticket_type_to_entity(ticket_type_model)

    @Logger.io
    async def update_ticket_type(
        self, *, ticket_type_id: int, changes: Dict[str, Any]
    ) -> Optional[TicketTypeEntity]:
        async with self.session_factory() as session:
            ticket_type_model = await session.get(TicketTypeModel, ticket_type_id)
            if ticket_type_model is None:
                return None

            for field, value in changes.items():
                setattr(ticket_type_model, field, value)

            await session.commit()
            await session.refresh(ticket_type_model)

            return ticket_type_to_entity(ticket_type_model)

    @Logger.io
    async def create_performer(self, *, performer: PerformerEntity) -> PerformerEntity:
        async with self.session_factory() as session:
            performer_model = PerformerModel(
                event_id=performer.event_id,
                name=performer.name,
                image_url=performer.image_url,
                time=performer.time,
                is_headliner=performer.is_headliner,
            )
            session.add(performer_model)
            await session.commit()
            await session.refresh(performer_model)

            return performer_to_entity(performer_model)
