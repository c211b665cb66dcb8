from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.partier.app.interface.i_event_catalog_query_repo import IEventCatalogQueryRepo
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


class EventCatalogQueryRepoImpl(IEventCatalogQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def list_events(self) -> List[EventEntity]:
        async with self.session_factory() as session:
            result = await session.execute(select(EventModel).order_by(EventModel.date))
            return [event_to_entity(model) for model in result.scalars()]

    @Logger.io
    async def list_featured_events(self) -> List[EventEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(EventModel).where(EventModel.featured.is_(True)).order_by(EventModel.date)
            )
            return [event_to_entity(model) for model in result.scalars()]

    @Logger.io
    async def get_event(self, *, event_id: int) -> Optional[EventEntity]:
        async with self.session_factory() as session:
            event_model = await session.get(EventModel, event_id)
            return event_to_entity(event_model) if event_model else None

    @Logger.io
    async def list_events_by_organizer(self, *, organizer_id: int) -> List[EventEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(EventModel)
                .where(EventModel.organized_by_id == organizer_id)
                .order_by(EventModel.date)
            )
            return [event_to_entity(model) for model in result.scalars()]

    @Logger.io
    async def list_ticket_types_by_event(self, *, event_id: int) -> List[TicketTypeEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(TicketTypeModel)
                .where(TicketTypeModel.event_id == event_id)
                .order_by(TicketTypeModel.id)
            )
            return [ticket_type_to_entity(model) for model in result.scalars()]

    @Logger.io
    async def get_ticket_type(self, *, ticket_type_id: int) -> Optional[TicketTypeEntity]:
        async with self.session_factory() as session:
            ticket_type_model = await session.get(TicketTypeModel, ticket_type_id)
            return ticket_type_to_entity(ticket_type_model) if ticket_type_model else None

    @Logger.io
    async def list_ticket_types(self) -> List[TicketTypeEntity]:
        async with self.session_factory() as session:
            result = await session.execute(select(TicketTypeModel).order_by(TicketTypeModel.id))
            return [ticket_type_to_entity(model) for model in result.scalars()]

    @Logger.io
    async def list_performers_by_event(self, *, event_id: int) -> List[PerformerEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(PerformerModel)
                .where(PerformerModel.event_id == event_id)
                .order_by(PerformerModel.id)
            )
            return [performer_to_entity(model) for model in result.scalars()]
