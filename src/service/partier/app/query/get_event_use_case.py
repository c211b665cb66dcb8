from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.partier.app.interface.i_event_catalog_query_repo import IEventCatalogQueryRepo
from src.service.partier.domain.entity.event_entity import EventEntity
from src.service.partier.domain.entity.performer_entity import PerformerEntity
from src.service.partier.domain.entity.ticket_type_entity import TicketTypeEntity


class GetEventUseCase:
    def __init__(self, event_catalog_query_repo: IEventCatalogQueryRepo) -> None:
        self.event_catalog_query_repo = event_catalog_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        event_catalog_query_repo: IEventCatalogQueryRepo = Depends(
            Provide[Container.event_catalog_query_repo]
        ),
    ) -> Self:
        return cls(event_catalog_query_repo=event_catalog_query_repo)

    @Logger.io
    async def get_by_id(self, *, event_id: int) -> EventEntity:
        event = await self.event_catalog_query_repo.get_event(event_id=event_id)
        if event is None:
            Logger.base.warning(f'⚠️ [GET_EVENT] Event {event_id} not found')
            raise NotFoundError('Event not found')
        return event

    @Logger.io
    async def list_ticket_types(self, *, event_id: int) -> List[TicketTypeEntity]:
        return await self.event_catalog_query_repo.list_ticket_types_by_event(event_id=event_id)

    @Logger.io
    async def get_ticket_type(self, *, ticket_type_id: int) -> TicketTypeEntity:
        ticket_type = await self.event_catalog_query_repo.get_ticket_type(
            ticket_type_id=ticket_type_id
        )
        if ticket_type is None:
            raise NotFoundError('Ticket type not found')
        return ticket_type

    @Logger.io
    async def list_performers(self, *, event_id: int) -> List[PerformerEntity]:
        return await self.event_catalog_query_repo.list_performers_by_event(event_id=event_id)
