from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.partier.app.interface.i_event_catalog_query_repo import IEventCatalogQueryRepo
from src.service.partier.domain.entity.event_entity import EventEntity


class ListEventsUseCase:
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
    async def list_all(self) -> List[EventEntity]:
        events = await self.event_catalog_query_repo.list_events()
        Logger.base.info(f'✅ [LIST_EVENTS] Found {len(events)} events')
        return events

    @Logger.io
    async def list_featured(self) -> List[EventEntity]:
        events = await self.event_catalog_query_repo.list_featured_events()
        Logger.base.info(f'🌟 [LIST_FEATURED] Found {len(events)} featured events')
        return events

    @Logger.io
    async def list_by_organizer(self, *, organizer_id: int) -> List[EventEntity]:
        """Get all events run by one organizer"""
        events = await self.event_catalog_query_repo.list_events_by_organizer(
            organizer_id=organizer_id
        )
        Logger.base.info(
            f'✅ [LIST_BY_ORGANIZER] Found {len(events)} events for organizer {organizer_id}'
        )
        return events
