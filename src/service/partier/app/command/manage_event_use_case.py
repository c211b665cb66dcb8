from typing import Any, Dict, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.partier.app.interface.i_event_catalog_command_repo import (
    IEventCatalogCommandRepo,
)
from src.service.partier.domain.entity.event_entity import EVENT_UPDATABLE_FIELDS, EventEntity


class ManageEventUseCase:
    def __init__(self, event_catalog_command_repo: IEventCatalogCommandRepo) -> None:
        self.event_catalog_command_repo = event_catalog_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        event_catalog_command_repo: IEventCatalogCommandRepo = Depends(
            Provide[Container.event_catalog_command_repo]
        ),
    ) -> Self:
        return cls(event_catalog_command_repo=event_catalog_command_repo)

    @Logger.io
    async def create(self, *, event: EventEntity) -> EventEntity:
        created = await self.event_catalog_command_repo.create_event(event=event)
        Logger.base.info(f'🎉 [CREATE_EVENT] Event {created.id} "{created.title}" created')
        return created

    @Logger.io
    async def update(self, *, event_id: int, changes: Dict[str, Any]) -> EventEntity:
        changes = {key: value for key, value in changes.items() if key in EVENT_UPDATABLE_FIELDS}
        EventEntity.validate_changes(changes)

        updated = await self.event_catalog_command_repo.update_event(
            event_id=event_id, changes=changes
        )
        if updated is None:
            raise NotFoundError('Event not found')

        Logger.base.info(f'✏️ [UPDATE_EVENT] Event {event_id} updated: {sorted(changes)}')
        return updated

    @Logger.io
    async def delete(self, *, event_id: int) -> None:
        if not await self.event_catalog_command_repo.delete_event(event_id=event_id):
            raise NotFoundError('Event not found')
        Logger.base.info(f'🗑️ [DELETE_EVENT] Event {event_id} deleted')
