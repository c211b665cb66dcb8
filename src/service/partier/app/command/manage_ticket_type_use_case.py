from typing import Any, Dict, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.partier.app.interface.i_event_catalog_command_repo import (
    IEventCatalogCommandRepo,
)
from src.service.partier.app.interface.i_event_catalog_query_repo import IEventCatalogQueryRepo
from src.service.partier.domain.entity.performer_entity import PerformerEntity
from src.service.partier.domain.entity.ticket_type_entity import (
    TICKET_TYPE_UPDATABLE_FIELDS,
    TicketTypeEntity,
)


class ManageTicketTypeUseCase:
    """Ticket types and performers hang off an existing event"""

    def __init__(
        self,
        event_catalog_command_repo: IEventCatalogCommandRepo,
        event_catalog_query_repo: IEventCatalogQueryRepo,
    ) -> None:
        self.event_catalog_command_repo = event_catalog_command_repo
        self.event_catalog_query_repo = event_catalog_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        event_catalog_command_repo: IEventCatalogCommandRepo = Depends(
            Provide[Container.event_catalog_command_repo]
        ),
        event_catalog_query_repo: IEventCatalogQueryRepo = Depends(
            Provide[Container.event_catalog_query_repo]
        ),
    ) -> Self:
        return cls(
            event_catalog_command_repo=event_catalog_command_repo,
            event_catalog_query_repo=event_catalog_query_repo,
        )

    async def _ensure_event_exists(self, event_id: int) -> None:
        if await self.event_catalog_query_repo.get_event(event_id=event_id) is None:
            raise NotFoundError('Event not found')

    @Logger.io
    async def create_ticket_type(self, *, ticket_type: TicketTypeEntity) -> TicketTypeEntity:
        await self._ensure_event_exists(ticket_type.event_id)
        created = await self.event_catalog_command_repo.create_ticket_type(ticket_type=ticket_type)
        Logger.base.info(
            f'🎟️ [TICKET_TYPE] Created "{created.name}" for event {created.event_id} '
            f'({created.available} @ {created.price})'
        )
        return created

    @Logger.io
    async def update_ticket_type(
        self, *, ticket_type_id: int, changes: Dict[str, Any]
    ) -> TicketTypeEntity:
        changes = {
            key: value for key, value in changes.items() if key in TICKET_TYPE_UPDATABLE_FIELDS
        }
        TicketTypeEntity.validate_inventory(
            price=changes.get('price'), available=changes.get('available')
        )

        updated = await self.event_catalog_command_repo.update_ticket_type(
            ticket_type_id=ticket_type_id, changes=changes
        )
        if updated is None:
            raise NotFoundError('Ticket type not found')

        Logger.base.info(f'✏️ [TICKET_TYPE] Ticket type {ticket_type_id} updated: {sorted(changes)}')
        return updated

    @Logger.io
    async def create_performer(self, *, performer: PerformerEntity) -> PerformerEntity:
        await self._ensure_event_exists(performer.event_id)
        created = await self.event_catalog_command_repo.create_performer(performer=performer)
        Logger.base.info(f'🎧 [PERFORMER] Added {created.name} to event {created.event_id}')
        return created
