"""
Ticket confirmation view: the ticket plus its event and ticket type.

All three must resolve. Events are deleted without cascading, so a ticket
can outlive its event; such a ticket has no confirmation.
"""

import asyncio
from datetime import datetime, timezone
from typing import Self

import attrs
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.partier.app.interface.i_event_catalog_query_repo import IEventCatalogQueryRepo
from src.service.partier.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.partier.domain.entity.event_entity import EventEntity
from src.service.partier.domain.entity.ticket_entity import TicketEntity
from src.service.partier.domain.entity.ticket_type_entity import TicketTypeEntity


# Fixed English names so output does not depend on the process locale
MONTH_NAMES = (
    'January',
    'February',
    'March',
    'April',
    'May',
    'June',
    'July',
    'August',
    'September',
    'October',
    'November',
    'December',
)


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def format_long_date(moment: datetime) -> str:
    """`January 5, 2025`"""
    moment = _as_utc(moment)
    return f'{MONTH_NAMES[moment.month - 1]} {moment.day}, {moment.year}'


def format_clock_time(moment: datetime) -> str:
    """`09:30 PM`"""
    moment = _as_utc(moment)
    hour = moment.hour % 12 or 12
    meridiem = 'AM' if moment.hour < 12 else 'PM'
    return f'{hour:02d}:{moment.minute:02d} {meridiem}'


@attrs.frozen
class TicketConfirmation:
    ticket: TicketEntity
    event: EventEntity
    ticket_type: TicketTypeEntity

    @property
    def formatted_date(self) -> str:
        return format_long_date(self.ticket.purchase_date) if self.ticket.purchase_date else ''

    @property
    def formatted_time(self) -> str:
        return format_clock_time(self.ticket.purchase_date) if self.ticket.purchase_date else ''


class GetTicketConfirmationUseCase:
    def __init__(
        self,
        ticket_query_repo: ITicketQueryRepo,
        event_catalog_query_repo: IEventCatalogQueryRepo,
    ) -> None:
        self.ticket_query_repo = ticket_query_repo
        self.event_catalog_query_repo = event_catalog_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        ticket_query_repo: ITicketQueryRepo = Depends(Provide[Container.ticket_query_repo]),
        event_catalog_query_repo: IEventCatalogQueryRepo = Depends(
            Provide[Container.event_catalog_query_repo]
        ),
    ) -> Self:
        return cls(
            ticket_query_repo=ticket_query_repo,
            event_catalog_query_repo=event_catalog_query_repo,
        )

    @Logger.io
    async def get_confirmation(self, *, reference_number: str) -> TicketConfirmation:
        ticket = await self.ticket_query_repo.get_by_reference(reference_number=reference_number)
        if ticket is None:
            raise NotFoundError('Ticket not found')

        event, ticket_type = await asyncio.gather(
            self.event_catalog_query_repo.get_event(event_id=ticket.event_id),
            self.event_catalog_query_repo.get_ticket_type(ticket_type_id=ticket.ticket_type_id),
        )
        if event is None:
            Logger.base.warning(
                f'⚠️ [CONFIRMATION] {reference_number} points at missing event {ticket.event_id}'
            )
            raise NotFoundError('Event not found')
        if ticket_type is None:
            raise NotFoundError('Ticket type not found')

        return TicketConfirmation(ticket=ticket, event=event, ticket_type=ticket_type)
