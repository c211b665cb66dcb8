"""
CSV exports for organizers (users, ticket sales, events)

Rows are assembled in memory; `CsvExport.iter_lines()` renders them one CSV
line at a time so the controller can stream the download.
"""

import csv
import io
from datetime import datetime, timezone
from typing import Dict, Iterator, List, Optional, Self, Sequence

import attrs
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.partier.app.interface.i_event_catalog_query_repo import IEventCatalogQueryRepo
from src.service.partier.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.partier.app.interface.i_user_query_repo import IUserQueryRepo


USER_EXPORT_HEADER = ('ID', 'Username', 'Email', 'Full Name', 'Is Organizer', 'Is Super Admin')
TICKET_EXPORT_HEADER = (
    'ID',
    'Reference Number',
    'User ID',
    'User Name',
    'Event ID',
    'Event Name',
    'Ticket Type ID',
    'Ticket Type',
    'Price',
    'Purchase Date',
    'Status',
)
EVENT_EXPORT_HEADER = (
    'ID',
    'Event Title',
    'Date',
    'Location',
    'Address',
    'Organizer',
    'Featured',
    'Tags',
)


def yes_no(flag: bool) -> str:
    return 'Yes' if flag else 'No'


def export_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC with `:` and `.` replaced so it is filename-safe."""
    now = now or datetime.now(timezone.utc)
    iso = now.astimezone(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')
    return iso.replace(':', '-').replace('.', '-')


def _format_datetime(moment: Optional[datetime]) -> str:
    return moment.isoformat() if moment else 'N/A'


@attrs.frozen
class CsvExport:
    filename: str
    header: Sequence[str]
    rows: List[List[str]]

    @Logger.io(truncate_content=True)
    def iter_lines(self) -> Iterator[str]:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator='\n')
        for row in [list(self.header), *self.rows]:
            writer.writerow(row)
            yield buffer.getvalue()
            buffer.seek(0)
            buffer.truncate(0)

    def render(self) -> str:
        return ''.join(self.iter_lines())


class ExportCsvUseCase:
    def __init__(
        self,
        user_query_repo: IUserQueryRepo,
        ticket_query_repo: ITicketQueryRepo,
        event_catalog_query_repo: IEventCatalogQueryRepo,
    ) -> None:
        self.user_query_repo = user_query_repo
        self.ticket_query_repo = ticket_query_repo
        self.event_catalog_query_repo = event_catalog_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        ticket_query_repo: ITicketQueryRepo = Depends(Provide[Container.ticket_query_repo]),
        event_catalog_query_repo: IEventCatalogQueryRepo = Depends(
            Provide[Container.event_catalog_query_repo]
        ),
    ) -> Self:
        return cls(
            user_query_repo=user_query_repo,
            ticket_query_repo=ticket_query_repo,
            event_catalog_query_repo=event_catalog_query_repo,
        )

    @Logger.io
    async def export_users(self) -> CsvExport:
        users = await self.user_query_repo.list_all()
        if not users:
            raise NotFoundError('No users found')

        rows = [
            [
                str(user.id),
                user.username,
                user.email,
                user.full_name,
                yes_no(user.is_organizer),
                yes_no(user.is_super_admin),
            ]
            for user in users
        ]
        Logger.base.info(f'📤 [EXPORT] {len(rows)} users')
        return CsvExport(
            filename=f'users_export_{export_timestamp()}.csv',
            header=USER_EXPORT_HEADER,
            rows=rows,
        )

    @Logger.io
    async def export_tickets(self) -> CsvExport:
        tickets = await self.ticket_query_repo.list_all()
        if not tickets:
            raise NotFoundError('No tickets found')

        users = {user.id: user for user in await self.user_query_repo.list_all()}
        events = {event.id: event for event in await self.event_catalog_query_repo.list_events()}
        ticket_types = {
            ticket_type.id: ticket_type
            for ticket_type in await self.event_catalog_query_repo.list_ticket_types()
        }

        rows = []
        for ticket in tickets:
            user = users.get(ticket.user_id)
            event = events.get(ticket.event_id)
            ticket_type = ticket_types.get(ticket.ticket_type_id)
            rows.append(
                [
                    str(ticket.id),
                    ticket.reference_number,
                    str(ticket.user_id),
                    user.full_name if user else 'Unknown User',
                    str(ticket.event_id),
                    event.title if event else 'Unknown Event',
                    str(ticket.ticket_type_id),
                    ticket_type.name if ticket_type else 'Unknown Ticket Type',
                    f'${ticket_type.price:.2f}' if ticket_type else 'N/A',
                    _format_datetime(ticket.purchase_date),
                    'Issued',
                ]
            )

        Logger.base.info(f'📤 [EXPORT] {len(rows)} tickets')
        return CsvExport(
            filename=f'ticket_sales_{export_timestamp()}.csv',
            header=TICKET_EXPORT_HEADER,
            rows=rows,
        )

    @Logger.io
    async def export_events(self) -> CsvExport:
        events = await self.event_catalog_query_repo.list_events()
        if not events:
            raise NotFoundError('No events found')

        organizers: Dict[Optional[int], str] = {
            user.id: user.full_name for user in await self.user_query_repo.list_all()
        }
        rows = [
            [
                str(event.id),
                event.title,
                _format_datetime(event.date),
                event.location,
                event.address,
                organizers.get(event.organized_by_id, 'Unknown'),
                yes_no(event.featured),
                ', '.join(event.tags),
            ]
            for event in events
        ]

        Logger.base.info(f'📤 [EXPORT] {len(rows)} events')
        return CsvExport(
            filename=f'events_export_{export_timestamp()}.csv',
            header=EVENT_EXPORT_HEADER,
            rows=rows,
        )
