from datetime import datetime, timezone
from typing import Optional

import attrs

from src.service.partier.domain.entity.ticket_entity import TicketEntity
from src.service.partier.domain.scanner.scan_state import ScanState


TICKET_NOT_FOUND = 'Ticket not found'
TICKET_EXPIRED = 'Ticket has expired'
TICKET_VALID = 'Valid ticket'


@attrs.frozen
class ScanResult:
    state: ScanState
    message: str
    code: str = ''
    ticket: Optional[TicketEntity] = None

    @property
    def is_valid(self) -> bool:
        return self.state == ScanState.VALID

    @classmethod
    def not_found(cls, code: str = '') -> 'ScanResult':
        return cls(state=ScanState.INVALID, message=TICKET_NOT_FOUND, code=code)


def _as_utc(moment: datetime) -> datetime:
    # SQLite hands back naive timestamps; they are stored as UTC
    return moment.replace(tzinfo=timezone.utc) if moment.tzinfo is None else moment


def evaluate_ticket(ticket: Optional[TicketEntity], *, now: datetime, code: str = '') -> ScanResult:
    """
    Door policy: found and not expired.

    Expiry is judged against the ticket's purchase timestamp, not the event
    date. A stored purchase date is always in the past, so every persisted
    ticket currently reports as expired.
    """
    if ticket is None:
        return ScanResult.not_found(code)

    if ticket.purchase_date is None or _as_utc(ticket.purchase_date) < _as_utc(now):
        return ScanResult(state=ScanState.INVALID, message=TICKET_EXPIRED, code=code, ticket=ticket)

    return ScanResult(state=ScanState.VALID, message=TICKET_VALID, code=code, ticket=ticket)
