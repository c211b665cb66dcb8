from decimal import Decimal
from typing import Optional

import attrs

from src.platform.exception.exceptions import DomainError


@attrs.define
class TicketTypeEntity:
    event_id: int
    name: str
    description: str
    price: Decimal = attrs.field(converter=Decimal)
    available: int = 0
    id: Optional[int] = None

    def __attrs_post_init__(self) -> None:
        self.validate_inventory(price=self.price, available=self.available)

    @staticmethod
    def validate_inventory(*, price: Optional[Decimal], available: Optional[int]) -> None:
        if price is not None and price < 0:
            raise DomainError('Ticket price cannot be negative')
        if available is not None and available < 0:
            raise DomainError('Available ticket count cannot be negative')

    def belongs_to(self, event_id: int) -> bool:
        return self.event_id == event_id


TICKET_TYPE_UPDATABLE_FIELDS = frozenset({'name', 'description', 'price', 'available'})
