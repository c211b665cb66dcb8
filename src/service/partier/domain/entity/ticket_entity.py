from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional

import attrs

from src.platform.exception.exceptions import DomainError


@attrs.define
class TicketEntity:
    """An issued ticket. Immutable once persisted: no update or delete path exists."""

    user_id: int
    event_id: int
    ticket_type_id: int
    quantity: int
    total_price: Decimal = attrs.field(converter=Decimal)
    reference_number: str = ''
    payment_details: Dict[str, Any] = attrs.field(factory=dict)
    purchase_date: Optional[datetime] = None
    id: Optional[int] = None

    @staticmethod
    def validate_quantity(quantity: int) -> None:
        if quantity <= 0:
            raise DomainError('Quantity must be a positive integer')

    def with_reference(self, reference_number: str) -> 'TicketEntity':
        return attrs.evolve(self, reference_number=reference_number)
