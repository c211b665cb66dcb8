from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional

from pydantic import ConfigDict, Field

from src.service.partier.driving_adapter.schema.base_schema import CamelModel
from src.service.partier.driving_adapter.schema.event_schema import (
    EventResponse,
    TicketTypeResponse,
)


class PaymentDetailsRequest(CamelModel):
    method: Optional[str] = None


class TicketPurchaseRequest(CamelModel):
    event_id: int
    ticket_type_id: int
    quantity: int
    total_price: Optional[Decimal] = Field(None, ge=0, max_digits=12)
    user_id: Optional[int] = None
    payment_details: Optional[PaymentDetailsRequest] = None

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'eventId': 1,
                'ticketTypeId': 1,
                'quantity': 2,
                'totalPrice': '58.50',
                'paymentDetails': {'method': 'creditcard'},
            }
        }
    )


class TicketResponse(CamelModel):
    id: int
    user_id: int
    event_id: int
    ticket_type_id: int
    quantity: int
    total_price: Decimal
    purchase_date: Optional[datetime] = None
    reference_number: str
    payment_details: Dict[str, Any] = Field(default_factory=dict)


class TicketConfirmationResponse(CamelModel):
    ticket: TicketResponse
    event: EventResponse
    ticket_type: TicketTypeResponse
    formatted_date: str
    formatted_time: str
