from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from src.service.partier.domain.scanner.ticket_validation import ScanResult
from src.service.partier.driving_adapter.schema.base_schema import CamelModel


class ScanRequest(CamelModel):
    code: str = Field(..., description='Decoded QR payload')

    model_config = ConfigDict(json_schema_extra={'example': {'code': 'TIX12345'}})


class ScanResultResponse(CamelModel):
    state: str
    valid: bool
    message: str
    reference_number: Optional[str] = None
    quantity: Optional[int] = None
    purchase_date: Optional[datetime] = None

    @classmethod
    def from_result(cls, result: ScanResult) -> 'ScanResultResponse':
        ticket = result.ticket
        return cls(
            state=result.state.value,
            valid=result.is_valid,
            message=result.message,
            reference_number=ticket.reference_number if ticket else None,
            quantity=ticket.quantity if ticket else None,
            purchase_date=ticket.purchase_date if ticket else None,
        )
