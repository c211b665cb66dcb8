from typing import List

from fastapi import APIRouter, Depends, status

from src.platform.constant.route_constant import (
    TICKET_ALL,
    TICKET_BY_REFERENCE,
    TICKET_BY_USER,
    TICKET_CONFIRMATION,
    TICKET_GET,
    TICKET_ISSUE,
)
from src.platform.logging.loguru_io import Logger
from src.service.partier.app.command.issue_ticket_use_case import IssueTicketUseCase
from src.service.partier.app.query.get_ticket_confirmation_use_case import (
    GetTicketConfirmationUseCase,
)
from src.service.partier.app.query.get_ticket_use_case import GetTicketUseCase
from src.service.partier.domain.entity.user_entity import UserEntity
from src.service.partier.driving_adapter.http_controller.auth.role_auth import (
    ensure_can_view_tickets_of,
    get_current_user,
    require_organizer,
)
from src.service.partier.driving_adapter.schema.event_schema import (
    EventResponse,
    TicketTypeResponse,
)
from src.service.partier.driving_adapter.schema.ticket_schema import (
    TicketConfirmationResponse,
    TicketPurchaseRequest,
    TicketResponse,
)


router = APIRouter(tags=['tickets'])


@router.post(TICKET_ISSUE, status_code=status.HTTP_201_CREATED)
@Logger.io
async def purchase_ticket(
    request: TicketPurchaseRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: IssueTicketUseCase = Depends(IssueTicketUseCase.depends),
) -> TicketResponse:
    ticket = await use_case.issue(
        buyer=current_user,
        event_id=request.event_id,
        ticket_type_id=request.ticket_type_id,
        quantity=request.quantity,
        total_price=request.total_price,
        user_id=request.user_id,
        payment_method=request.payment_details.method if request.payment_details else None,
    )
    return TicketResponse.model_validate(ticket)


@router.get(TICKET_ALL, status_code=status.HTTP_200_OK)
@Logger.io
async def list_all_tickets(
    current_user: UserEntity = Depends(require_organizer),
    use_case: GetTicketUseCase = Depends(GetTicketUseCase.depends),
) -> List[TicketResponse]:
    tickets = await use_case.list_all()
    return [TicketResponse.model_validate(ticket) for ticket in tickets]


@router.get(TICKET_BY_USER, status_code=status.HTTP_200_OK)
@Logger.io
async def list_user_tickets(
    user_id: int,
    current_user: UserEntity = Depends(get_current_user),
    use_case: GetTicketUseCase = Depends(GetTicketUseCase.depends),
) -> List[TicketResponse]:
    ensure_can_view_tickets_of(current_user, user_id)
    tickets = await use_case.list_by_user(user_id=user_id)
    return [TicketResponse.model_validate(ticket) for ticket in tickets]


@router.get(TICKET_CONFIRMATION, status_code=status.HTTP_200_OK)
@Logger.io
async def get_ticket_confirmation(
    reference: str,
    use_case: GetTicketConfirmationUseCase = Depends(GetTicketConfirmationUseCase.depends),
) -> TicketConfirmationResponse:
    confirmation = await use_case.get_confirmation(reference_number=reference)
    return TicketConfirmationResponse(
        ticket=TicketResponse.model_validate(confirmation.ticket),
        event=EventResponse.model_validate(confirmation.event),
        ticket_type=TicketTypeResponse.model_validate(confirmation.ticket_type),
        formatted_date=confirmation.formatted_date,
        formatted_time=confirmation.formatted_time,
    )


@router.get(TICKET_BY_REFERENCE, status_code=status.HTTP_200_OK)
@Logger.io
async def get_ticket_by_reference(
    reference: str,
    use_case: GetTicketUseCase = Depends(GetTicketUseCase.depends),
) -> TicketResponse:
    ticket = await use_case.get_by_reference(reference_number=reference)
    return TicketResponse.model_validate(ticket)


@router.get(TICKET_GET, status_code=status.HTTP_200_OK)
@Logger.io
async def get_ticket(
    ticket_id: int,
    use_case: GetTicketUseCase = Depends(GetTicketUseCase.depends),
) -> TicketResponse:
    ticket = await use_case.get_by_id(ticket_id=ticket_id)
    return TicketResponse.model_validate(ticket)
