from typing import List

from fastapi import APIRouter, Depends, Response, status

from src.platform.constant.route_constant import (
    EVENT_CREATE,
    EVENT_DELETE,
    EVENT_FEATURED,
    EVENT_GET,
    EVENT_LIST,
    EVENT_PERFORMERS,
    EVENT_TICKET_TYPES,
    EVENT_UPDATE,
    ORGANIZER_EVENTS,
    PERFORMER_CREATE,
    TICKET_TYPE_CREATE,
    TICKET_TYPE_GET,
    TICKET_TYPE_UPDATE,
)
from src.platform.logging.loguru_io import Logger
from src.service.partier.app.command.manage_event_use_case import ManageEventUseCase
from src.service.partier.app.command.manage_ticket_type_use_case import ManageTicketTypeUseCase
from src.service.partier.app.query.get_event_use_case import GetEventUseCase
from src.service.partier.app.query.list_events_use_case import ListEventsUseCase
from src.service.partier.domain.entity.event_entity import EventEntity
from src.service.partier.domain.entity.performer_entity import PerformerEntity
from src.service.partier.domain.entity.ticket_type_entity import TicketTypeEntity
from src.service.partier.domain.entity.user_entity import UserEntity
from src.service.partier.driving_adapter.http_controller.auth.role_auth import require_organizer
from src.service.partier.driving_adapter.schema.event_schema import (
    EventCreateRequest,
    EventResponse,
    EventUpdateRequest,
    PerformerCreateRequest,
    PerformerResponse,
    TicketTypeCreateRequest,
    TicketTypeResponse,
    TicketTypeUpdateRequest,
)


router = APIRouter(tags=['events'])


# ============================ Events ============================


@router.get(EVENT_LIST, status_code=status.HTTP_200_OK)
@Logger.io
async def list_events(
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> List[EventResponse]:
    events = await use_case.list_all()
    return [EventResponse.model_validate(event) for event in events]


@router.get(EVENT_FEATURED, status_code=status.HTTP_200_OK)
@Logger.io
async def list_featured_events(
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> List[EventResponse]:
    events = await use_case.list_featured()
    return [EventResponse.model_validate(event) for event in events]


@router.get(EVENT_GET, status_code=status.HTTP_200_OK)
@Logger.io
async def get_event(
    event_id: int,
    use_case: GetEventUseCase = Depends(GetEventUseCase.depends),
) -> EventResponse:
    event = await use_case.get_by_id(event_id=event_id)
    return EventResponse.model_validate(event)


@router.post(EVENT_CREATE, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_event(
    request: EventCreateRequest,
    current_user: UserEntity = Depends(require_organizer),
    use_case: ManageEventUseCase = Depends(ManageEventUseCase.depends),
) -> EventResponse:
    event = EventEntity(
        title=request.title,
        description=request.description,
        image_url=request.image_url,
        date=request.date,
        location=request.location,
        address=request.address,
        organized_by_id=request.organized_by_id or current_user.id,  # type: ignore[arg-type]
        featured=request.featured,
        tags=request.tags,
    )
    created = await use_case.create(event=event)
    return EventResponse.model_validate(created)


@router.put(EVENT_UPDATE, status_code=status.HTTP_200_OK)
@Logger.io
async def update_event(
    event_id: int,
    request: EventUpdateRequest,
    current_user: UserEntity = Depends(require_organizer),
    use_case: ManageEventUseCase = Depends(ManageEventUseCase.depends),
) -> EventResponse:
    changes = request.model_dump(exclude_unset=True, exclude_none=True)
    updated = await use_case.update(event_id=event_id, changes=changes)
    return EventResponse.model_validate(updated)


@router.delete(EVENT_DELETE, status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_event(
    event_id: int,
    current_user: UserEntity = Depends(require_organizer),
    use_case: ManageEventUseCase = Depends(ManageEventUseCase.depends),
) -> Response:
    await use_case.delete(event_id=event_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(ORGANIZER_EVENTS, status_code=status.HTTP_200_OK)
@Logger.io
async def list_organizer_events(
    organizer_id: int,
    current_user: UserEntity = Depends(require_organizer),
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> List[EventResponse]:
    events = await use_case.list_by_organizer(organizer_id=organizer_id)
    return [EventResponse.model_validate(event) for event in events]


# ============================ Ticket types ============================


@router.get(EVENT_TICKET_TYPES, status_code=status.HTTP_200_OK)
@Logger.io
async def list_event_ticket_types(
    event_id: int,
    use_case: GetEventUseCase = Depends(GetEventUseCase.depends),
) -> List[TicketTypeResponse]:
    ticket_types = await use_case.list_ticket_types(event_id=event_id)
    return [TicketTypeResponse.model_validate(ticket_type) for ticket_type in ticket_types]


@router.get(TICKET_TYPE_GET, status_code=status.HTTP_200_OK)
@Logger.io
async def get_ticket_type(
    ticket_type_id: int,
    use_case: GetEventUseCase = Depends(GetEventUseCase.depends),
) -> TicketTypeResponse:
    ticket_type = await use_case.get_ticket_type(ticket_type_id=ticket_type_id)
    return TicketTypeResponse.model_validate(ticket_type)


@router.post(TICKET_TYPE_CREATE, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_ticket_type(
    request: TicketTypeCreateRequest,
    current_user: UserEntity = Depends(require_organizer),
    use_case: ManageTicketTypeUseCase = Depends(ManageTicketTypeUseCase.depends),
) -> TicketTypeResponse:
    ticket_type = TicketTypeEntity(
        event_id=request.event_id,
        name=request.name,
        description=request.description,
        price=request.price,
        available=request.available,
    )
    created = await use_case.create_ticket_type(ticket_type=ticket_type)
    return TicketTypeResponse.model_validate(created)


@router.put(TICKET_TYPE_UPDATE, status_code=status.HTTP_200_OK)
@Logger.io
async def update_ticket_type(
    ticket_type_id: int,
    request: TicketTypeUpdateRequest,
    current_user: UserEntity = Depends(require_organizer),
    use_case: ManageTicketTypeUseCase = Depends(ManageTicketTypeUseCase.depends),
) -> TicketTypeResponse:
    changes = request.model_dump(exclude_unset=True, exclude_none=True)
    updated = await use_case.update_ticket_type(ticket_type_id=ticket_type_id, changes=changes)
    return TicketTypeResponse.model_validate(updated)


# ============================ Performers ============================


@router.get(EVENT_PERFORMERS, status_code=status.HTTP_200_OK)
@Logger.io
async def list_event_performers(
    event_id: int,
    use_case: GetEventUseCase = Depends(GetEventUseCase.depends),
) -> List[PerformerResponse]:
    performers = await use_case.list_performers(event_id=event_id)
    return [PerformerResponse.model_validate(performer) for performer in performers]


@router.post(PERFORMER_CREATE, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_performer(
    request: PerformerCreateRequest,
    current_user: UserEntity = Depends(require_organizer),
    use_case: ManageTicketTypeUseCase = Depends(ManageTicketTypeUseCase.depends),
) -> PerformerResponse:
    performer = PerformerEntity(
        event_id=request.event_id,
        name=request.name,
        image_url=request.image_url,
        time=request.time,
        is_headliner=request.is_headliner,
    )
    created = await use_case.create_performer(performer=performer)
    return PerformerResponse.model_validate(created)
