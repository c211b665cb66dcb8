"""Row -> entity conversions shared by the catalog and ticket repositories"""

from src.service.partier.domain.entity.event_entity import EventEntity
from src.service.partier.domain.entity.performer_entity import PerformerEntity
from src.service.partier.domain.entity.ticket_entity import TicketEntity
from src.service.partier.domain.entity.ticket_type_entity import TicketTypeEntity
from src.service.partier.driven_adapter.model.event_model import EventModel
from src.service.partier.driven_adapter.model.performer_model import PerformerModel
from src.service.partier.driven_adapter.model.ticket_model import TicketModel
from src.service.partier.driven_adapter.model.ticket_type_model import TicketTypeModel


def event_to_entity(event_model: EventModel) -> EventEntity:
    return EventEntity(
        id=event_model.id,
        title=event_model.title,
        description=event_model.description,
        image_url=event_model.image_url,
        date=event_model.date,
        location=event_model.location,
        address=event_model.address,
        organized_by_id=event_model.organized_by_id,
        featured=event_model.featured,
        tags=list(event_model.tags or []),
    )


def ticket_type_to_entity(ticket_type_model: TicketTypeModel) -> TicketTypeEntity:
    return TicketTypeEntity(
        id=ticket_type_model.id,
        event_id=ticket_type_model.event_id,
        name=ticket_type_model.name,
        description=ticket_type_model.description,
        price=ticket_type_model.price,
        available=ticket_type_model.available,
    )


def performer_to_entity(performer_model: PerformerModel) -> PerformerEntity:
    return PerformerEntity(
        id=performer_model.id,
        event_id=performer_model.event_id,
        name=performer_model.name,
        image_url=performer_model.image_url,
        time=performer_model.time,
        is_headliner=performer_model.is_headliner,
    )


def ticket_to_entity(ticket_model: TicketModel) -> TicketEntity:
    return TicketEntity(
        id=ticket_model.id,
        user_id=ticket_model.user_id,
        event_id=ticket_model.event_id,
        ticket_type_id=ticket_model.ticket_type_id,
        quantity=ticket_model.quantity,
        total_price=ticket_model.total_price,
        reference_number=ticket_model.reference_number,
        payment_details=dict(ticket_model.payment_details or {}),
        purchase_date=ticket_model.purchase_date,
    )
