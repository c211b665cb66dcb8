"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.partier.driven_adapter.model.event_model import EventModel
from src.service.partier.driven_adapter.model.performer_model import PerformerModel
from src.service.partier.driven_adapter.model.ticket_model import TicketModel
from src.service.partier.driven_adapter.model.ticket_type_model import TicketTypeModel
from src.service.partier.driven_adapter.model.user_model import UserModel
from src.service.partier.driven_adapter.model.user_session_model import UserSessionModel

__all__ = [
    'EventModel',
    'PerformerModel',
    'TicketModel',
    'TicketTypeModel',
    'UserModel',
    'UserSessionModel',
]
