"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.partier.app.command import (
    issue_ticket_use_case,
    manage_event_use_case,
    manage_ticket_type_use_case,
    manage_user_use_case,
    register_user_use_case,
)
from src.service.partier.app.query import (
    export_csv_use_case,
    get_event_use_case,
    get_ticket_confirmation_use_case,
    get_ticket_use_case,
    list_events_use_case,
    list_users_use_case,
    validate_ticket_use_case,
)
from src.service.partier.driving_adapter.http_controller import user_controller


WIRE_MODULES: list[ModuleType] = [
    register_user_use_case,
    manage_user_use_case,
    list_users_use_case,
    manage_event_use_case,
    manage_ticket_type_use_case,
    list_events_use_case,
    get_event_use_case,
    issue_ticket_use_case,
    get_ticket_use_case,
    get_ticket_confirmation_use_case,
    validate_ticket_use_case,
    export_csv_use_case,
    user_controller,
]
