from typing import Any, Dict

from fastapi.testclient import TestClient

from src.platform.constant.route_constant import (
    AUTH_LOGIN,
    AUTH_REGISTER,
    EVENT_CREATE,
    PERFORMER_CREATE,
    TICKET_ISSUE,
    TICKET_TYPE_CREATE,
)
from test.util_constant import (
    EVENT_ADDRESS,
    EVENT_DATE,
    EVENT_DESCRIPTION,
    EVENT_IMAGE_URL,
    EVENT_LOCATION,
    EVENT_TITLE,
    TICKET_TYPE_NAME,
    TICKET_TYPE_PRICE,
)


def login_user(client: TestClient, username: str, password: str) -> Any:
    """Helper function to login a user; the session cookie stays on the client."""
    login_response = client.post(
        AUTH_LOGIN,
        json={'username': username, 'password': password},
    )
    assert login_response.status_code == 200, f'Login failed: {login_response.text}'
    return login_response


def assert_response_status(response, expected_status: int, message: str | None = None):
    response_text = getattr(response, 'text', getattr(response, 'content', 'N/A'))
    assert response.status_code == expected_status, (
        message or f'Expected {expected_status}, got {response.status_code}: {response_text}'
    )


def create_user(
    client: TestClient, username: str, password: str, email: str, full_name: str
) -> Dict[str, Any]:
    user_data = {
        'username': username,
        'password': password,
        'email': email,
        'fullName': full_name,
    }
    response = client.post(AUTH_REGISTER, json=user_data)
    assert_response_status(response, 201, f'Failed to register {username}')
    return response.json()


def create_event(client: TestClient, **overrides: Any) -> Dict[str, Any]:
    event_data = {
        'title': EVENT_TITLE,
        'description': EVENT_DESCRIPTION,
        'imageUrl': EVENT_IMAGE_URL,
        'date': EVENT_DATE,
        'location': EVENT_LOCATION,
        'address': EVENT_ADDRESS,
        'featured': False,
        'tags': ['techno'],
        **overrides,
    }
    response = client.post(EVENT_CREATE, json=event_data)
    assert_response_status(response, 201, 'Failed to create event')
    return response.json()


def create_ticket_type(
    client: TestClient,
    event_id: int,
    *,
    name: str = TICKET_TYPE_NAME,
    price: str = TICKET_TYPE_PRICE,
    available: int = 10,
) -> Dict[str, Any]:
    response = client.post(
        TICKET_TYPE_CREATE,
        json={
            'eventId': event_id,
            'name': name,
            'description': 'Dance floor access',
            'price': price,
            'available': available,
        },
    )
    assert_response_status(response, 201, 'Failed to create ticket type')
    return response.json()


def create_performer(client: TestClient, event_id: int, name: str, **overrides: Any) -> Dict[str, Any]:
    response = client.post(
        PERFORMER_CREATE,
        json={'eventId': event_id, 'name': name, 'time': '23:00', **overrides},
    )
    assert_response_status(response, 201, 'Failed to create performer')
    return response.json()


def purchase_ticket(
    client: TestClient, event_id: int, ticket_type_id: int, quantity: int = 1, **extra: Any
) -> Any:
    return client.post(
        TICKET_ISSUE,
        json={
            'eventId': event_id,
            'ticketTypeId': ticket_type_id,
            'quantity': quantity,
            **extra,
        },
    )
