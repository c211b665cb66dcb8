from decimal import Decimal

from fastapi.testclient import TestClient
import pytest

from src.platform.constant.route_constant import (
    EVENT_BASE,
    EVENT_CREATE,
    EVENT_FEATURED,
    EVENT_PERFORMERS,
    EVENT_TICKET_TYPES,
    ORGANIZER_EVENTS,
    TICKET_TYPE_CREATE,
    TICKET_TYPE_GET,
)
from test.shared.utils import (
    assert_response_status,
    create_event,
    create_performer,
    create_ticket_type,
)
from test.util_constant import EVENT_DATE, EVENT_LOCATION, EVENT_TITLE


@pytest.mark.integration
class TestEventApi:
    def test_organizer_creates_event(self, client: TestClient, organizer_user, login_as):
        # Arrange
        login_as(organizer_user)

        # Act
        event = create_event(client, featured=True, tags=['techno', 'house'])

        # Assert
        assert event['id'] > 0
        assert event['title'] == EVENT_TITLE
        assert event['location'] == EVENT_LOCATION
        assert event['organizedById'] == organizer_user['id']
        assert event['featured'] is True
        assert event['tags'] == ['techno', 'house']
        assert event['date'].startswith(EVENT_DATE[:19])

    def test_blank_title_rejected(self, client: TestClient, organizer_user, login_as):
        login_as(organizer_user)

        response = client.post(
            EVENT_CREATE,
            json={
                'title': '',
                'description': 'x',
                'imageUrl': '',
                'date': EVENT_DATE,
                'location': 'x',
                'address': 'x',
            },
        )

        assert_response_status(response, 400)

    def test_listing_is_public(self, client: TestClient, organizer_user, login_as):
        # Arrange
        login_as(organizer_user)
        create_event(client, title='Neon Nights')
        create_event(client, title='Bass Cathedral', featured=True)
        client.cookies.clear()

        # Act
        everything = client.get(EVENT_BASE)
        featured = client.get(EVENT_FEATURED)

        # Assert
        assert_response_status(everything, 200)
        assert {event['title'] for event in everything.json()} == {
            'Neon Nights',
            'Bass Cathedral',
        }
        assert [event['title'] for event in featured.json()] == ['Bass Cathedral']

    def test_get_update_delete(self, client: TestClient, organizer_user, login_as):
        # Arrange
        login_as(organizer_user)
        event = create_event(client)
        event_url = f'{EVENT_BASE}/{event["id"]}'

        # Act
        updated = client.put(event_url, json={'title': 'Neon Nights II', 'featured': True})
        fetched = client.get(event_url)
        deleted = client.delete(event_url)
        after_delete = client.get(event_url)

        # Assert
        assert_response_status(updated, 200)
        assert updated.json()['title'] == 'Neon Nights II'
        assert updated.json()['location'] == EVENT_LOCATION
        assert fetched.json()['featured'] is True
        assert_response_status(deleted, 204)
        assert_response_status(after_delete, 404)
        assert after_delete.json()['detail'] == 'Event not found'

    def test_update_unknown_event(self, client: TestClient, organizer_user, login_as):
        login_as(organizer_user)

        response = client.put(f'{EVENT_BASE}/9999', json={'title': 'Ghost'})

        assert_response_status(response, 404)

    def test_organizer_events(
        self, client: TestClient, organizer_user, super_admin_user, login_as
    ):
        # Arrange
        login_as(organizer_user)
        create_event(client, title='Mine')
        login_as(super_admin_user)
        create_event(client, title='Not mine')

        # Act
        response = client.get(ORGANIZER_EVENTS.format(organizer_id=organizer_user['id']))

        # Assert
        assert_response_status(response, 200)
        assert [event['title'] for event in response.json()] == ['Mine']


@pytest.mark.integration
class TestTicketTypeAndPerformerApi:
    def test_ticket_types_for_event(self, client: TestClient, organizer_user, login_as):
        # Arrange
        login_as(organizer_user)
        event = create_event(client)

        # Act
        general = create_ticket_type(client, event['id'], price='25.00', available=100)
        vip = create_ticket_type(client, event['id'], name='VIP', price='80.00', available=5)
        listed = client.get(EVENT_TICKET_TYPES.format(event_id=event['id']))

        # Assert
        assert general['eventId'] == event['id']
        assert Decimal(general['price']) == Decimal('25.00')
        assert vip['available'] == 5
        assert_response_status(listed, 200)
        assert {ticket_type['name'] for ticket_type in listed.json()} == {
            'General Admission',
            'VIP',
        }

    def test_ticket_type_for_missing_event(self, client: TestClient, organizer_user, login_as):
        login_as(organizer_user)

        response = client.post(
            TICKET_TYPE_CREATE,
            json={'eventId': 9999, 'name': 'GA', 'price': '10.00', 'available': 1},
        )

        assert_response_status(response, 404)
        assert response.json()['detail'] == 'Event not found'

    def test_negative_price_rejected(self, client: TestClient, organizer_user, login_as):
        login_as(organizer_user)
        event = create_event(client)

        response = client.post(
            TICKET_TYPE_CREATE,
            json={'eventId': event['id'], 'name': 'GA', 'price': '-1.00', 'available': 1},
        )

        assert_response_status(response, 400)

    def test_update_ticket_type_inventory(self, client: TestClient, organizer_user, login_as):
        # Arrange
        login_as(organizer_user)
        event = create_event(client)
        ticket_type = create_ticket_type(client, event['id'], available=10)
        url = TICKET_TYPE_GET.format(ticket_type_id=ticket_type['id'])

        # Act
        updated = client.put(url, json={'available': 3})
        fetched = client.get(url)

        # Assert
        assert_response_status(updated, 200)
        assert fetched.json()['available'] == 3
        assert fetched.json()['name'] == ticket_type['name']

    def test_performers_for_event(self, client: TestClient, organizer_user, login_as):
        # Arrange
        login_as(organizer_user)
        event = create_event(client)

        # Act
        create_performer(client, event['id'], 'DJ Aurora', isHeadliner=True)
        create_performer(client, event['id'], 'MC Static')
        response = client.get(EVENT_PERFORMERS.format(event_id=event['id']))

        # Assert
        assert_response_status(response, 200)
        performers = {performer['name']: performer for performer in response.json()}
        assert set(performers) == {'DJ Aurora', 'MC Static'}
        assert performers['DJ Aurora']['isHeadliner'] is True
        assert performers['MC Static']['time'] == '23:00'
