from decimal import Decimal
import re

from fastapi.testclient import TestClient
import pytest

from src.platform.constant.route_constant import (
    TICKET_ALL,
    TICKET_BY_REFERENCE,
    TICKET_BY_USER,
    TICKET_CONFIRMATION,
    TICKET_GET,
    TICKET_TYPE_GET,
)
from test.shared.utils import (
    assert_response_status,
    create_event,
    create_ticket_type,
    create_user,
    purchase_ticket,
)
from test.util_constant import (
    ANOTHER_USER_EMAIL,
    ANOTHER_USER_FULL_NAME,
    ANOTHER_USER_USERNAME,
    DEFAULT_PASSWORD,
    EVENT_TITLE,
)


REFERENCE_PATTERN = re.compile(r'^TIX\d{5}$')


@pytest.fixture
def on_sale(client: TestClient, organizer_user, login_as):
    """An event with a 100.00 ticket type (10 left), created by the organizer."""
    login_as(organizer_user)
    event = create_event(client)
    ticket_type = create_ticket_type(client, event['id'], price='100.00', available=10)
    client.cookies.clear()
    return {'event': event, 'ticket_type': ticket_type}


def _available(client: TestClient, ticket_type_id: int) -> int:
    response = client.get(TICKET_TYPE_GET.format(ticket_type_id=ticket_type_id))
    assert_response_status(response, 200)
    return response.json()['available']


@pytest.mark.integration
class TestTicketPurchase:
    def test_purchase_issues_ticket(self, client: TestClient, on_sale, regular_user, login_as):
        """
        Given an event with a 100.00 ticket type
        When a logged-in user buys one ticket
        Then the ticket is priced on the server with fee and tax, and inventory drops by one
        """
        # Arrange
        login_as(regular_user)

        # Act
        response = purchase_ticket(
            client,
            on_sale['event']['id'],
            on_sale['ticket_type']['id'],
            quantity=1,
            totalPrice='117.00',
            paymentDetails={'method': 'creditcard'},
        )

        # Assert
        assert_response_status(response, 201)
        ticket = response.json()
        assert REFERENCE_PATTERN.match(ticket['referenceNumber'])
        assert ticket['userId'] == regular_user['id']
        assert ticket['quantity'] == 1
        assert Decimal(ticket['totalPrice']) == Decimal('117.00')
        assert ticket['purchaseDate']
        assert ticket['paymentDetails']['method'] == 'Credit Card'
        assert ticket['paymentDetails']['last4'] == '4242'
        assert Decimal(str(ticket['paymentDetails']['serviceFee'])) == Decimal('10.00')
        assert Decimal(str(ticket['paymentDetails']['tax'])) == Decimal('7.00')
        assert _available(client, on_sale['ticket_type']['id']) == 9

    def test_total_is_optional(self, client: TestClient, on_sale, regular_user, login_as):
        login_as(regular_user)

        response = purchase_ticket(
            client, on_sale['event']['id'], on_sale['ticket_type']['id'], quantity=2
        )

        assert_response_status(response, 201)
        assert Decimal(response.json()['totalPrice']) == Decimal('234.00')

    def test_total_mismatch(self, client: TestClient, on_sale, regular_user, login_as):
        # Arrange
        login_as(regular_user)

        # Act
        response = purchase_ticket(
            client,
            on_sale['event']['id'],
            on_sale['ticket_type']['id'],
            quantity=1,
            totalPrice='1.00',
        )

        # Assert
        assert_response_status(response, 400)
        assert response.json()['detail'] == 'Total price mismatch'
        assert _available(client, on_sale['ticket_type']['id']) == 10

    @pytest.mark.parametrize('total_price', ['1e30', '-117.00', 'Infinity'])
    def test_unusable_client_total(
        self, client: TestClient, on_sale, regular_user, login_as, total_price
    ):
        """
        Given a client total that cannot be a real price
        When it is sent with a purchase
        Then the request is a bad request and inventory is untouched
        """
        # Arrange
        login_as(regular_user)

        # Act
        response = purchase_ticket(
            client,
            on_sale['event']['id'],
            on_sale['ticket_type']['id'],
            totalPrice=total_price,
        )

        # Assert
        assert_response_status(response, 400)
        assert _available(client, on_sale['ticket_type']['id']) == 10

    @pytest.mark.parametrize('quantity', [0, -1])
    def test_non_positive_quantity(
        self, client: TestClient, on_sale, regular_user, login_as, quantity
    ):
        login_as(regular_user)

        response = purchase_ticket(
            client, on_sale['event']['id'], on_sale['ticket_type']['id'], quantity=quantity
        )

        assert_response_status(response, 400)

    def test_sold_out(self, client: TestClient, on_sale, regular_user, login_as):
        # Arrange
        login_as(regular_user)
        ticket_type_id = on_sale['ticket_type']['id']
        first = purchase_ticket(client, on_sale['event']['id'], ticket_type_id, quantity=8)

        # Act
        second = purchase_ticket(client, on_sale['event']['id'], ticket_type_id, quantity=3)

        # Assert
        assert_response_status(first, 201)
        assert_response_status(second, 409)
        assert second.json()['detail'] == 'Not enough tickets available'
        assert _available(client, ticket_type_id) == 2

    def test_ticket_type_from_another_event(
        self, client: TestClient, on_sale, organizer_user, regular_user, login_as
    ):
        # Arrange
        login_as(organizer_user)
        other_event = create_event(client, title='Bass Cathedral')
        login_as(regular_user)

        # Act
        response = purchase_ticket(client, other_event['id'], on_sale['ticket_type']['id'])

        # Assert
        assert_response_status(response, 400)
        assert response.json()['detail'] == 'Ticket type does not belong to this event'

    def test_unknown_event(self, client: TestClient, on_sale, regular_user, login_as):
        login_as(regular_user)

        response = purchase_ticket(client, 9999, on_sale['ticket_type']['id'])

        assert_response_status(response, 404)

    def test_organizer_issues_for_another_user(
        self, client: TestClient, on_sale, organizer_user, regular_user, login_as
    ):
        login_as(organizer_user)

        response = purchase_ticket(
            client,
            on_sale['event']['id'],
            on_sale['ticket_type']['id'],
            userId=regular_user['id'],
        )

        assert_response_status(response, 201)
        assert response.json()['userId'] == regular_user['id']

    def test_regular_user_cannot_issue_for_another_user(
        self, client: TestClient, on_sale, organizer_user, regular_user, login_as
    ):
        login_as(regular_user)

        response = purchase_ticket(
            client,
            on_sale['event']['id'],
            on_sale['ticket_type']['id'],
            userId=organizer_user['id'],
        )

        assert_response_status(response, 403)


@pytest.mark.integration
class TestTicketLookup:
    @pytest.fixture
    def issued(self, client: TestClient, on_sale, regular_user, login_as):
        login_as(regular_user)
        response = purchase_ticket(
            client, on_sale['event']['id'], on_sale['ticket_type']['id'], quantity=2
        )
        assert_response_status(response, 201)
        client.cookies.clear()
        return response.json()

    def test_by_reference_and_by_id_are_public(self, client: TestClient, issued):
        by_reference = client.get(TICKET_BY_REFERENCE.format(reference=issued['referenceNumber']))
        by_id = client.get(TICKET_GET.format(ticket_id=issued['id']))

        assert_response_status(by_reference, 200)
        assert by_reference.json()['id'] == issued['id']
        assert_response_status(by_id, 200)
        assert by_id.json()['referenceNumber'] == issued['referenceNumber']

    def test_unknown_reference(self, client: TestClient):
        response = client.get(TICKET_BY_REFERENCE.format(reference='TIX00000'))

        assert_response_status(response, 404)
        assert response.json()['detail'] == 'Ticket not found'

    def test_confirmation(self, client: TestClient, issued, on_sale):
        # Act
        response = client.get(TICKET_CONFIRMATION.format(reference=issued['referenceNumber']))

        # Assert
        assert_response_status(response, 200)
        body = response.json()
        assert body['ticket']['referenceNumber'] == issued['referenceNumber']
        assert body['event']['title'] == EVENT_TITLE
        assert body['ticketType']['id'] == on_sale['ticket_type']['id']
        assert re.match(r'^[A-Z][a-z]+ \d{1,2}, \d{4}$', body['formattedDate'])
        assert re.match(r'^\d{2}:\d{2} (AM|PM)$', body['formattedTime'])

    def test_own_tickets(self, client: TestClient, issued, regular_user, login_as):
        login_as(regular_user)

        response = client.get(TICKET_BY_USER.format(user_id=regular_user['id']))

        assert_response_status(response, 200)
        assert [ticket['id'] for ticket in response.json()] == [issued['id']]

    def test_organizer_sees_anyones_tickets(
        self, client: TestClient, issued, regular_user, organizer_user, login_as
    ):
        login_as(organizer_user)

        by_user = client.get(TICKET_BY_USER.format(user_id=regular_user['id']))
        everything = client.get(TICKET_ALL)

        assert_response_status(by_user, 200)
        assert len(by_user.json()) == 1
        assert_response_status(everything, 200)
        assert [ticket['id'] for ticket in everything.json()] == [issued['id']]

    def test_other_user_cannot_see_tickets(self, client: TestClient, issued, regular_user):
        create_user(
            client,
            ANOTHER_USER_USERNAME,
            DEFAULT_PASSWORD,
            ANOTHER_USER_EMAIL,
            ANOTHER_USER_FULL_NAME,
        )

        response = client.get(TICKET_BY_USER.format(user_id=regular_user['id']))

        assert_response_status(response, 403)
