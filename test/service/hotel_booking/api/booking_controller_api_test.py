"""
HTTP tests for /api/booking

The app runs with the real router, DI wiring and exception handlers; the
container's repository and unit of work providers are overridden with the
in-memory fakes so no database is needed.
"""

from collections.abc import AsyncIterator, Generator
from contextlib import asynccontextmanager

from dependency_injector import providers
from fastapi import FastAPI
from fastapi.testclient import TestClient
import pytest

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.service.hotel_booking.app.service.booking_eligibility_checker import (
    BookingEligibilityChecker,
)
from src.service.hotel_booking.domain.enum.ticket_status import TicketStatus
from src.service.hotel_booking.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from test.service.hotel_booking.fakes import (
    REMOTE_TICKET_TYPE,
    FakeBookingQueryRepo,
    FakeUnitOfWork,
    InMemoryStore,
)


BOOKING_URL = '/api/booking'


def _auth_headers(user_id: int) -> dict[str, str]:
    return {'Authorization': f'Bearer {JwtAuth().create_jwt_token(user_id=user_id)}'}


@pytest.fixture
def client(
    store: InMemoryStore, eligibility_checker: BookingEligibilityChecker
) -> Generator[TestClient, None, None]:
    @asynccontextmanager
    async def test_lifespan(app: FastAPI) -> AsyncIterator[None]:
        container.wire(modules=WIRE_MODULES)
        yield
        container.unwire()

    app = create_app(lifespan=test_lifespan, title_suffix=' (Test)')

    with (
        container.booking_eligibility_checker.override(providers.Object(eligibility_checker)),
        container.booking_query_repo.override(providers.Object(FakeBookingQueryRepo(store))),
        container.unit_of_work.override(providers.Factory(FakeUnitOfWork, store)),
    ):
        with TestClient(app) as test_client:
            yield test_client


@pytest.mark.integration
class TestBookingApi:
    def test_get_booking_returns_booking_with_room(
        self, client: TestClient, store: InMemoryStore
    ) -> None:
        # Arrange
        store.add_eligible_user(user_id=1)
        store.add_room(room_id=3, capacity=2, hotel_id=9)
        booking = store.add_booking(user_id=1, room_id=3)

        # Act
        response = client.get(BOOKING_URL, headers=_auth_headers(1))

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body['id'] == booking.id
        assert body['room']['id'] == 3
        assert body['room']['name'] == '103'
        assert body['room']['capacity'] == 2
        assert body['room']['hotel_id'] == 9

    def test_get_booking_without_booking(self, client: TestClient, store: InMemoryStore) -> None:
        store.add_eligible_user(user_id=1)

        response = client.get(BOOKING_URL, headers=_auth_headers(1))

        assert response.status_code == 404
        assert response.json() == {'detail': 'Booking not found'}

    def test_requests_without_token_are_unauthorized(self, client: TestClient) -> None:
        assert client.get(BOOKING_URL).status_code == 401
        assert client.post(BOOKING_URL, json={'room_id': 1}).status_code == 401
        assert client.put(f'{BOOKING_URL}/1', json={'room_id': 1}).status_code == 401

    def test_create_then_get_booking(self, client: TestClient, store: InMemoryStore) -> None:
        """
        Given: Eligible user, room with capacity 1
        When: POST /api/booking, then GET /api/booking
        Then: 200 with booking_id; GET returns that booking in that room
        """
        store.add_eligible_user(user_id=1)
        store.add_room(room_id=1, capacity=1)

        created = client.post(BOOKING_URL, json={'room_id': 1}, headers=_auth_headers(1))

        assert created.status_code == 200
        booking_id = created.json()['booking_id']

        fetched = client.get(BOOKING_URL, headers=_auth_headers(1))
        assert fetched.json()['id'] == booking_id
        assert fetched.json()['room']['id'] == 1

    def test_create_booking_in_full_room(self, client: TestClient, store: InMemoryStore) -> None:
        store.add_eligible_user(user_id=1)
        store.add_eligible_user(user_id=2)
        store.add_room(room_id=1, capacity=1)
        client.post(BOOKING_URL, json={'room_id': 1}, headers=_auth_headers(1))

        response = client.post(BOOKING_URL, json={'room_id': 1}, headers=_auth_headers(2))

        assert response.status_code == 403
        assert response.json() == {'detail': 'Room is full'}

    @pytest.mark.parametrize(
        ('setup', 'status_code'),
        [
            ('no_enrollment', 404),
            ('unpaid', 402),
            ('remote', 403),
        ],
    )
    def test_create_booking_eligibility_errors(
        self, client: TestClient, store: InMemoryStore, setup: str, status_code: int
    ) -> None:
        if setup == 'unpaid':
            store.add_eligible_user(user_id=1, status=TicketStatus.RESERVED)
        elif setup == 'remote':
            store.add_eligible_user(user_id=1, ticket_type=REMOTE_TICKET_TYPE)
        store.add_room(room_id=1, capacity=1)

        response = client.post(BOOKING_URL, json={'room_id': 1}, headers=_auth_headers(1))

        assert response.status_code == status_code
        assert store.bookings == {}

    @pytest.mark.parametrize('body', [{}, {'room_id': 0}, {'room_id': 'abc'}])
    def test_invalid_room_id_is_bad_request(self, client: TestClient, body: dict) -> None:
        response = client.post(BOOKING_URL, json=body, headers=_auth_headers(1))

        assert response.status_code == 400

    def test_move_booking(self, client: TestClient, store: InMemoryStore) -> None:
        store.add_eligible_user(user_id=1)
        store.add_room(room_id=1, capacity=1)
        store.add_room(room_id=2, capacity=1)
        booking = store.add_booking(user_id=1, room_id=1)

        response = client.put(
            f'{BOOKING_URL}/{booking.id}', json={'room_id': 2}, headers=_auth_headers(1)
        )

        assert response.status_code == 200
        assert response.json() == {'booking_id': booking.id}
        assert store.bookings[booking.id].room_id == 2

    def test_move_booking_into_same_room(self, client: TestClient, store: InMemoryStore) -> None:
        store.add_eligible_user(user_id=1)
        store.add_room(room_id=1, capacity=3)
        booking = store.add_booking(user_id=1, room_id=1)

        response = client.put(
            f'{BOOKING_URL}/{booking.id}', json={'room_id': 1}, headers=_auth_headers(1)
        )

        assert response.status_code == 403

    def test_move_other_users_booking(self, client: TestClient, store: InMemoryStore) -> None:
        store.add_eligible_user(user_id=1)
        store.add_eligible_user(user_id=2)
        store.add_room(room_id=1, capacity=1)
        store.add_room(room_id=2, capacity=1)
        booking = store.add_booking(user_id=1, room_id=1)

        response = client.put(
            f'{BOOKING_URL}/{booking.id}', json={'room_id': 2}, headers=_auth_headers(2)
        )

        assert response.status_code == 403
        assert store.bookings[booking.id].room_id == 1

    def test_health(self, client: TestClient) -> None:
        assert client.get('/health').json()['status'] == 'healthy'
