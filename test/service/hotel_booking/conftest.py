import pytest

from src.service.hotel_booking.app.service.booking_eligibility_checker import (
    BookingEligibilityChecker,
)
from test.service.hotel_booking.fakes import (
    FakeEnrollmentQueryRepo,
    FakeTicketQueryRepo,
    FakeUnitOfWork,
    InMemoryStore,
)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def eligibility_checker(store: InMemoryStore) -> BookingEligibilityChecker:
    return BookingEligibilityChecker(
        enrollment_query_repo=FakeEnrollmentQueryRepo(store),
        ticket_query_repo=FakeTicketQueryRepo(store),
    )


@pytest.fixture
def uow(store: InMemoryStore) -> FakeUnitOfWork:
    return FakeUnitOfWork(store)
