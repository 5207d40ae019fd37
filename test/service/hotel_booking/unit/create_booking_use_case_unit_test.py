"""
Unit tests for CreateBookingUseCase

Test Focus:
1. Eligibility gate runs before any room lookup
2. Capacity: the room row is locked, a full room is Forbidden
3. One-booking-per-user policy (off by default)
4. Nothing is written unless the unit of work commits
"""

import pytest

from src.platform.exception.exceptions import (
    ForbiddenError,
    NotFoundError,
    PaymentRequiredError,
)
from src.service.hotel_booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.hotel_booking.app.query.get_booking_use_case import GetBookingUseCase
from src.service.hotel_booking.app.service.booking_eligibility_checker import (
    BookingEligibilityChecker,
)
from src.service.hotel_booking.domain.enum.ticket_status import TicketStatus
from test.service.hotel_booking.fakes import (
    INELIGIBLE_CASES,
    REMOTE_TICKET_TYPE,
    FakeBookingQueryRepo,
    FakeUnitOfWork,
    InMemoryStore,
    make_ineligible,
)


@pytest.mark.unit
class TestCreateBooking:
    @pytest.fixture
    def use_case(
        self, eligibility_checker: BookingEligibilityChecker, uow: FakeUnitOfWork
    ) -> CreateBookingUseCase:
        return CreateBookingUseCase(eligibility_checker=eligibility_checker, uow=uow)

    @pytest.mark.asyncio
    async def test_single_slot_room_takes_one_booking(
        self, store: InMemoryStore, uow: FakeUnitOfWork, use_case: CreateBookingUseCase
    ) -> None:
        """
        Given: Two eligible users, room with capacity 1 and no bookings
        When: Both book the room, one after the other
        Then:
          - First call returns a new booking
          - Second call raises ForbiddenError (room full)
        """
        # Arrange
        store.add_eligible_user(user_id=1)
        store.add_eligible_user(user_id=2)
        store.add_room(room_id=1, capacity=1)

        # Act
        booking = await use_case.create_booking(user_id=1, room_id=1)

        # Assert
        assert booking.id >= 1
        assert booking.user_id == 1
        assert booking.room_id == 1
        assert uow.commit_count == 1

        with pytest.raises(ForbiddenError, match='Room is full'):
            await use_case.create_booking(user_id=2, room_id=1)
        assert store.occupancy(1) == 1
        assert uow.commit_count == 1

    @pytest.mark.asyncio
    async def test_created_booking_is_returned_by_get_booking(
        self,
        store: InMemoryStore,
        eligibility_checker: BookingEligibilityChecker,
        use_case: CreateBookingUseCase,
    ) -> None:
        store.add_eligible_user(user_id=1)
        store.add_room(room_id=4, capacity=2)

        created = await use_case.create_booking(user_id=1, room_id=4)
        fetched = await GetBookingUseCase(
            eligibility_checker=eligibility_checker,
            booking_query_repo=FakeBookingQueryRepo(store),
        ).get_booking(user_id=1)

        assert fetched.id == created.id
        assert fetched.room is not None
        assert fetched.room.id == 4

    @pytest.mark.asyncio
    async def test_lock_room_before_counting(
        self, store: InMemoryStore, uow: FakeUnitOfWork, use_case: CreateBookingUseCase
    ) -> None:
        store.add_eligible_user(user_id=1)
        store.add_room(room_id=2, capacity=1)

        await use_case.create_booking(user_id=1, room_id=2)

        assert uow.room_query_repo.locked_room_ids == [2]

    @pytest.mark.asyncio
    async def test_fail_for_unknown_room(
        self, store: InMemoryStore, use_case: CreateBookingUseCase
    ) -> None:
        store.add_eligible_user(user_id=1)

        with pytest.raises(NotFoundError, match='Room not found'):
            await use_case.create_booking(user_id=1, room_id=404)
        assert store.bookings == {}

    @pytest.mark.asyncio
    async def test_eligibility_is_checked_before_room(
        self, store: InMemoryStore, uow: FakeUnitOfWork, use_case: CreateBookingUseCase
    ) -> None:
        """
        Given: Unpaid ticket and a room id that does not exist
        When: Create booking
        Then: PaymentRequiredError, room never looked up
        """
        store.add_eligible_user(user_id=1, status=TicketStatus.RESERVED)

        with pytest.raises(PaymentRequiredError):
            await use_case.create_booking(user_id=1, room_id=404)
        assert uow.room_query_repo.locked_room_ids == []

    @pytest.mark.asyncio
    async def test_remote_ticket_is_forbidden(
        self, store: InMemoryStore, use_case: CreateBookingUseCase
    ) -> None:
        store.add_eligible_user(user_id=1, ticket_type=REMOTE_TICKET_TYPE)
        store.add_room(room_id=1, capacity=5)

        with pytest.raises(ForbiddenError, match='Remote tickets'):
            await use_case.create_booking(user_id=1, room_id=1)
        assert store.bookings == {}

    @pytest.mark.asyncio
    async def test_user_may_hold_several_bookings_by_default(
        self, store: InMemoryStore, use_case: CreateBookingUseCase
    ) -> None:
        store.add_eligible_user(user_id=1)
        store.add_room(room_id=1, capacity=1)
        store.add_room(room_id=2, capacity=1)

        await use_case.create_booking(user_id=1, room_id=1)
        await use_case.create_booking(user_id=1, room_id=2)

        assert len(store.bookings) == 2

    @pytest.mark.asyncio
    async def test_one_booking_per_user_policy(
        self,
        store: InMemoryStore,
        eligibility_checker: BookingEligibilityChecker,
        uow: FakeUnitOfWork,
    ) -> None:
        # Arrange
        use_case = CreateBookingUseCase(
            eligibility_checker=eligibility_checker, uow=uow, one_booking_per_user=True
        )
        store.add_eligible_user(user_id=1)
        store.add_room(room_id=1, capacity=3)
        await use_case.create_booking(user_id=1, room_id=1)

        # Act & Assert
        with pytest.raises(ForbiddenError, match='already has a booking'):
            await use_case.create_booking(user_id=1, room_id=1)
        assert store.occupancy(1) == 1

    @pytest.mark.parametrize(('reason', 'error'), INELIGIBLE_CASES)
    @pytest.mark.asyncio
    async def test_every_ineligible_state_is_rejected(
        self,
        store: InMemoryStore,
        uow: FakeUnitOfWork,
        use_case: CreateBookingUseCase,
        reason: str,
        error: type[Exception],
    ) -> None:
        """
        Given: User in an ineligible state, room with free slots
        When: Create booking
        Then: The gate's error, no booking written, room never locked
        """
        make_ineligible(store, user_id=1, reason=reason)
        store.add_room(room_id=1, capacity=5)

        with pytest.raises(error):
            await use_case.create_booking(user_id=1, room_id=1)
        assert store.bookings == {}
        assert uow.commit_count == 0
        assert uow.room_query_repo.locked_room_ids == []

    @pytest.mark.asyncio
    async def test_one_booking_per_user_checked_before_room_lock(
        self,
        store: InMemoryStore,
        eligibility_checker: BookingEligibilityChecker,
        uow: FakeUnitOfWork,
    ) -> None:
        """
        Given: Policy on, user already booked in room 1
        When: User books room 2
        Then: ForbiddenError from the existing-booking read; room 2 never locked
        """
        use_case = CreateBookingUseCase(
            eligibility_checker=eligibility_checker, uow=uow, one_booking_per_user=True
        )
        store.add_eligible_user(user_id=1)
        store.add_room(room_id=1, capacity=1)
        store.add_room(room_id=2, capacity=1)
        store.add_booking(user_id=1, room_id=1)

        with pytest.raises(ForbiddenError, match='already has a booking'):
            await use_case.create_booking(user_id=1, room_id=2)
        assert uow.room_query_repo.locked_room_ids == []
        assert store.occupancy(2) == 0
