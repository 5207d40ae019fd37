from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import ForbiddenError
from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.service.booking_eligibility_checker import (
    BookingEligibilityChecker,
)
from src.service.hotel_booking.app.service.room_capacity_allocator import RoomCapacityAllocator
from src.service.hotel_booking.domain.entity.booking_entity import Booking


class CreateBookingUseCase:
    """
    Book a room for the caller.

    Flow:
    1. Eligibility gate (enrollment, paid on-site ticket with hotel)
    2. Optional one-booking-per-user policy
    3. Lock the room row, check occupancy against capacity
    4. Insert the booking and commit (releases the room lock)

    Note: a user may hold several bookings unless BOOKING_ONE_PER_USER is set.
    """

    def __init__(
        self,
        *,
        eligibility_checker: BookingEligibilityChecker,
        uow: AbstractUnitOfWork,
        one_booking_per_user: bool = False,
    ) -> None:
        self.eligibility_checker = eligibility_checker
        self.uow = uow
        self.one_booking_per_user = one_booking_per_user
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        eligibility_checker: BookingEligibilityChecker = Depends(
            Provide[Container.booking_eligibility_checker]
        ),
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
    ) -> Self:
        return cls(
            eligibility_checker=eligibility_checker,
            uow=uow,
            one_booking_per_user=settings.BOOKING_ONE_PER_USER,
        )

    @Logger.io
    async def create_booking(self, *, user_id: int, room_id: int) -> Booking:
        """
        Raises:
            NotFoundError: no enrollment, no ticket, or unknown room
            PaymentRequiredError: ticket not paid
            ForbiddenError: ticket without hotel stay, room full, or the user
                already has a booking while BOOKING_ONE_PER_USER is on
        """
        with self.tracer.start_as_current_span(
            'use_case.create_booking',
            attributes={'user.id': user_id, 'room.id': room_id},
        ):
            await self.eligibility_checker.check(user_id=user_id)

            async with self.uow:
                # Unlocked read, best effort under concurrency (see BOOKING_ONE_PER_USER)
                if self.one_booking_per_user:
                    existing = await self.uow.booking_query_repo.get_by_user_id(user_id=user_id)
                    if existing:
                        raise ForbiddenError('User already has a booking')

                allocator = RoomCapacityAllocator(
                    room_query_repo=self.uow.room_query_repo,
                    booking_query_repo=self.uow.booking_query_repo,
                )
                room = await allocator.allocate(room_id=room_id)
                booking = await self.uow.booking_command_repo.create(
                    user_id=user_id, room_id=room.id
                )
                await self.uow.commit()

            Logger.base.info(
                f'🏨 [CREATE-BOOKING] booking {booking.id}: user {user_id} -> room {room.id}'
            )
            return booking
