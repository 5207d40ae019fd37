from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.service.booking_eligibility_checker import (
    BookingEligibilityChecker,
)
from src.service.hotel_booking.app.service.room_capacity_allocator import RoomCapacityAllocator
from src.service.hotel_booking.domain.entity.booking_entity import Booking


class MoveBookingUseCase:
    """
    Move an existing booking to another room.

    Flow:
    1. Eligibility gate
    2. Load booking by id; it must belong to the caller
    3. Reject a move into the room the booking already occupies
    4. Lock the target room row, check occupancy against capacity
    5. Point the booking at the new room and commit
    """

    def __init__(
        self,
        *,
        eligibility_checker: BookingEligibilityChecker,
        uow: AbstractUnitOfWork,
    ) -> None:
        self.eligibility_checker = eligibility_checker
        self.uow = uow
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
        return cls(eligibility_checker=eligibility_checker, uow=uow)

    @Logger.io
    async def move_booking(self, *, user_id: int, booking_id: int, room_id: int) -> Booking:
        with self.tracer.start_as_current_span(
            'use_case.move_booking',
            attributes={'user.id': user_id, 'booking.id': booking_id, 'room.id': room_id},
        ):
            await self.eligibility_checker.check(user_id=user_id)

            async with self.uow:
                booking = await self.uow.booking_query_repo.get_by_id(booking_id=booking_id)
                if not booking:
                    raise NotFoundError('Booking not found')

                booking.validate_can_be_moved(user_id=user_id, new_room_id=room_id)

                allocator = RoomCapacityAllocator(
                    room_query_repo=self.uow.room_query_repo,
                    booking_query_repo=self.uow.booking_query_repo,
                )
                room = await allocator.allocate(room_id=room_id)
                moved = await self.uow.booking_command_repo.update_room(
                    booking_id=booking.id, room_id=room.id
                )
                await self.uow.commit()

            Logger.base.info(
                f'🔁 [MOVE-BOOKING] booking {booking.id}: room {booking.room_id} -> {room.id}'
            )
            return moved
