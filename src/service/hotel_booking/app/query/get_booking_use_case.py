from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.hotel_booking.app.service.booking_eligibility_checker import (
    BookingEligibilityChecker,
)
from src.service.hotel_booking.domain.entity.booking_entity import Booking


class GetBookingUseCase:
    def __init__(
        self,
        *,
        eligibility_checker: BookingEligibilityChecker,
        booking_query_repo: IBookingQueryRepo,
    ) -> None:
        self.eligibility_checker = eligibility_checker
        self.booking_query_repo = booking_query_repo
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        eligibility_checker: BookingEligibilityChecker = Depends(
            Provide[Container.booking_eligibility_checker]
        ),
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
    ) -> Self:
        return cls(eligibility_checker=eligibility_checker, booking_query_repo=booking_query_repo)

    @Logger.io
    async def get_booking(self, *, user_id: int) -> Booking:
        with self.tracer.start_as_current_span(
            'use_case.get_booking', attributes={'user.id': user_id}
        ):
            await self.eligibility_checker.check(user_id=user_id)

            booking = await self.booking_query_repo.get_by_user_id(user_id=user_id)
            if not booking:
                raise NotFoundError('Booking not found')

            return booking
