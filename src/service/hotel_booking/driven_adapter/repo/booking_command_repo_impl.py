"""
Booking Command Repository

Runs inside SqlAlchemyUnitOfWork: writes are flushed, never committed here.
"""

from sqlalchemy import func, update

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.hotel_booking.domain.entity.booking_entity import Booking
from src.service.hotel_booking.driven_adapter.model.booking_model import BookingModel
from src.service.hotel_booking.driven_adapter.repo.booking_query_repo_impl import (
    BookingQueryRepoImpl,
)
from src.service.hotel_booking.driven_adapter.repo.session_scoped_repo import SessionScopedRepo


class BookingCommandRepoImpl(SessionScopedRepo, IBookingCommandRepo):
    @Logger.io
    async def create(self, *, user_id: int, room_id: int) -> Booking:
        async with self._get_session() as session:
            db_booking = BookingModel(user_id=user_id, room_id=room_id)
            session.add(db_booking)
            await session.flush()
            await session.refresh(db_booking)  # load server-side timestamps
            return BookingQueryRepoImpl.to_entity(db_booking)

    @Logger.io
    async def update_room(self, *, booking_id: int, room_id: int) -> Booking:
        async with self._get_session() as session:
            result = await session.execute(
                update(BookingModel)
                .where(BookingModel.id == booking_id)
                .values(room_id=room_id, updated_at=func.now())
                .returning(BookingModel)
                .execution_options(synchronize_session=False, populate_existing=True)
            )
            db_booking = result.scalar_one_or_none()

            if not db_booking:
                raise NotFoundError('Booking not found')

            return BookingQueryRepoImpl.to_entity(db_booking)
