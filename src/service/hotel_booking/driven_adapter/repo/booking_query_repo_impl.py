from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import selectinload

from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.hotel_booking.domain.entity.booking_entity import Booking
from src.service.hotel_booking.driven_adapter.model.booking_model import BookingModel
from src.service.hotel_booking.driven_adapter.repo.room_query_repo_impl import RoomQueryRepoImpl
from src.service.hotel_booking.driven_adapter.repo.session_scoped_repo import SessionScopedRepo


class BookingQueryRepoImpl(SessionScopedRepo, IBookingQueryRepo):
    @staticmethod
    def to_entity(db_booking: BookingModel, *, with_room: bool = False) -> Booking:
        return Booking(
            id=db_booking.id,
            user_id=db_booking.user_id,
            room_id=db_booking.room_id,
            room=RoomQueryRepoImpl.to_entity(db_booking.room) if with_room else None,
            created_at=db_booking.created_at,
            updated_at=db_booking.updated_at,
        )

    @Logger.io
    async def get_by_id(self, *, booking_id: int) -> Optional[Booking]:
        async with self._get_session() as session:
            result = await session.execute(
                select(BookingModel).where(BookingModel.id == booking_id)
            )
            db_booking = result.scalar_one_or_none()

            if not db_booking:
                return None

            return BookingQueryRepoImpl.to_entity(db_booking)

    @Logger.io
    async def get_by_user_id(self, *, user_id: int) -> Optional[Booking]:
        async with self._get_session() as session:
            result = await session.execute(
                select(BookingModel)
                .options(selectinload(BookingModel.room))
                .where(BookingModel.user_id == user_id)
                .order_by(BookingModel.id)
                .limit(1)
            )
            db_booking = result.scalar_one_or_none()

            if not db_booking:
                return None

            return BookingQueryRepoImpl.to_entity(db_booking, with_room=True)

    @Logger.io
    async def count_by_room_id(self, *, room_id: int) -> int:
        async with self._get_session() as session:
            result = await session.execute(
                select(func.count()).select_from(BookingModel).where(BookingModel.room_id == room_id)
            )
            return result.scalar_one()
