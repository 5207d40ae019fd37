from typing import Optional

from sqlalchemy import select

from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.interface.i_room_query_repo import IRoomQueryRepo
from src.service.hotel_booking.domain.entity.room_entity import Room
from src.service.hotel_booking.driven_adapter.model.hotel_model import RoomModel
from src.service.hotel_booking.driven_adapter.repo.session_scoped_repo import SessionScopedRepo


class RoomQueryRepoImpl(SessionScopedRepo, IRoomQueryRepo):
    @staticmethod
    def to_entity(db_room: RoomModel) -> Room:
        return Room(
            id=db_room.id,
            name=db_room.name,
            capacity=db_room.capacity,
            hotel_id=db_room.hotel_id,
            created_at=db_room.created_at,
            updated_at=db_room.updated_at,
        )

    @Logger.io
    async def get_by_id(self, *, room_id: int, for_update: bool = False) -> Optional[Room]:
        stmt = select(RoomModel).where(RoomModel.id == room_id)
        if for_update:
            # Serialises allocations for this room until the transaction ends
            stmt = stmt.with_for_update()

        async with self._get_session() as session:
            result = await session.execute(stmt)
            db_room = result.scalar_one_or_none()

            if not db_room:
                return None

            return RoomQueryRepoImpl.to_entity(db_room)
