from src.platform.exception.exceptions import ForbiddenError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.hotel_booking.app.interface.i_room_query_repo import IRoomQueryRepo
from src.service.hotel_booking.domain.entity.room_entity import Room


class RoomCapacityAllocator:
    """
    Decides whether a room can take one more booking.

    Occupancy is the number of booking rows pointing at the room. When the
    repositories share a unit of work, allocate() locks the room row so the
    count and the following booking write cannot interleave with another
    allocation for the same room.
    """

    def __init__(
        self,
        *,
        room_query_repo: IRoomQueryRepo,
        booking_query_repo: IBookingQueryRepo,
    ) -> None:
        self.room_query_repo = room_query_repo
        self.booking_query_repo = booking_query_repo

    @Logger.io
    async def get_room(self, *, room_id: int, for_update: bool = False) -> Room:
        room = await self.room_query_repo.get_by_id(room_id=room_id, for_update=for_update)
        if not room:
            raise NotFoundError('Room not found')
        return room

    @Logger.io
    async def has_free_slot(self, *, room_id: int) -> bool:
        room = await self.get_room(room_id=room_id)
        return await self._room_has_free_slot(room)

    @Logger.io
    async def allocate(self, *, room_id: int) -> Room:
        """
        Raises:
            NotFoundError: room does not exist
            ForbiddenError: room is at capacity
        """
        room = await self.get_room(room_id=room_id, for_update=True)
        if not await self._room_has_free_slot(room):
            raise ForbiddenError('Room is full')
        return room

    async def _room_has_free_slot(self, room: Room) -> bool:
        occupancy = await self.booking_query_repo.count_by_room_id(room_id=room.id)
        return room.has_free_slot(occupancy=occupancy)
