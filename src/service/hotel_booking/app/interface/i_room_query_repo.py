from abc import ABC, abstractmethod
from typing import Optional

from src.service.hotel_booking.domain.entity.room_entity import Room


class IRoomQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, room_id: int, for_update: bool = False) -> Optional[Room]:
        """
        Get room by ID

        Args:
            room_id: Room ID
            for_update: Lock the room row until the surrounding transaction
                ends. Only meaningful inside a unit of work.

        Returns:
            Room entity or None if not found
        """
        pass
