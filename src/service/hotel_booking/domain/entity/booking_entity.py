from datetime import datetime
from typing import Optional

import attrs

from src.platform.exception.exceptions import ForbiddenError
from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.domain.entity.room_entity import Room


@attrs.define
class Booking:
    id: int
    user_id: int
    room_id: int
    room: Optional[Room] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def is_owned_by(self, user_id: int) -> bool:
        return self.user_id == user_id

    @Logger.io
    def validate_can_be_moved(self, *, user_id: int, new_room_id: int) -> None:
        """
        Raises:
            ForbiddenError: caller is not the booking owner, or the booking
                already sits in the requested room
        """
        if not self.is_owned_by(user_id):
            raise ForbiddenError('Only the booking owner can change this booking')
        if self.room_id == new_room_id:
            raise ForbiddenError('Booking is already in this room')
