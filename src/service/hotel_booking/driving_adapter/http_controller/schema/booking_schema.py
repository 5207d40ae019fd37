from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from src.service.hotel_booking.domain.entity.booking_entity import Booking
from src.service.hotel_booking.domain.entity.room_entity import Room


class BookingRoomRequest(BaseModel):
    room_id: int = Field(..., ge=1)

    model_config = {
        'json_schema_extra': {'examples': [{'room_id': 1}]},
    }


class RoomResponse(BaseModel):
    id: int
    name: str
    capacity: int
    hotel_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, room: Room) -> 'RoomResponse':
        return cls(
            id=room.id,
            name=room.name,
            capacity=room.capacity,
            hotel_id=room.hotel_id,
            created_at=room.created_at,
            updated_at=room.updated_at,
        )


class BookingResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'id': 1,
                'room': {
                    'id': 3,
                    'name': '101',
                    'capacity': 2,
                    'hotel_id': 1,
                    'created_at': '2026-01-10T10:30:00',
                    'updated_at': '2026-01-10T10:30:00',
                },
            }
        },
    }

    id: int
    room: RoomResponse

    @classmethod
    def from_entity(cls, booking: Booking) -> 'BookingResponse':
        assert booking.room is not None, 'booking loaded without its room'
        return cls(id=booking.id, room=RoomResponse.from_entity(booking.room))


class BookingIdResponse(BaseModel):
    model_config = {
        'json_schema_extra': {'example': {'booking_id': 1}},
    }

    booking_id: int
