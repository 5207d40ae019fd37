"""
Booking Command Repository Interface

Bookings are the only entity this service writes. They are created and
moved between rooms; deletion belongs to no operation here.
"""

from abc import ABC, abstractmethod

from src.service.hotel_booking.domain.entity.booking_entity import Booking


class IBookingCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, user_id: int, room_id: int) -> Booking:
        pass

    @abstractmethod
    async def update_room(self, *, booking_id: int, room_id: int) -> Booking:
        pass
