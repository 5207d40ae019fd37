"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.hotel_booking.driven_adapter.model.booking_model import BookingModel
from src.service.hotel_booking.driven_adapter.model.enrollment_model import EnrollmentModel
from src.service.hotel_booking.driven_adapter.model.hotel_model import HotelModel, RoomModel
from src.service.hotel_booking.driven_adapter.model.ticket_model import (
    TicketModel,
    TicketTypeModel,
)

__all__ = [
    'BookingModel',
    'EnrollmentModel',
    'HotelModel',
    'RoomModel',
    'TicketModel',
    'TicketTypeModel',
]
