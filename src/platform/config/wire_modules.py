"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.hotel_booking.app.command import create_booking_use_case, move_booking_use_case
from src.service.hotel_booking.app.query import get_booking_use_case
from src.service.hotel_booking.driving_adapter.http_controller.auth import current_user


WIRE_MODULES: list[ModuleType] = [
    create_booking_use_case,
    move_booking_use_case,
    get_booking_use_case,
    current_user,
]
