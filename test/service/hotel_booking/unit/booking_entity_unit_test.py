import pytest

from src.platform.exception.exceptions import ForbiddenError
from src.service.hotel_booking.domain.entity.booking_entity import Booking


@pytest.mark.unit
class TestBookingEntity:
    @pytest.fixture
    def booking(self) -> Booking:
        return Booking(id=1, user_id=5, room_id=10)

    def test_owner_can_move_to_another_room(self, booking: Booking) -> None:
        booking.validate_can_be_moved(user_id=5, new_room_id=11)

    def test_other_user_cannot_move(self, booking: Booking) -> None:
        assert not booking.is_owned_by(6)
        with pytest.raises(ForbiddenError, match='Only the booking owner'):
            booking.validate_can_be_moved(user_id=6, new_room_id=11)

    def test_cannot_move_into_current_room(self, booking: Booking) -> None:
        with pytest.raises(ForbiddenError, match='already in this room'):
            booking.validate_can_be_moved(user_id=5, new_room_id=10)
