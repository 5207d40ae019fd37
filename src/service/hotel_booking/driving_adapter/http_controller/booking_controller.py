from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import booking_metrics
from src.service.hotel_booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.hotel_booking.app.command.move_booking_use_case import MoveBookingUseCase
from src.service.hotel_booking.app.query.get_booking_use_case import GetBookingUseCase
from src.service.hotel_booking.driving_adapter.http_controller.auth.current_user import (
    get_current_user_id,
)
from src.service.hotel_booking.driving_adapter.http_controller.schema.booking_schema import (
    BookingIdResponse,
    BookingResponse,
    BookingRoomRequest,
)


router = APIRouter()


@router.get('', response_model=BookingResponse, status_code=status.HTTP_200_OK)
@Logger.io
async def get_booking(
    current_user_id: int = Depends(get_current_user_id),
    use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> BookingResponse:
    with booking_metrics.track('get'):
        booking = await use_case.get_booking(user_id=current_user_id)
    return BookingResponse.from_entity(booking)


@router.post('', response_model=BookingIdResponse, status_code=status.HTTP_200_OK)
@Logger.io
async def create_booking(
    request: BookingRoomRequest,
    current_user_id: int = Depends(get_current_user_id),
    use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
) -> BookingIdResponse:
    with booking_metrics.track('create'):
        booking = await use_case.create_booking(user_id=current_user_id, room_id=request.room_id)
    return BookingIdResponse(booking_id=booking.id)


@router.put('/{booking_id}', response_model=BookingIdResponse, status_code=status.HTTP_200_OK)
@Logger.io
async def move_booking(
    booking_id: int,
    request: BookingRoomRequest,
    current_user_id: int = Depends(get_current_user_id),
    use_case: MoveBookingUseCase = Depends(MoveBookingUseCase.depends),
) -> BookingIdResponse:
    with booking_metrics.track('move'):
        booking = await use_case.move_booking(
            user_id=current_user_id, booking_id=booking_id, room_id=request.room_id
        )
    return BookingIdResponse(booking_id=booking.id)
