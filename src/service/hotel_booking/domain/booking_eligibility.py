"""
Booking eligibility rule

Pure decision over what the enrollment and ticket lookups returned. The
order of the checks is part of the contract: the first failing rule decides
which error the caller sees.

    no enrollment               -> NotFoundError
    no ticket                   -> NotFoundError
    ticket not paid (RESERVED)  -> PaymentRequiredError
    remote ticket type          -> ForbiddenError
    ticket type without hotel   -> ForbiddenError
"""

from typing import Optional

from src.platform.exception.exceptions import (
    ForbiddenError,
    NotFoundError,
    PaymentRequiredError,
)
from src.service.hotel_booking.domain.entity.enrollment_entity import Enrollment
from src.service.hotel_booking.domain.entity.ticket_entity import Ticket
from src.service.hotel_booking.domain.enum.ticket_status import TicketStatus


def verify_booking_eligibility(
    *, enrollment: Optional[Enrollment], ticket: Optional[Ticket]
) -> Ticket:
    if enrollment is None:
        raise NotFoundError('Enrollment not found')
    if ticket is None:
        raise NotFoundError('Ticket not found')
    if ticket.status == TicketStatus.RESERVED:
        raise PaymentRequiredError('Ticket has not been paid')
    if ticket.ticket_type.is_remote:
        raise ForbiddenError('Remote tickets do not include accommodation')
    if not ticket.ticket_type.includes_hotel:
        raise ForbiddenError('Ticket type does not include hotel')
    return ticket
