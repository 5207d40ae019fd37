from datetime import datetime
from typing import Optional

import attrs

from src.service.hotel_booking.domain.enum.ticket_status import TicketStatus


@attrs.define(frozen=True)
class TicketType:
    id: int
    name: str
    price: int
    is_remote: bool
    includes_hotel: bool


@attrs.define
class Ticket:
    id: int
    enrollment_id: int
    ticket_type: TicketType
    status: TicketStatus = TicketStatus.RESERVED
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
