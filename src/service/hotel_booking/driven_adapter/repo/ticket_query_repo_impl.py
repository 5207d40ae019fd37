from typing import Optional

from sqlalchemy import select

from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.hotel_booking.domain.entity.ticket_entity import Ticket, TicketType
from src.service.hotel_booking.domain.enum.ticket_status import TicketStatus
from src.service.hotel_booking.driven_adapter.model.ticket_model import TicketModel
from src.service.hotel_booking.driven_adapter.repo.session_scoped_repo import SessionScopedRepo


class TicketQueryRepoImpl(SessionScopedRepo, ITicketQueryRepo):
    @staticmethod
    def _to_entity(db_ticket: TicketModel) -> Ticket:
        db_type = db_ticket.ticket_type
        return Ticket(
            id=db_ticket.id,
            enrollment_id=db_ticket.enrollment_id,
            ticket_type=TicketType(
                id=db_type.id,
                name=db_type.name,
                price=db_type.price,
                is_remote=db_type.is_remote,
                includes_hotel=db_type.includes_hotel,
            ),
            status=TicketStatus(db_ticket.status),
            created_at=db_ticket.created_at,
            updated_at=db_ticket.updated_at,
        )

    @Logger.io
    async def get_by_enrollment_id(self, *, enrollment_id: int) -> Optional[Ticket]:
        async with self._get_session() as session:
            # ticket_type is joined-eager on the model
            result = await session.execute(
                select(TicketModel).where(TicketModel.enrollment_id == enrollment_id)
            )
            db_ticket = result.unique().scalar_one_or_none()

            if not db_ticket:
                return None

            return TicketQueryRepoImpl._to_entity(db_ticket)
