from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.interface.i_enrollment_query_repo import IEnrollmentQueryRepo
from src.service.hotel_booking.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.hotel_booking.domain.booking_eligibility import verify_booking_eligibility
from src.service.hotel_booking.domain.entity.ticket_entity import Ticket


class BookingEligibilityChecker:
    """
    Gate run first by every booking operation.

    Looks up the caller's enrollment and ticket, then applies
    verify_booking_eligibility. The ticket lookup is skipped when there is no
    enrollment.
    """

    def __init__(
        self,
        *,
        enrollment_query_repo: IEnrollmentQueryRepo,
        ticket_query_repo: ITicketQueryRepo,
    ) -> None:
        self.enrollment_query_repo = enrollment_query_repo
        self.ticket_query_repo = ticket_query_repo

    @Logger.io
    async def check(self, *, user_id: int) -> Ticket:
        enrollment = await self.enrollment_query_repo.get_by_user_id(user_id=user_id)
        ticket = None
        if enrollment is not None:
            ticket = await self.ticket_query_repo.get_by_enrollment_id(
                enrollment_id=enrollment.id
            )
        return verify_booking_eligibility(enrollment=enrollment, ticket=ticket)
