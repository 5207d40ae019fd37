from abc import ABC, abstractmethod
from typing import Optional

from src.service.hotel_booking.domain.entity.ticket_entity import Ticket


class ITicketQueryRepo(ABC):
    """Read access to tickets (owned by the ticket/payment subsystem)"""

    @abstractmethod
    async def get_by_enrollment_id(self, *, enrollment_id: int) -> Optional[Ticket]:
        """
        Get the ticket of an enrollment with its ticket type loaded

        Args:
            enrollment_id: Enrollment ID

        Returns:
            Ticket entity or None if the enrollment has no ticket
        """
        pass
