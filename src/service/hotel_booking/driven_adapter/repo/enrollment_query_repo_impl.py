from typing import Optional

from sqlalchemy import select

from src.platform.logging.loguru_io import Logger
from src.service.hotel_booking.app.interface.i_enrollment_query_repo import IEnrollmentQueryRepo
from src.service.hotel_booking.domain.entity.enrollment_entity import Enrollment
from src.service.hotel_booking.driven_adapter.model.enrollment_model import EnrollmentModel
from src.service.hotel_booking.driven_adapter.repo.session_scoped_repo import SessionScopedRepo


class EnrollmentQueryRepoImpl(SessionScopedRepo, IEnrollmentQueryRepo):
    @staticmethod
    def _to_entity(db_enrollment: EnrollmentModel) -> Enrollment:
        return Enrollment(
            id=db_enrollment.id,
            user_id=db_enrollment.user_id,
            name=db_enrollment.name,
            cpf=db_enrollment.cpf,
            birthday=db_enrollment.birthday,
            phone=db_enrollment.phone,
            created_at=db_enrollment.created_at,
            updated_at=db_enrollment.updated_at,
        )

    @Logger.io
    async def get_by_user_id(self, *, user_id: int) -> Optional[Enrollment]:
        async with self._get_session() as session:
            result = await session.execute(
                select(EnrollmentModel).where(EnrollmentModel.user_id == user_id)
            )
            db_enrollment = result.scalar_one_or_none()

            if not db_enrollment:
                return None

            return EnrollmentQueryRepoImpl._to_entity(db_enrollment)
