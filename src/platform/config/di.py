"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.database.orm_db_setting import Database, get_session_maker
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.hotel_booking.app.service.booking_eligibility_checker import (
    BookingEligibilityChecker,
)
from src.service.hotel_booking.driven_adapter.repo.booking_query_repo_impl import (
    BookingQueryRepoImpl,
)
from src.service.hotel_booking.driven_adapter.repo.enrollment_query_repo_impl import (
    EnrollmentQueryRepoImpl,
)
from src.service.hotel_booking.driven_adapter.repo.ticket_query_repo_impl import (
    TicketQueryRepoImpl,
)
from src.service.hotel_booking.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Read-side sessions (replica when configured, else primary)
    read_database = providers.Singleton(Database, read_only=True)

    # Query repositories (stateless - use session_factory per call)
    enrollment_query_repo = providers.Singleton(
        EnrollmentQueryRepoImpl, session_factory=read_database.provided.session
    )
    ticket_query_repo = providers.Singleton(
        TicketQueryRepoImpl, session_factory=read_database.provided.session
    )
    booking_query_repo = providers.Singleton(
        BookingQueryRepoImpl, session_factory=read_database.provided.session
    )

    # Write path: one UoW per request, session maker resolved lazily (engine is loop-bound)
    unit_of_work = providers.Factory(
        SqlAlchemyUnitOfWork, session_factory=providers.Callable(get_session_maker)
    )

    # Domain services
    booking_eligibility_checker = providers.Factory(
        BookingEligibilityChecker,
        enrollment_query_repo=enrollment_query_repo,
        ticket_query_repo=ticket_query_repo,
    )

    # Auth service
    jwt_auth = providers.Singleton(JwtAuth)


container = Container()
