"""
Unit of Work - one database transaction shared by several repositories

- UoW owns the session lifecycle and commit/rollback
- Repositories opened through the UoW reuse its session
- Write use cases run their read-check-write sequence inside one UoW so row
  locks taken by a repository hold until commit
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any, Callable

from sqlalchemy.ext.asyncio import AsyncSession


if TYPE_CHECKING:
    from src.service.hotel_booking.app.interface.i_booking_command_repo import (
        IBookingCommandRepo,
    )
    from src.service.hotel_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
    from src.service.hotel_booking.app.interface.i_room_query_repo import IRoomQueryRepo


class AbstractUnitOfWork(abc.ABC):
    """
    Usage:
        async with uow:
            room = await uow.room_query_repo.get_by_id(room_id=room_id, for_update=True)
            booking = await uow.booking_command_repo.create(user_id=user_id, room_id=room_id)
            await uow.commit()

    Leaving the block without commit() rolls back.
    """

    room_query_repo: IRoomQueryRepo
    booking_query_repo: IBookingQueryRepo
    booking_command_repo: IBookingCommandRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.rollback()

    async def commit(self) -> None:
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self.session_factory = session_factory
        self.session: AsyncSession | None = None

    async def __aenter__(self) -> AbstractUnitOfWork:
        from src.service.hotel_booking.driven_adapter.repo.booking_command_repo_impl import (
            BookingCommandRepoImpl,
        )
        from src.service.hotel_booking.driven_adapter.repo.booking_query_repo_impl import (
            BookingQueryRepoImpl,
        )
        from src.service.hotel_booking.driven_adapter.repo.room_query_repo_impl import (
            RoomQueryRepoImpl,
        )

        self.session = self.session_factory()

        self.room_query_repo = RoomQueryRepoImpl()
        self.room_query_repo.session = self.session
        self.booking_query_repo = BookingQueryRepoImpl()
        self.booking_query_repo.session = self.session
        self.booking_command_repo = BookingCommandRepoImpl()
        self.booking_command_repo.session = self.session

        return await super().__aenter__()

    async def __aexit__(self, *args: Any) -> None:
        try:
            await super().__aexit__(*args)
        finally:
            if self.session is not None:
                await self.session.close()
                self.session = None

    async def _commit(self) -> None:
        assert self.session is not None, 'commit() called outside of `async with uow`'
        await self.session.commit()

    async def rollback(self) -> None:
        if self.session is not None:
            await self.session.rollback()
