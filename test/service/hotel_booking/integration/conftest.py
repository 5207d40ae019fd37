"""
Database fixtures for repository integration tests.

TEST_DATABASE_URL selects the engine (e.g. postgresql+asyncpg://... against
the compose Postgres); the default is an in-memory SQLite database. Tables
are created per test and dropped afterwards.
"""

from collections.abc import AsyncGenerator
import os

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from src.platform.database.orm_db_setting import Base
import src.service.hotel_booking.driven_adapter.model  # noqa: F401
from src.service.hotel_booking.driven_adapter.model.hotel_model import HotelModel, RoomModel


TEST_DATABASE_URL = os.environ.get('TEST_DATABASE_URL', 'sqlite+aiosqlite://')


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    if TEST_DATABASE_URL.startswith('sqlite'):
        # One shared connection, otherwise every session sees an empty in-memory DB
        test_engine = create_async_engine(TEST_DATABASE_URL, poolclass=StaticPool)
    else:
        test_engine = create_async_engine(TEST_DATABASE_URL)

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await test_engine.dispose()


@pytest.fixture
def session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def rooms(session_maker: async_sessionmaker[AsyncSession]) -> dict[str, int]:
    """Hotel with room A (capacity 1) and room B (capacity 2)."""
    async with session_maker() as session:
        hotel = HotelModel(name='Driven Resort', image='https://example.com/hotel.png')
        session.add(hotel)
        await session.flush()
        room_a = RoomModel(name='101', capacity=1, hotel_id=hotel.id)
        room_b = RoomModel(name='102', capacity=2, hotel_id=hotel.id)
        session.add_all([room_a, room_b])
        await session.commit()
        return {'hotel_id': hotel.id, 'room_a': room_a.id, 'room_b': room_b.id}
