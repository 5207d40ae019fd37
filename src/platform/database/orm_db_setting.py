"""
SQLAlchemy async engine and session management

- AsyncEngineManager: one write engine (primary) and one read engine (replica,
  or the primary again when no replica is configured), rebuilt whenever the
  running event loop changes.
- Database: per-call session factory handed to query repositories by the
  DI container.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger


class AsyncEngineManager:
    """
    Keeps engines bound to the current event loop.

    An engine created on one loop cannot be used from another ("Future attached
    to a different loop"), which happens with TestClient and reloaders.
    """

    def __init__(self) -> None:
        self._write_engine: Optional[AsyncEngine] = None
        self._read_engine: Optional[AsyncEngine] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._write_session_maker: Optional[async_sessionmaker[AsyncSession]] = None
        self._read_session_maker: Optional[async_sessionmaker[AsyncSession]] = None

    def get_engine(self, *, read_only: bool = False) -> AsyncEngine:
        try:
            current_loop = asyncio.get_running_loop()
        except RuntimeError:
            current_loop = None

        if current_loop is not None and self._loop is not current_loop:
            if self._write_engine is not None or self._read_engine is not None:
                Logger.base.warning('🔄 [DB] Event loop changed, dropping old engines')
            self._reset()
            self._loop = current_loop

        if read_only:
            if self._read_engine is None:
                self._read_engine = self._create_engine(
                    url=settings.DATABASE_READ_URL_ASYNC, pool_size=settings.DB_POOL_SIZE_READ
                )
            return self._read_engine

        if self._write_engine is None:
            Logger.base.info('🔗 [DB] Creating write engine')
            self._write_engine = self._create_engine(
                url=settings.DATABASE_URL_ASYNC, pool_size=settings.DB_POOL_SIZE_WRITE
            )
        return self._write_engine

    def get_session_maker(self, *, read_only: bool = False) -> async_sessionmaker[AsyncSession]:
        engine = self.get_engine(read_only=read_only)
        if read_only:
            if self._read_session_maker is None:
                self._read_session_maker = async_sessionmaker(
                    engine, class_=AsyncSession, expire_on_commit=False
                )
            return self._read_session_maker

        if self._write_session_maker is None:
            self._write_session_maker = async_sessionmaker(
                engine, class_=AsyncSession, expire_on_commit=False
            )
        return self._write_session_maker

    async def dispose(self) -> None:
        for engine in {self._write_engine, self._read_engine} - {None}:
            await engine.dispose()  # type: ignore[union-attr]
        self._reset()

    def _reset(self) -> None:
        self._write_engine = None
        self._read_engine = None
        self._write_session_maker = None
        self._read_session_maker = None

    @staticmethod
    def _create_engine(*, url: str, pool_size: int) -> AsyncEngine:
        return create_async_engine(
            url,
            echo=False,
            pool_size=pool_size,
            max_overflow=settings.DB_POOL_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            pool_recycle=settings.DB_POOL_RECYCLE,
            pool_pre_ping=settings.DB_POOL_PRE_PING,
        )


_engine_manager = AsyncEngineManager()


def get_engine(*, read_only: bool = False) -> AsyncEngine:
    return _engine_manager.get_engine(read_only=read_only)


def get_session_maker(*, read_only: bool = False) -> async_sessionmaker[AsyncSession]:
    return _engine_manager.get_session_maker(read_only=read_only)


async def dispose_engines() -> None:
    await _engine_manager.dispose()


class Base(DeclarativeBase):
    pass


async def create_db_and_tables() -> None:
    """Create database tables if they don't exist"""
    # Register every model on Base.metadata before create_all
    import src.service.hotel_booking.driven_adapter.model  # noqa: F401

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all, checkfirst=True)
    Logger.base.info('🗄️  [DB] Tables ensured')


class Database:
    """Session factory for dependency injection."""

    def __init__(self, *, read_only: bool = False) -> None:
        self._read_only = read_only

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        # The session context manager rolls back on exception and closes on exit
        session_maker = get_session_maker(read_only=self._read_only)
        async with session_maker() as session:
            yield session
