"""Async SQLAlchemy engine and session management."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from wallet_ledger.core.config import DatabaseSettings

from .base import Base
from .unit_of_work import SqlUnitOfWork

logger = logging.getLogger(__name__)


def _build_engine(settings: DatabaseSettings) -> AsyncEngine:
    engine_kwargs: dict[str, Any] = {
        "echo": settings.echo,
        "future": True,
    }
    if settings.pool_size is not None:
        engine_kwargs["pool_size"] = settings.pool_size
    if settings.max_overflow is not None:
        engine_kwargs["max_overflow"] = settings.max_overflow

    if settings.is_sqlite:
        engine_kwargs["connect_args"] = {"timeout": settings.statement_timeout_seconds}
    elif settings.url.startswith("postgresql+asyncpg"):
        timeout_ms = int(settings.statement_timeout_seconds * 1000)
        engine_kwargs["connect_args"] = {
            "server_settings": {
                "statement_timeout": str(timeout_ms),
                "lock_timeout": str(timeout_ms),
            },
        }

    engine = create_async_engine(settings.url, **engine_kwargs)
    if settings.is_sqlite:
        _serialize_sqlite_writers(engine)
    return engine


def _serialize_sqlite_writers(engine: AsyncEngine) -> None:
    """Take the SQLite write lock when a transaction starts.

    SQLite has no row locks; ``BEGIN IMMEDIATE`` makes concurrent units of
    work queue on the database lock (bounded by the busy timeout) instead of
    failing when two deferred readers try to upgrade at once.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _disable_driver_begin(dbapi_connection, connection_record):  # noqa: ARG001
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


class Database:
    """Owns the engine and session factory for one ledger store."""

    def __init__(self, settings: DatabaseSettings) -> None:
        self.settings = settings
        self.engine = _build_engine(settings)
        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    def unit_of_work(self) -> SqlUnitOfWork:
        return SqlUnitOfWork(self.session_factory)

    async def create_all(self) -> None:
        """Create database tables in development mode (migrations preferred)."""
        # Imported for its side effect of registering the tables on Base.metadata
        from . import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ensured at %s", self.engine.url.render_as_string(hide_password=True))

    async def dispose(self) -> None:
        await self.engine.dispose()
