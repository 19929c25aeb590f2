"""Unit of work over a single AsyncSession transaction."""

from __future__ import annotations

import asyncio
import logging
from types import TracebackType

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from wallet_ledger.domain.wallets.exceptions import StorageFailureError

from .errors import translate_storage_errors
from .repositories.ledger_repository import SqlLedgerRepository

logger = logging.getLogger(__name__)


class SqlUnitOfWork:
    """Atomic, isolated scope for ledger reads and writes.

    Entering opens a session; the transaction begins with the first
    statement. Leaving without :meth:`commit` rolls everything back, also
    when the owning task is cancelled.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory
        self._session: AsyncSession | None = None
        self._committed = False
        self.ledger: SqlLedgerRepository

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("Unit of work is not active")
        return self._session

    async def __aenter__(self) -> "SqlUnitOfWork":
        self._session = self._session_factory()
        self._committed = False
        self.ledger = SqlLedgerRepository(self._session)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        session = self.session
        try:
            if not self._committed:
                await self._rollback_after(exc)
        finally:
            self._session = None
            await asyncio.shield(session.close())

    async def commit(self) -> None:
        with translate_storage_errors("commit"):
            await self.session.commit()
        self._committed = True

    async def rollback(self) -> None:
        with translate_storage_errors("rollback"):
            await self.session.rollback()

    async def _rollback_after(self, exc: BaseException | None) -> None:
        try:
            # Shielded so a cancelled caller still releases its locks
            with translate_storage_errors("rollback"):
                await asyncio.shield(self.session.rollback())
        except StorageFailureError:
            if exc is None:
                raise
            # The original failure is what the caller needs to see
            logger.exception("Rollback failed while handling %s", type(exc).__name__)
