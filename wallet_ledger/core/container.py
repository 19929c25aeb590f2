"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass

from wallet_ledger.core.config import Settings
from wallet_ledger.domain.wallets import QueryService, TransferEngine
from wallet_ledger.infrastructure.database import Database


@dataclass(slots=True)
class ApplicationContainer:
    """Owns the store handle and builds the services that use it."""

    settings: Settings
    database: Database

    @classmethod
    def from_settings(cls, settings: Settings) -> "ApplicationContainer":
        return cls(settings=settings, database=Database(settings.database))

    def transfer_engine(self) -> TransferEngine:
        return TransferEngine.with_database(self.database, self.settings.ledger)

    def query_service(self) -> QueryService:
        return QueryService.with_database(self.database)

    async def init_infrastructure(self) -> None:
        """Prepare the schema when configured to (migrations preferred)."""
        if self.settings.database.create_schema:
            await self.database.create_all()

    async def shutdown(self) -> None:
        await self.database.dispose()


__all__ = ["ApplicationContainer"]
