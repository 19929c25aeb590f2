"""Read-only balance and history queries."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from .lookup import WalletLookup
from .models import TransactionRecord, WalletSnapshot
from .repository import UnitOfWorkFactory

if TYPE_CHECKING:
    from wallet_ledger.infrastructure.database import Database


@dataclass(slots=True)
class QueryService:
    unit_of_work: UnitOfWorkFactory

    @classmethod
    def with_database(cls, database: Database) -> "QueryService":
        return cls(database.unit_of_work)

    async def get_balance(self, address: str) -> Decimal:
        wallet = await self.get_wallet(address)
        return wallet.balance

    async def get_wallet(self, address: str) -> WalletSnapshot:
        async with self.unit_of_work() as uow:
            return await WalletLookup(uow.ledger).get(address)

    async def list_recent(self, count: int) -> list[TransactionRecord]:
        """Return up to ``count`` committed transfers, newest first."""
        if count < 0:
            raise ValueError("count must be a non-negative integer")
        if count == 0:
            return []
        async with self.unit_of_work() as uow:
            rows = await uow.ledger.list_recent_transactions(count)
        return [self._to_record(row) for row in rows]

    @staticmethod
    def _to_record(row: Any) -> TransactionRecord:
        return TransactionRecord(
            id=row.id,
            sender_id=row.sender_id,
            receiver_id=row.receiver_id,
            sender_address=row.sender_address,
            receiver_address=row.receiver_address,
            amount=row.amount,
            created_at=row.created_at,
        )
