"""SQLAlchemy implementation of the ledger store"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Sequence

from sqlalchemy import Row, desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from ..errors import translate_storage_errors
from ..models import TransactionRecord, Wallet


class SqlLedgerRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_wallet(self, address: str) -> Wallet | None:
        stmt = select(Wallet).where(Wallet.address == address)
        with translate_storage_errors("wallet lookup"):
            result = await self.session.execute(stmt)
        return result.scalars().first()

    async def wallet_exists(self, address: str) -> bool:
        stmt = select(select(Wallet.id).where(Wallet.address == address).exists())
        with translate_storage_errors("wallet lookup"):
            result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def get_wallet_id(self, address: str) -> int | None:
        stmt = select(Wallet.id).where(Wallet.address == address)
        with translate_storage_errors("wallet lookup"):
            result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def lock_wallets(self, wallet_ids: Iterable[int]) -> list[int]:
        """Take row locks on ``wallet_ids`` in ascending id order.

        One ordered statement means two transfers touching the same pair of
        wallets always queue in the same order whichever direction they run.
        Returns the ids that were locked.
        """
        stmt = (
            select(Wallet.id)
            .where(Wallet.id.in_(set(wallet_ids)))
            .order_by(Wallet.id)
            .with_for_update()
        )
        with translate_storage_errors("wallet lock"):
            result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_balance(self, wallet_id: int) -> Decimal | None:
        stmt = select(Wallet.balance).where(Wallet.id == wallet_id)
        with translate_storage_errors("balance read"):
            result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def adjust_balance(
        self,
        wallet_id: int,
        delta: Decimal,
        *,
        require_non_negative: bool = False,
    ) -> Decimal | None:
        """Apply ``delta`` in a single UPDATE and return the new balance.

        With ``require_non_negative`` the row only changes when the result
        stays at or above zero. ``None`` means no row was updated.
        """
        stmt = update(Wallet).where(Wallet.id == wallet_id)
        if require_non_negative:
            stmt = stmt.where(Wallet.balance >= -delta)
        stmt = (
            stmt.values(balance=Wallet.balance + delta)
            .execution_options(synchronize_session=False)
            .returning(Wallet.balance)
        )
        with translate_storage_errors("balance update"):
            result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def add_transaction_record(
        self,
        *,
        sender_id: int,
        receiver_id: int,
        amount: Decimal,
    ) -> TransactionRecord:
        record = TransactionRecord(sender_id=sender_id, receiver_id=receiver_id, amount=amount)
        self.session.add(record)
        with translate_storage_errors("transaction insert"):
            await self.session.flush()
            await self.session.refresh(record)
        return record

    async def list_recent_transactions(self, limit: int) -> Sequence[Row]:
        sender = aliased(Wallet)
        receiver = aliased(Wallet)
        stmt = (
            select(
                TransactionRecord.id,
                TransactionRecord.sender_id,
                TransactionRecord.receiver_id,
                sender.address.label("sender_address"),
                receiver.address.label("receiver_address"),
                TransactionRecord.amount,
                TransactionRecord.created_at,
            )
            .join(sender, TransactionRecord.sender_id == sender.id)
            .join(receiver, TransactionRecord.receiver_id == receiver.id)
            .order_by(desc(TransactionRecord.created_at), desc(TransactionRecord.id))
            .limit(limit)
        )
        with translate_storage_errors("transaction history"):
            result = await self.session.execute(stmt)
        return result.all()

    async def count_wallets(self) -> int:
        with translate_storage_errors("wallet count"):
            result = await self.session.execute(select(func.count()).select_from(Wallet))
        return int(result.scalar_one())

    async def create_wallet(self, address: str, balance: Decimal = Decimal("0")) -> Wallet:
        wallet = Wallet(address=address, balance=balance)
        self.session.add(wallet)
        with translate_storage_errors("wallet insert"):
            await self.session.flush()
        return wallet

    async def total_balance(self) -> Decimal:
        with translate_storage_errors("balance total"):
            result = await self.session.execute(select(func.coalesce(func.sum(Wallet.balance), 0)))
        return Decimal(result.scalar_one())
