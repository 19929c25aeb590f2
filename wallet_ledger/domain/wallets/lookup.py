"""Address resolution against the ledger store."""

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import WalletNotFoundError
from .models import WalletSnapshot
from .repository import LedgerRepository


@dataclass(slots=True)
class WalletLookup:
    repository: LedgerRepository

    async def exists(self, address: str) -> bool:
        return await self.repository.wallet_exists(address)

    async def resolve_id(self, address: str) -> int:
        wallet_id = await self.repository.get_wallet_id(address)
        if wallet_id is None:
            raise WalletNotFoundError(address)
        return wallet_id

    async def get(self, address: str) -> WalletSnapshot:
        wallet = await self.repository.get_wallet(address)
        if wallet is None:
            raise WalletNotFoundError(address)
        return WalletSnapshot(
            id=wallet.id,
            address=wallet.address,
            balance=wallet.balance,
            created_at=wallet.created_at,
        )
