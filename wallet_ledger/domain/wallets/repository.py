"""Repository protocols for the ledger store."""

from __future__ import annotations

from decimal import Decimal
from types import TracebackType
from typing import Any, Callable, Iterable, Protocol, Sequence


class LedgerRepository(Protocol):
    """Reads and atomic writes against wallets and transaction records."""

    async def get_wallet(self, address: str) -> Any | None:
        ...

    async def wallet_exists(self, address: str) -> bool:
        ...

    async def get_wallet_id(self, address: str) -> int | None:
        ...

    async def lock_wallets(self, wallet_ids: Iterable[int]) -> list[int]:
        ...

    async def get_balance(self, wallet_id: int) -> Decimal | None:
        ...

    async def adjust_balance(
        self,
        wallet_id: int,
        delta: Decimal,
        *,
        require_non_negative: bool = False,
    ) -> Decimal | None:
        ...

    async def add_transaction_record(
        self,
        *,
        sender_id: int,
        receiver_id: int,
        amount: Decimal,
    ) -> Any:
        ...

    async def list_recent_transactions(self, limit: int) -> Sequence[Any]:
        ...

    async def count_wallets(self) -> int:
        ...

    async def create_wallet(self, address: str, balance: Decimal = Decimal("0")) -> Any:
        ...


class UnitOfWork(Protocol):
    """Atomic scope: commit makes every write visible, anything else discards them."""

    ledger: LedgerRepository

    async def __aenter__(self) -> "UnitOfWork":
        ...

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        ...

    async def commit(self) -> None:
        ...

    async def rollback(self) -> None:
        ...


UnitOfWorkFactory = Callable[[], UnitOfWork]
