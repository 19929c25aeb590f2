from __future__ import annotations

from decimal import Decimal

import pytest

from wallet_ledger.core.config import DatabaseSettings
from wallet_ledger.domain.wallets import QueryService, TransferEngine
from wallet_ledger.infrastructure.database import Database

SENDER = "a" * 64
RECEIVER = "b" * 64
OTHER = "c" * 64


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'ledger.db'}"


@pytest.fixture
async def database(database_url):
    db = Database(DatabaseSettings(url=database_url))
    await db.create_all()
    try:
        yield db
    finally:
        await db.dispose()


@pytest.fixture
def create_wallet(database):
    async def _create(address: str, balance: str = "0") -> int:
        async with database.unit_of_work() as uow:
            wallet = await uow.ledger.create_wallet(address, Decimal(balance))
            await uow.commit()
        return wallet.id

    return _create


@pytest.fixture
def queries(database) -> QueryService:
    return QueryService(database.unit_of_work)


@pytest.fixture
def engine(database) -> TransferEngine:
    return TransferEngine(database.unit_of_work)


@pytest.fixture
async def funded(create_wallet):
    """Sender with 100.00, receiver with 50.00, and an empty third wallet."""
    await create_wallet(SENDER, "100.00")
    await create_wallet(RECEIVER, "50.00")
    await create_wallet(OTHER)


@pytest.fixture
def balances(queries):
    async def _balances(*addresses: str) -> list[Decimal]:
        return [await queries.get_balance(address) for address in addresses]

    return _balances


@pytest.fixture
def total_balance(database):
    async def _total() -> Decimal:
        async with database.unit_of_work() as uow:
            return await uow.ledger.total_balance()

    return _total
