from __future__ import annotations

from decimal import Decimal

import pytest
from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError

from wallet_ledger.domain.wallets import StorageFailureError, TransientStorageError
from wallet_ledger.infrastructure.database.errors import translate_storage_errors

from .conftest import RECEIVER, SENDER


class DriverError(Exception):
    """Driver exception carrying a PostgreSQL SQLSTATE, as asyncpg and psycopg report it."""

    def __init__(self, message: str, *, sqlstate: str | None = None, pgcode: str | None = None) -> None:
        super().__init__(message)
        if sqlstate is not None:
            self.sqlstate = sqlstate
        if pgcode is not None:
            self.pgcode = pgcode


async def test_conditional_debit_refuses_to_go_negative(database, create_wallet):
    wallet_id = await create_wallet(SENDER, "10.00")

    async with database.unit_of_work() as uow:
        assert await uow.ledger.adjust_balance(wallet_id, Decimal("-10.01"), require_non_negative=True) is None
        assert await uow.ledger.adjust_balance(wallet_id, Decimal("-4.00"), require_non_negative=True) == Decimal("6.00")
        assert await uow.ledger.adjust_balance(wallet_id, Decimal("0.25")) == Decimal("6.25")
        await uow.commit()

    async with database.unit_of_work() as uow:
        assert await uow.ledger.get_balance(wallet_id) == Decimal("6.25")


async def test_adjust_balance_of_missing_wallet_updates_nothing(database):
    async with database.unit_of_work() as uow:
        assert await uow.ledger.adjust_balance(999, Decimal("1.00")) is None


async def test_unit_of_work_without_commit_discards_writes(database, create_wallet):
    wallet_id = await create_wallet(SENDER, "10.00")

    async with database.unit_of_work() as uow:
        await uow.ledger.adjust_balance(wallet_id, Decimal("5.00"))
        await uow.ledger.create_wallet(RECEIVER)

    async with database.unit_of_work() as uow:
        assert await uow.ledger.get_balance(wallet_id) == Decimal("10.00")
        assert await uow.ledger.wallet_exists(RECEIVER) is False


async def test_unit_of_work_rolls_back_on_error(database, create_wallet):
    wallet_id = await create_wallet(SENDER, "10.00")

    with pytest.raises(RuntimeError):
        async with database.unit_of_work() as uow:
            await uow.ledger.adjust_balance(wallet_id, Decimal("-3.00"))
            raise RuntimeError("boom")

    async with database.unit_of_work() as uow:
        assert await uow.ledger.get_balance(wallet_id) == Decimal("10.00")


async def test_duplicate_address_is_a_storage_failure(database, create_wallet):
    await create_wallet(SENDER)

    async with database.unit_of_work() as uow:
        with pytest.raises(StorageFailureError) as exc_info:
            await uow.ledger.create_wallet(SENDER)

    assert isinstance(exc_info.value.__cause__, IntegrityError)
    assert not isinstance(exc_info.value, TransientStorageError)


async def test_transaction_record_gets_store_timestamp(database, create_wallet):
    sender_id = await create_wallet(SENDER, "5.00")
    receiver_id = await create_wallet(RECEIVER)

    async with database.unit_of_work() as uow:
        record = await uow.ledger.add_transaction_record(
            sender_id=sender_id,
            receiver_id=receiver_id,
            amount=Decimal("2.50"),
        )
        await uow.commit()

    assert record.id is not None
    assert record.created_at is not None
    assert record.amount == Decimal("2.50")


async def test_count_and_total(database, create_wallet):
    async with database.unit_of_work() as uow:
        assert await uow.ledger.count_wallets() == 0
        assert await uow.ledger.total_balance() == Decimal("0")

    await create_wallet(SENDER, "1.10")
    await create_wallet(RECEIVER, "2.20")

    async with database.unit_of_work() as uow:
        assert await uow.ledger.count_wallets() == 2
        assert await uow.ledger.total_balance() == Decimal("3.30")


def test_operational_errors_are_transient():
    with pytest.raises(TransientStorageError):
        with translate_storage_errors("balance read"):
            raise OperationalError("SELECT 1", None, Exception("database is locked"))


def test_other_database_errors_are_storage_failures():
    with pytest.raises(StorageFailureError) as exc_info:
        with translate_storage_errors("wallet insert"):
            raise IntegrityError("INSERT", None, Exception("UNIQUE constraint failed"))

    assert str(exc_info.value) == "wallet insert failed"


@pytest.mark.parametrize(
    "orig",
    [
        DriverError("canceling statement due to statement timeout", sqlstate="57014"),
        DriverError("could not obtain lock on row", sqlstate="55P03"),
        DriverError("deadlock detected", sqlstate="40P01"),
        DriverError("could not serialize access", sqlstate="40001"),
        DriverError("deadlock detected", pgcode="40P01"),
    ],
)
def test_postgres_timeouts_and_lock_conflicts_are_transient(orig):
    with pytest.raises(TransientStorageError) as exc_info:
        with translate_storage_errors("balance update"):
            raise DBAPIError("UPDATE wallets SET balance=...", None, orig)

    assert isinstance(exc_info.value.__cause__, DBAPIError)
    assert exc_info.value.__cause__.orig is orig


def test_other_driver_errors_are_not_transient():
    with pytest.raises(StorageFailureError) as exc_info:
        with translate_storage_errors("balance update"):
            raise DBAPIError(
                "UPDATE wallets SET balance=...",
                None,
                DriverError("new row violates check constraint", sqlstate="23514"),
            )

    assert not isinstance(exc_info.value, TransientStorageError)
    assert str(exc_info.value) == "balance update failed"


async def test_lock_wallets_returns_ids_in_ascending_order(database, create_wallet):
    first_id = await create_wallet(SENDER, "1.00")
    second_id = await create_wallet(RECEIVER, "1.00")

    async with database.unit_of_work() as uow:
        assert await uow.ledger.lock_wallets([second_id, first_id]) == [first_id, second_id]
        assert await uow.ledger.lock_wallets({first_id}) == [first_id]
        assert await uow.ledger.lock_wallets([second_id, 999]) == [second_id]


async def test_explicit_rollback_discards_earlier_writes(database, create_wallet):
    wallet_id = await create_wallet(SENDER, "10.00")

    async with database.unit_of_work() as uow:
        await uow.ledger.adjust_balance(wallet_id, Decimal("-4.00"))
        await uow.rollback()
        assert await uow.ledger.get_balance(wallet_id) == Decimal("10.00")
        await uow.ledger.adjust_balance(wallet_id, Decimal("1.00"))
        await uow.commit()

    async with database.unit_of_work() as uow:
        assert await uow.ledger.get_balance(wallet_id) == Decimal("11.00")
