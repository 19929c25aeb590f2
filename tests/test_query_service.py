from __future__ import annotations

from decimal import Decimal

import pytest

from wallet_ledger.domain.wallets import WalletNotFoundError

from .conftest import OTHER, RECEIVER, SENDER

pytestmark = pytest.mark.usefixtures("funded")


async def test_list_recent_returns_newest_first_bounded_by_count(engine, queries):
    first = await engine.transfer(SENDER, RECEIVER, Decimal("1.00"))
    second = await engine.transfer(RECEIVER, OTHER, Decimal("2.00"))
    third = await engine.transfer(OTHER, SENDER, Decimal("1.50"))

    recent = await queries.list_recent(2)

    assert [record.id for record in recent] == [third.record.id, second.record.id]
    assert recent[0].created_at >= recent[1].created_at

    everything = await queries.list_recent(50)
    assert [record.id for record in everything] == [third.record.id, second.record.id, first.record.id]


async def test_list_recent_reports_addresses_and_amounts(engine, queries):
    await engine.transfer(SENDER, RECEIVER, Decimal("7.50"))

    (record,) = await queries.list_recent(1)

    assert record.sender_address == SENDER
    assert record.receiver_address == RECEIVER
    assert record.amount == Decimal("7.50")


async def test_list_recent_with_zero_count_is_empty(engine, queries):
    await engine.transfer(SENDER, RECEIVER, Decimal("1.00"))

    assert await queries.list_recent(0) == []


async def test_list_recent_rejects_negative_count(queries):
    with pytest.raises(ValueError):
        await queries.list_recent(-1)


async def test_get_balance(queries):
    assert await queries.get_balance(SENDER) == Decimal("100.00")
    assert await queries.get_balance(OTHER) == Decimal("0.00")


async def test_get_balance_of_unknown_wallet(queries):
    with pytest.raises(WalletNotFoundError) as exc_info:
        await queries.get_balance("missing")

    assert exc_info.value.address == "missing"
    assert exc_info.value.phase is None


async def test_get_wallet_snapshot(queries):
    wallet = await queries.get_wallet(RECEIVER)

    assert wallet.address == RECEIVER
    assert wallet.balance == Decimal("50.00")
    assert wallet.id > 0
