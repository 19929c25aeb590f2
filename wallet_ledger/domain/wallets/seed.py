"""Bootstrap wallets for an empty ledger."""

from __future__ import annotations

import logging
import secrets
from decimal import Decimal

from .repository import UnitOfWorkFactory

logger = logging.getLogger(__name__)


async def seed_wallets(
    unit_of_work: UnitOfWorkFactory,
    *,
    count: int,
    initial_balance: Decimal = Decimal("0"),
    address_bytes: int = 32,
) -> list[str]:
    """Create ``count`` wallets with random hex addresses if none exist yet.

    Returns the new addresses; an empty list when the ledger already holds
    wallets.
    """
    async with unit_of_work() as uow:
        existing = await uow.ledger.count_wallets()
        if existing:
            logger.info("Ledger already holds %d wallets, skipping seed", existing)
            return []

        addresses = [secrets.token_hex(address_bytes) for _ in range(count)]
        for address in addresses:
            await uow.ledger.create_wallet(address, initial_balance)
        await uow.commit()

    logger.info("Seeded %d wallets with initial balance %s", len(addresses), initial_balance)
    return addresses
