"""
Seed the ledger with wallets when it is empty.

Uses the configured database (DATABASE__URL) and seed section (SEED__WALLET_COUNT,
SEED__INITIAL_BALANCE); prints the generated addresses.
"""
import asyncio

from wallet_ledger.core.config import get_settings
from wallet_ledger.core.container import ApplicationContainer
from wallet_ledger.core.logging import setup_logging
from wallet_ledger.domain.wallets import seed_wallets


async def create_default_wallets() -> None:
    settings = get_settings()
    setup_logging(settings)
    container = ApplicationContainer.from_settings(settings)
    try:
        await container.init_infrastructure()
        addresses = await seed_wallets(
            container.database.unit_of_work,
            count=settings.seed.wallet_count,
            initial_balance=settings.seed.initial_balance,
            address_bytes=settings.seed.address_bytes,
        )
    finally:
        await container.shutdown()

    if not addresses:
        print("Wallets already exist, nothing to seed")
        return
    for address in addresses:
        print(address)


if __name__ == "__main__":
    asyncio.run(create_default_wallets())
