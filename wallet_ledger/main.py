import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from wallet_ledger import __version__
from wallet_ledger.core.config import Settings, get_settings
from wallet_ledger.core.container import ApplicationContainer
from wallet_ledger.core.logging import setup_logging
from wallet_ledger.domain.wallets import seed_wallets
from wallet_ledger.interfaces.http.routers import create_api_router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings)
        container = ApplicationContainer.from_settings(settings)
        await container.init_infrastructure()
        if settings.seed.enabled:
            await seed_wallets(
                container.database.unit_of_work,
                count=settings.seed.wallet_count,
                initial_balance=settings.seed.initial_balance,
                address_bytes=settings.seed.address_bytes,
            )
        app.state.container = container
        logger.info("%s %s started (%s)", settings.project_name, __version__, settings.environment)
        try:
            yield
        finally:
            await container.shutdown()
            logger.info("%s stopped", settings.project_name)

    app = FastAPI(
        title=settings.project_name,
        description="Wallet balance transfers and transaction history",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.include_router(create_api_router(settings.api_prefix))
    return app


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "wallet_ledger.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
    )


if __name__ == "__main__":
    run()
