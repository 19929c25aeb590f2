from fastapi import APIRouter

from wallet_ledger.interfaces.http.routers import transactions, wallets


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(transactions.router, tags=["Transactions"])
    router.include_router(wallets.router, prefix="/wallet", tags=["Wallet"])
    return router


__all__ = [
    "create_api_router",
]
