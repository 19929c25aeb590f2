"""Ledger service dependency providers."""

from fastapi import Depends

from wallet_ledger.core.container import ApplicationContainer
from wallet_ledger.domain.wallets import QueryService, TransferEngine

from .container import get_container


def get_transfer_engine(container: ApplicationContainer = Depends(get_container)) -> TransferEngine:
    return container.transfer_engine()


def get_query_service(container: ApplicationContainer = Depends(get_container)) -> QueryService:
    return container.query_service()


__all__ = [
    "get_transfer_engine",
    "get_query_service",
]
