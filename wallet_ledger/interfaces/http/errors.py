"""Mapping of ledger errors onto HTTP responses."""

from fastapi import HTTPException, status

from wallet_ledger.domain.wallets import (
    LedgerError,
    TransferRejectedError,
    TransientStorageError,
    WalletNotFoundError,
)
from wallet_ledger.schemas import ErrorResponse

STORAGE_ERRORS = {
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    status.HTTP_503_SERVICE_UNAVAILABLE: {"model": ErrorResponse},
}


def to_http_exception(exc: LedgerError, *, not_found_status: int = status.HTTP_400_BAD_REQUEST) -> HTTPException:
    """Rejected requests become 4xx; storage failures 5xx without driver details."""
    if isinstance(exc, WalletNotFoundError):
        return HTTPException(status_code=not_found_status, detail=exc.message)
    if isinstance(exc, TransferRejectedError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)

    where = f" during {exc.phase.value}" if exc.phase is not None else ""
    if isinstance(exc, TransientStorageError):
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"ledger store temporarily unavailable{where}",
        )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"ledger store failure{where}",
    )
