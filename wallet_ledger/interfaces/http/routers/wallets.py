"""Wallet balance endpoints."""

from fastapi import APIRouter, Depends, status

from wallet_ledger.domain.wallets import LedgerError, QueryService
from wallet_ledger.interfaces.http.deps import get_query_service
from wallet_ledger.interfaces.http.errors import STORAGE_ERRORS, to_http_exception
from wallet_ledger.schemas import BalanceResponse, ErrorResponse

router = APIRouter()


@router.get(
    "/{address}/balance",
    response_model=BalanceResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}, **STORAGE_ERRORS},
    summary="Get wallet balance",
)
async def get_balance(
    address: str,
    service: QueryService = Depends(get_query_service),
) -> BalanceResponse:
    try:
        balance = await service.get_balance(address)
    except LedgerError as exc:
        raise to_http_exception(exc, not_found_status=status.HTTP_404_NOT_FOUND) from exc
    return BalanceResponse(address=address, balance=balance)
