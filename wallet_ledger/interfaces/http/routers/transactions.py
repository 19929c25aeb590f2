"""Transfer and transaction history endpoints."""

from fastapi import APIRouter, Depends, Query, status

from wallet_ledger.core.container import ApplicationContainer
from wallet_ledger.domain.wallets import LedgerError, QueryService, TransferEngine
from wallet_ledger.interfaces.http.deps import get_container, get_query_service, get_transfer_engine
from wallet_ledger.interfaces.http.errors import STORAGE_ERRORS, to_http_exception
from wallet_ledger.schemas import ErrorResponse, TransactionResponse, TransferRequest, TransferResponse

router = APIRouter()


@router.post(
    "/send",
    response_model=TransferResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}, **STORAGE_ERRORS},
    summary="Transfer funds between two wallets",
)
async def send(
    payload: TransferRequest,
    engine: TransferEngine = Depends(get_transfer_engine),
) -> TransferResponse:
    try:
        confirmation = await engine.transfer(
            payload.sender_address,
            payload.receiver_address,
            payload.amount,
        )
    except LedgerError as exc:
        raise to_http_exception(exc) from exc
    return TransferResponse(
        transaction=TransactionResponse.model_validate(confirmation.record),
        sender_balance=confirmation.sender_balance,
    )


@router.get(
    "/transactions",
    response_model=list[TransactionResponse],
    responses=STORAGE_ERRORS,
    summary="List the most recent transfers",
)
async def list_transactions(
    count: int = Query(..., ge=0, description="Number of transfers to return"),
    service: QueryService = Depends(get_query_service),
    container: ApplicationContainer = Depends(get_container),
) -> list[TransactionResponse]:
    count = min(count, container.settings.ledger.max_history)
    try:
        records = await service.list_recent(count)
    except LedgerError as exc:
        raise to_http_exception(exc) from exc
    return [TransactionResponse.model_validate(record) for record in records]
