"""Transfer engine: moves value between two wallets as one unit of work."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Union

from .exceptions import (
    InsufficientBalanceError,
    InvalidAmountError,
    LedgerError,
    SelfTransferError,
    TransferRejectedError,
    TransientStorageError,
    WalletNotFoundError,
)
from .lookup import WalletLookup
from .models import TransactionRecord, TransferConfirmation, TransferPhase
from .repository import UnitOfWorkFactory

if TYPE_CHECKING:
    from wallet_ledger.core.config import LedgerSettings
    from wallet_ledger.infrastructure.database import Database

logger = logging.getLogger(__name__)

AMOUNT_SCALE = 2

AmountLike = Union[Decimal, int, str]


def parse_amount(value: AmountLike) -> Decimal:
    """Return ``value`` as a positive Decimal with at most two decimal places."""
    if isinstance(value, (float, bool)):
        raise InvalidAmountError(f"amount must be a decimal value, got {type(value).__name__}")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise InvalidAmountError(f"malformed amount: {value!r}") from exc
    if not amount.is_finite():
        raise InvalidAmountError(f"malformed amount: {value!r}")
    if amount <= 0:
        raise InvalidAmountError("amount must be greater than zero")
    if amount.as_tuple().exponent < -AMOUNT_SCALE:
        raise InvalidAmountError(f"amount supports at most {AMOUNT_SCALE} decimal places")
    return amount


class _TransferState:
    """Current phase of one transfer, shared with the timeout guard."""

    __slots__ = ("phase",)

    def __init__(self) -> None:
        self.phase = TransferPhase.VALIDATING

    def advance(self, phase: TransferPhase) -> None:
        logger.debug("Transfer phase %s -> %s", self.phase.value, phase.value)
        self.phase = phase


@dataclass(slots=True)
class TransferEngine:
    """Move funds between two wallets and record the move atomically.

    Every store access after validation starts happens inside one unit of
    work. Both wallet rows are locked in ascending id order before the
    balance is read, so opposite-direction transfers between the same pair
    queue instead of deadlocking. The balance check is repeated by the debit
    itself as a conditional update, so two transfers racing on the same
    sender cannot both spend the same funds.
    """

    unit_of_work: UnitOfWorkFactory
    allow_self_transfer: bool = True
    timeout: float | None = None

    @classmethod
    def with_database(cls, database: Database, settings: LedgerSettings) -> "TransferEngine":
        return cls(
            unit_of_work=database.unit_of_work,
            allow_self_transfer=settings.allow_self_transfer,
            timeout=settings.transfer_timeout_seconds,
        )

    async def transfer(
        self,
        sender_address: str,
        receiver_address: str,
        amount: AmountLike,
    ) -> TransferConfirmation:
        state = _TransferState()
        try:
            if self.timeout is None:
                confirmation = await self._run(state, sender_address, receiver_address, amount)
            else:
                confirmation = await asyncio.wait_for(
                    self._run(state, sender_address, receiver_address, amount),
                    self.timeout,
                )
        except asyncio.TimeoutError as exc:
            failed_phase = state.phase
            state.advance(TransferPhase.ABORTED)
            logger.error("Transfer timed out during %s and was rolled back", failed_phase.value)
            raise TransientStorageError(
                f"transfer did not complete within {self.timeout}s",
                phase=failed_phase,
            ) from exc
        except LedgerError as exc:
            if exc.phase is None:
                exc.phase = state.phase
            state.advance(TransferPhase.ABORTED)
            if isinstance(exc, TransferRejectedError):
                logger.info("Transfer rejected during %s: %s", exc.phase.value, exc.message)
            else:
                logger.error("Transfer failed during %s: %s", exc.phase.value, exc.message)
            raise

        state.advance(TransferPhase.DONE)
        logger.info(
            "Transfer %s completed: %s from %s to %s",
            confirmation.record.id,
            confirmation.record.amount,
            sender_address,
            receiver_address,
        )
        return confirmation

    async def _run(
        self,
        state: _TransferState,
        sender_address: str,
        receiver_address: str,
        raw_amount: AmountLike,
    ) -> TransferConfirmation:
        async with self.unit_of_work() as uow:
            lookup = WalletLookup(uow.ledger)
            sender_id = await lookup.resolve_id(sender_address)
            receiver_id = await lookup.resolve_id(receiver_address)

            state.advance(TransferPhase.AUTHORIZING)
            amount = parse_amount(raw_amount)
            if sender_id == receiver_id and not self.allow_self_transfer:
                raise SelfTransferError("sender and receiver must be different wallets")
            await uow.ledger.lock_wallets({sender_id, receiver_id})
            balance = await uow.ledger.get_balance(sender_id)
            if balance is None:
                raise WalletNotFoundError(sender_address)
            if balance < amount:
                raise InsufficientBalanceError(
                    f"balance {balance} is less than transfer amount {amount}"
                )

            state.advance(TransferPhase.MUTATING)
            sender_balance = await uow.ledger.adjust_balance(sender_id, -amount, require_non_negative=True)
            if sender_balance is None:
                # Another unit of work spent the funds after the check above
                raise InsufficientBalanceError(f"balance no longer covers transfer amount {amount}")
            receiver_balance = await uow.ledger.adjust_balance(receiver_id, amount)
            if receiver_balance is None:
                raise WalletNotFoundError(receiver_address)

            state.advance(TransferPhase.RECORDING)
            row = await uow.ledger.add_transaction_record(
                sender_id=sender_id,
                receiver_id=receiver_id,
                amount=amount,
            )

            state.advance(TransferPhase.COMMITTING)
            await uow.commit()

        if sender_id == receiver_id:
            sender_balance = receiver_balance
        record = TransactionRecord(
            id=row.id,
            sender_id=sender_id,
            receiver_id=receiver_id,
            sender_address=sender_address,
            receiver_address=receiver_address,
            amount=row.amount,
            created_at=row.created_at,
        )
        return TransferConfirmation(
            record=record,
            sender_balance=sender_balance,
            receiver_balance=receiver_balance,
        )
