"""Domain models for the wallet ledger."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class TransferPhase(str, Enum):
    VALIDATING = "validating"
    AUTHORIZING = "authorizing"
    MUTATING = "mutating"
    RECORDING = "recording"
    COMMITTING = "committing"
    DONE = "done"
    ABORTED = "aborted"


@dataclass(slots=True)
class WalletSnapshot:
    id: int
    address: str
    balance: Decimal
    created_at: Optional[datetime] = None


@dataclass(slots=True, frozen=True)
class TransactionRecord:
    id: int
    sender_id: int
    receiver_id: int
    sender_address: str
    receiver_address: str
    amount: Decimal
    created_at: datetime


@dataclass(slots=True, frozen=True)
class TransferConfirmation:
    record: TransactionRecord
    sender_balance: Decimal
    receiver_balance: Decimal
