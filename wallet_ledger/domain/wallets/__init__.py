"""Wallet ledger domain exports"""

from .exceptions import (
    InsufficientBalanceError,
    InvalidAmountError,
    LedgerError,
    SelfTransferError,
    StorageFailureError,
    TransferRejectedError,
    TransientStorageError,
    WalletNotFoundError,
)
from .lookup import WalletLookup
from .models import TransactionRecord, TransferConfirmation, TransferPhase, WalletSnapshot
from .query import QueryService
from .seed import seed_wallets
from .transfer import TransferEngine, parse_amount

__all__ = [
    "InsufficientBalanceError",
    "InvalidAmountError",
    "LedgerError",
    "SelfTransferError",
    "StorageFailureError",
    "TransferRejectedError",
    "TransientStorageError",
    "WalletNotFoundError",
    "WalletLookup",
    "TransactionRecord",
    "TransferConfirmation",
    "TransferPhase",
    "WalletSnapshot",
    "QueryService",
    "seed_wallets",
    "TransferEngine",
    "parse_amount",
]
