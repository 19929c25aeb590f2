"""Ledger domain specific exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import TransferPhase


class LedgerError(Exception):
    """Base class for ledger domain errors.

    ``phase`` names the transfer phase that produced the error; it is ``None``
    for errors raised outside a transfer (plain queries, seeding).
    """

    def __init__(self, message: str, *, phase: TransferPhase | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.phase = phase

    def __str__(self) -> str:
        if self.phase is None:
            return self.message
        return f"[{self.phase.value}] {self.message}"


class TransferRejectedError(LedgerError):
    """Raised when a request is refused before anything is persisted."""


class WalletNotFoundError(TransferRejectedError):
    """Raised when an address does not resolve to a wallet."""

    def __init__(self, address: str, *, phase: TransferPhase | None = None) -> None:
        super().__init__(f"wallet does not exist: {address}", phase=phase)
        self.address = address


class InvalidAmountError(TransferRejectedError):
    """Raised when a transfer amount is not a positive currency value."""


class InsufficientBalanceError(TransferRejectedError):
    """Raised when the sender cannot cover the transfer amount."""


class SelfTransferError(TransferRejectedError):
    """Raised when sender and receiver are the same wallet and policy forbids it."""


class StorageFailureError(LedgerError):
    """Raised when the ledger store fails (connectivity, constraints, driver errors)."""


class TransientStorageError(StorageFailureError):
    """Raised on timeouts and lock waits; the request may succeed when retried."""
