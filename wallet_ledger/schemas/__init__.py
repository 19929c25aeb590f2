"""Pydantic schemas used by the HTTP interface."""
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class TransferRequest(BaseModel):
    sender_address: str = Field(..., min_length=1, max_length=128)
    receiver_address: str = Field(..., min_length=1, max_length=128)
    amount: Decimal


class TransactionResponse(BaseModel):
    id: int
    sender_address: str
    receiver_address: str
    amount: Decimal
    date: datetime = Field(validation_alias="created_at")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class TransferResponse(BaseModel):
    message: str = "transfer completed"
    transaction: TransactionResponse
    sender_balance: Decimal


class BalanceResponse(BaseModel):
    address: str
    balance: Decimal


class ErrorResponse(BaseModel):
    detail: str


__all__ = [
    "TransferRequest",
    "TransactionResponse",
    "TransferResponse",
    "BalanceResponse",
    "ErrorResponse",
]
