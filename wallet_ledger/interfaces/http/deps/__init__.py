"""Reusable FastAPI dependencies."""

from .container import get_container
from .ledger import get_query_service, get_transfer_engine

__all__ = [
    "get_container",
    "get_query_service",
    "get_transfer_engine",
]
