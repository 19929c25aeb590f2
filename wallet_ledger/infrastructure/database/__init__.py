"""Database infrastructure helpers (engine, sessions, migrations)."""

from .base import Base
from .session import Database
from .unit_of_work import SqlUnitOfWork

__all__ = ["Base", "Database", "SqlUnitOfWork"]
