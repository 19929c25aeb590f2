"""Translation of SQLAlchemy errors into ledger storage errors."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import DBAPIError, OperationalError, SQLAlchemyError

from wallet_ledger.domain.wallets.exceptions import StorageFailureError, TransientStorageError

# PostgreSQL SQLSTATEs worth retrying: statement_timeout, lock_timeout,
# deadlock detected, serialization failure.
TRANSIENT_SQLSTATES = frozenset({"57014", "55P03", "40P01", "40001"})


def _sqlstate(exc: DBAPIError) -> str | None:
    # asyncpg adapter errors expose ``sqlstate``; psycopg exposes ``pgcode``
    return getattr(exc.orig, "sqlstate", None) or getattr(exc.orig, "pgcode", None)


@contextmanager
def translate_storage_errors(operation: str) -> Iterator[None]:
    """Re-raise database errors from ``operation`` as storage errors.

    Operational errors and the PostgreSQL timeout / lock conflict states are
    reported as transient; everything else as a plain storage failure. The
    driver error stays available as ``__cause__``.
    """
    try:
        yield
    except OperationalError as exc:
        raise TransientStorageError(f"{operation} failed: store unavailable or timed out") from exc
    except DBAPIError as exc:
        if _sqlstate(exc) in TRANSIENT_SQLSTATES:
            raise TransientStorageError(f"{operation} failed: store timed out or lock conflict") from exc
        raise StorageFailureError(f"{operation} failed") from exc
    except SQLAlchemyError as exc:
        raise StorageFailureError(f"{operation} failed") from exc
