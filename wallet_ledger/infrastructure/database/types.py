"""Column types for currency amounts."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from sqlalchemy import BigInteger, Numeric
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator, TypeEngine

AMOUNT_PRECISION = 18
AMOUNT_SCALE = 2


class Money(TypeDecorator):
    """Exact decimal amount with two places.

    Native ``NUMERIC(18, 2)`` where the backend has one. SQLite only has
    floating point numerics, so there the value is kept as an integer count of
    minor units and scaled on the way in and out.
    """

    impl = Numeric(AMOUNT_PRECISION, AMOUNT_SCALE, asdecimal=True)
    cache_ok = True

    def load_dialect_impl(self, dialect: Dialect) -> TypeEngine[Any]:
        if dialect.name == "sqlite":
            return dialect.type_descriptor(BigInteger())
        return dialect.type_descriptor(self.impl)

    def process_bind_param(self, value: Any, dialect: Dialect) -> Any:
        if value is None:
            return None
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
        if dialect.name != "sqlite":
            return amount
        minor_units = amount.scaleb(AMOUNT_SCALE)
        if minor_units != minor_units.to_integral_value():
            raise ValueError(f"amount {amount} has more than {AMOUNT_SCALE} decimal places")
        return int(minor_units)

    def process_result_value(self, value: Any, dialect: Dialect) -> Decimal | None:
        if value is None:
            return None
        if dialect.name == "sqlite":
            return Decimal(int(value)).scaleb(-AMOUNT_SCALE)
        return Decimal(value).quantize(Decimal(1).scaleb(-AMOUNT_SCALE))
