from __future__ import annotations

from decimal import Decimal

from wallet_ledger.core.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.database_url.startswith("sqlite+aiosqlite")
    assert settings.database.is_sqlite
    assert settings.ledger.allow_self_transfer is True
    assert settings.seed.wallet_count == 10
    assert settings.seed.initial_balance == Decimal("0")


def test_nested_environment_overrides(monkeypatch):
    monkeypatch.setenv("DATABASE__URL", "postgresql+asyncpg://ledger:secret@db/ledger")
    monkeypatch.setenv("LEDGER__ALLOW_SELF_TRANSFER", "false")
    monkeypatch.setenv("SEED__INITIAL_BALANCE", "12.50")

    settings = Settings(_env_file=None)

    assert settings.database.url == "postgresql+asyncpg://ledger:secret@db/ledger"
    assert not settings.database.is_sqlite
    assert settings.ledger.allow_self_transfer is False
    assert settings.seed.initial_balance == Decimal("12.50")
