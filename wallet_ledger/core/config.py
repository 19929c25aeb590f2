"""Application configuration using pydantic settings with structured sections."""

from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False


class DatabaseSettings(BaseModel):
    url: str = Field(default="sqlite+aiosqlite:///./wallet_ledger.db", alias="url")
    echo: bool = False
    pool_size: Optional[int] = None
    max_overflow: Optional[int] = None
    # Enforced by the store: SQLite busy timeout, PostgreSQL statement_timeout.
    statement_timeout_seconds: float = Field(default=5.0, gt=0)
    create_schema: bool = True

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")


class LedgerSettings(BaseModel):
    allow_self_transfer: bool = True
    transfer_timeout_seconds: Optional[float] = Field(default=10.0, gt=0)
    max_history: int = Field(default=1000, ge=0)


class SeedSettings(BaseModel):
    enabled: bool = True
    wallet_count: int = Field(default=10, ge=0)
    initial_balance: Decimal = Field(default=Decimal("0"), ge=0)
    address_bytes: int = Field(default=32, ge=8, le=64)


class LoggingSettings(BaseModel):
    level: str = "INFO"
    file: Optional[Path] = None


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "Wallet Ledger"
    api_prefix: str = "/api"

    server: ServerSettings = ServerSettings()
    database: DatabaseSettings = DatabaseSettings()
    ledger: LedgerSettings = LedgerSettings()
    seed: SeedSettings = SeedSettings()
    logging: LoggingSettings = LoggingSettings()

    @property
    def database_url(self) -> str:
        return self.database.url

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port


@lru_cache()
def get_settings() -> Settings:
    return Settings()
