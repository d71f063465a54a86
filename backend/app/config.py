"""Catalog Settings — environment-driven configuration via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): one Settings instance per process
    - database_url always names an async driver (aiosqlite or asyncpg)
    - Every field has a default, so a bare checkout runs against local SQLite

Design Decisions:
    - Alembic's env.py reads the same Settings, so the app and migrations
      can never target different databases
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    app_name: str = "catalog-api"
    app_version: str = "1.0.0"

    # Storage
    database_url: str = "sqlite+aiosqlite:///./catalog.db"
    database_pool_size: int = 20
    database_max_overflow: int = 10
    create_tables_on_startup: bool = True
    seed_default_categories: bool = True

    # Accounts
    password_hash_scheme: str = "pbkdf2_sha256"

    # HTTP
    cors_origins: list[str] = ["http://localhost:3000"]

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"
    log_requests: bool = True

    @field_validator("database_url", mode="before")
    @classmethod
    def use_async_driver(cls, v: str) -> str:
        """postgresql:// URLs from hosting platforms → postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    @field_validator("log_format")
    @classmethod
    def known_log_format(cls, v: str) -> str:
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
