"""Settings — database, CORS, logging and idempotency limits read from the environment.

Invariants:
    - Every field has a default that matches the docker-compose database
    - get_settings() builds Settings once per process and caches it
    - A plain postgresql:// URL is upgraded to the asyncpg driver

Design Decisions:
    - pydantic-settings reads env vars and an optional .env file, and coerces
      list and int fields
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Marketplace runtime settings; env var names match field names."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://marketplace:marketplace@db:5432/marketplace"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Idempotency
    idempotency_key_max_length: int = 255

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
