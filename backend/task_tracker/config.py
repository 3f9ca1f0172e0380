"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Every setting can be overridden by an environment variable or .env entry
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - SQLite by default so the API runs without a database server; PostgreSQL
      URLs are accepted in the plain form hosting providers hand out
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///./tasks.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """asyncpg needs the postgresql+asyncpg:// scheme."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 10
    database_max_overflow: int = 20
    database_auto_create: bool = True

    # API
    api_prefix: str = "/api"
    cors_origins: list[str] = [
        "http://localhost:3000", "http://127.0.0.1:3000",
    ]
    debug_routes: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 4000

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"
    log_request_bodies: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
