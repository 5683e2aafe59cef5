"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - Defaults work out-of-the-box: local SQLite file, JSON logs

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - store_backend=memory keeps everything in-process (no database needed)
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fontgate.core.domain_types import StoreBackend


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Store
    store_backend: StoreBackend = StoreBackend.DATABASE

    # Database
    database_url: str = "sqlite+aiosqlite:///./fontgate.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    database_create_tables: bool = True

    # Fonts
    font_media_type: str = "font/woff2"
    font_cache_max_age: int = 31_536_000  # 1 year

    # API (admin page / whitelist endpoints only; fonts set their own CORS headers)
    cors_origins: list[str] = []

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
