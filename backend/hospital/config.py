"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - DB_BASE_URL has no default; a missing value fails Settings() validation
    - get_settings() is cached (lru_cache), one instance per process

Design Decisions:
    - Env names are case-insensitive and may come from a local .env file
    - CORS methods are fixed (GET/POST/PUT/DELETE); only origins are configurable
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    db_base_url: str
    database_name: str = "hospital"
    db_server_selection_timeout_ms: int = 30_000

    @field_validator("db_base_url")
    @classmethod
    def require_connection_string(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("DB_BASE_URL environment variable not set")
        return v

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Behavior
    enforce_unique_usernames: bool = True
    expose_patient_schedule: bool = False

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
