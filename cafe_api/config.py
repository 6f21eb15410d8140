"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - Defaults provided for all settings: works out-of-the-box with the built-in catalog

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Catalog: None serves the built-in dataset
    catalog_file: str | None = None

    @field_validator("catalog_file", mode="before")
    @classmethod
    def blank_catalog_file_is_none(cls, v: str | None) -> str | None:
        """An empty CATALOG_FILE env var means "use the built-in catalog"."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
