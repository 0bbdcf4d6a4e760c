"""
Configuration and settings for the todo backend.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-backed settings for the FastAPI service."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    api_prefix: str = Field(default="/api")

    # Database (Postgres expected)
    database_url: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("DATABASE_URL", "database_url")
    )

    # Development toggles
    use_in_memory_backends: bool = Field(
        default=False,
        validation_alias=AliasChoices(
            "MDTODO_USE_IN_MEMORY_BACKENDS", "use_in_memory_backends"
        ),
    )
    seed_sample_data: bool = Field(
        default=False,
        validation_alias=AliasChoices("MDTODO_SEED_SAMPLE_DATA", "seed_sample_data"),
    )

    # HTTP
    cors_allow_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        validation_alias=AliasChoices(
            "MDTODO_CORS_ALLOW_ORIGINS", "cors_allow_origins"
        ),
    )
    host: str = Field(
        default="0.0.0.0", validation_alias=AliasChoices("MDTODO_HOST", "host")
    )
    port: int = Field(default=8000, validation_alias=AliasChoices("MDTODO_PORT", "port"))

    log_level: str = Field(
        default="INFO", validation_alias=AliasChoices("MDTODO_LOG_LEVEL", "log_level")
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
