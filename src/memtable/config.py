"""
memtable Configuration Module.

Handles store settings loaded from the environment (prefix ``MEMTABLE_``).
Uses pydantic-settings for validation and type safety.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Main store settings."""

    model_config = SettingsConfigDict(
        env_prefix="MEMTABLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Level applied by configure_logging")
    thread_safe: bool = Field(
        default=True,
        description="If true, every public TableStore operation holds a single re-entrant lock.",
    )
    metrics_enabled: bool = Field(
        default=True,
        description="If true, TableStore records per-operation latencies and error codes.",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
