"""Application settings and configuration."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = "Employee Balance Tracker"

    # Explorer API
    explorer_api_url: str = "https://blockscout.shardeum.org/api"
    explorer_provider: str = "blockscout"  # "blockscout" or "stub"
    request_timeout_seconds: float = Field(default=10, gt=0)
    request_retries: int = Field(default=3, ge=0)
    request_backoff_seconds: float = Field(default=1.0, ge=0)

    # Inputs and persisted state
    wallets_file: Path = Path("wallets.txt")
    cache_file: Path = Path("balances-cache.json")

    # Reconstruction window
    window_days: int = Field(default=32, ge=1)
    recent_days: int = Field(default=2, ge=2)  # today and yesterday never cached

    # Batching and concurrency
    live_balance_chunk_size: int = Field(default=20, ge=1)
    max_workers: int = Field(default=4, ge=1)

    log_level: str = "INFO"


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
