"""Application configuration using Pydantic Settings for environment-based overrides."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """
    Central configuration for the scoring tool.

    This is deployment configuration (endpoints, storage locations, logging).
    User-editable settings such as credentials and the selected model live in
    the settings store, not here.

    All settings can be overridden via environment variables prefixed with JAUCP_.

    Example:
        JAUCP_DATA_DIR=~/.local/share/jaucp-scorer
        JAUCP_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="JAUCP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Persistence
    data_dir: Path | None = Field(
        default=None,
        description="Directory for durable JSON stores; unset means in-process local storage",
    )
    settings_store_path: str = "settings.json"
    history_store_path: str = "history.json"
    history_capacity: int = Field(default=100, ge=1, le=10_000)

    # Provider endpoints
    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    cerebras_base_url: str = "https://api.cerebras.ai/v1"

    # Identifying headers sent to OpenRouter
    app_title: str = "JAUCP Scoring Tool"
    app_referer: str | None = None

    # None disables the deadline entirely (calls wait as long as the provider does)
    request_timeout: float | None = Field(default=None, gt=0.0)

    metrics_enabled: bool = True

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache
def get_config() -> AppConfig:
    """
    Get cached configuration instance.

    Uses lru_cache to ensure configuration is loaded only once.
    Clear cache with get_config.cache_clear() if needed.
    """
    return AppConfig()
