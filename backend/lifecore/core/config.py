"""
Application configuration using Pydantic Settings.

Values are read from environment variables (and an optional .env file).
"""

from functools import lru_cache
from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ===========================================
    # Environment
    # ===========================================
    ENVIRONMENT: Literal["local", "production"] = "local"
    DEBUG: bool = True
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # ===========================================
    # Server
    # ===========================================
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    ALLOWED_ORIGINS: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"]
    )

    # ===========================================
    # Recurrence
    # ===========================================
    # Latest selectable start/end date, counted from today (2 years)
    DATE_SELECTION_HORIZON_DAYS: int = Field(default=365 * 2, ge=1)

    # Day-by-day scan limit when searching for the next occurrence
    RECURRENCE_SCAN_LIMIT_DAYS: int = Field(default=400, ge=1)

    # ===========================================
    # Daily points chart
    # ===========================================
    CHART_MIN_BAR_FRACTION: float = Field(default=0.04, ge=0.0, le=1.0)
    CHART_FALLBACK_MAX_POINTS: int = Field(default=10, ge=1)


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Using lru_cache ensures settings are loaded only once.
    """
    return Settings()
