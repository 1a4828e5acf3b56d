"""Configuration management using Pydantic Settings."""
from functools import lru_cache
from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Scoring tables and thresholds are constants in ``app.scoring`` and are
    intentionally not configurable here.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Partner Portfolio Scoring API"
    app_version: str = "1.0.0"
    debug: bool = False

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "console"] = "console"

    # API
    max_portfolio_size: int = Field(
        default=500,
        ge=1,
        description="Largest portfolio accepted in a single request",
    )
    cors_origins: List[str] = Field(default=["*"])


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
