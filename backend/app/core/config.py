"""Configuration settings for the match summary backend."""

from __future__ import annotations

import os
from typing import List

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Riot API Configuration
    riot_api_key: str = Field(default="")
    riot_region: str = Field(default="europe")
    riot_platform: str = Field(default="euw1")
    riot_request_timeout: float = Field(default=10.0, gt=0)
    riot_retry_attempts: int = Field(default=3, ge=1)
    riot_retry_backoff_seconds: float = Field(default=1.0, ge=0)

    # Static game data (Data Dragon) Configuration
    ddragon_base_url: str = Field(default="https://ddragon.leagueoflegends.com")
    ddragon_fallback_version: str = Field(default="14.20.1")
    game_data_cache_ttl: int = Field(
        default=3600, ge=1, description="Seconds to keep the catalog version and mappings"
    )

    # Match history defaults
    default_match_count: int = Field(default=10, ge=1, le=100)
    max_match_count: int = Field(default=100, ge=1, le=100)

    # Application Configuration
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")
    rate_limit: str = Field(default="60/minute")

    # CORS Configuration
    cors_origins: str = Field(default="http://localhost:3000,http://127.0.0.1:3000")

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list."""
        return [
            origin.strip() for origin in self.cors_origins.split(",") if origin.strip()
        ]

    @property
    def environment(self) -> str:
        """Get current environment from ENVIRONMENT variable."""
        env = os.getenv("ENVIRONMENT", "").lower()
        return env if env in ["dev", "production"] else "dev"

    @property
    def riot_api_key_configured(self) -> bool:
        """Whether a usable Riot API key is present."""
        return bool(self.riot_api_key) and self.riot_api_key != "your_riot_api_key_here"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log level: {v}")
        return level

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",  # No prefix for environment variables
        extra="ignore",
    )


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()


# Create a global settings instance lazily
settings: Settings | None = None


def get_global_settings() -> Settings:
    """Get or create the global settings instance."""
    global settings
    if settings is None:
        settings = get_settings()
    return settings
