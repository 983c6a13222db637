"""
Configuration management for cuelink.

Uses Pydantic Settings to load configuration from environment variables
with sensible defaults for development.

Usage:
    from cuelink.config import settings
    print(settings.match_min_confidence)
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Environment variables can be set directly or via a .env file
    in the project root directory.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # ==========================================================================
    # Player Matching Configuration
    # ==========================================================================

    # See players/matching.py for how these are applied
    match_min_confidence: float = Field(
        default=0.7,
        description="Only report candidate matches at or above this confidence",
    )
    match_case_sensitive: bool = Field(
        default=False,
        description="Compare player names case-sensitively",
    )
    match_ignore_whitespace: bool = Field(
        default=True,
        description="Trim names and collapse internal whitespace before comparing",
    )

    # ==========================================================================
    # Logging Configuration
    # ==========================================================================

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    # ==========================================================================
    # Validators
    # ==========================================================================

    @field_validator("match_min_confidence")
    @classmethod
    def validate_min_confidence(cls, v: float) -> float:
        """Confidence thresholds live in [0, 1]."""
        if not 0.0 <= v <= 1.0:
            raise ValueError(f"match_min_confidence must be between 0 and 1, got {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return upper_v


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Using lru_cache ensures we only load settings once,
    which is important because loading from .env can be slow.
    """
    return Settings()


# Convenience alias for importing
settings = get_settings()
