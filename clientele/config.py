"""Configuration loading for the Clientele customer registry.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from clientele.adapters.ids.random_source import DEFAULT_LOWER, DEFAULT_UPPER
from clientele.core.id_pool import CUSTOMER_ID_SEEDS, DEFAULT_BATCH_SIZE


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Id pool configuration
    id_pool_initial_ids: list[int] = Field(
        default_factory=lambda: list(CUSTOMER_ID_SEEDS),
        description="Reserved customer ids dispensed before random expansion",
    )
    id_pool_batch_size: int = Field(
        default=DEFAULT_BATCH_SIZE,
        description="Number of ids added each time the pool is exhausted",
    )
    id_range_lower: int = Field(
        default=DEFAULT_LOWER,
        description="Smallest randomly drawn id (inclusive)",
    )
    id_range_upper: int = Field(
        default=DEFAULT_UPPER,
        description="Upper bound for randomly drawn ids (exclusive)",
    )
    id_seed: int | None = Field(
        default=None,
        description="Seed for reproducible id draws",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging",
    )

    @field_validator("id_pool_initial_ids")
    @classmethod
    def validate_initial_ids(cls, v: list[int]) -> list[int]:
        """Ensure reserved ids are positive."""
        if any(id_ <= 0 for id_ in v):
            raise ValueError("id_pool_initial_ids must all be positive")
        return v

    @field_validator("id_pool_batch_size")
    @classmethod
    def validate_batch_size(cls, v: int) -> int:
        """Ensure batch size is positive."""
        if v <= 0:
            raise ValueError("id_pool_batch_size must be positive")
        return v

    @field_validator("id_range_lower")
    @classmethod
    def validate_range_lower(cls, v: int) -> int:
        """Ensure drawn ids are positive."""
        if v <= 0:
            raise ValueError("id_range_lower must be positive")
        return v

    @model_validator(mode="after")
    def validate_range(self) -> "Settings":
        """Ensure the id range is not empty."""
        if self.id_range_upper <= self.id_range_lower:
            raise ValueError("id_range_upper must be greater than id_range_lower")
        return self


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
