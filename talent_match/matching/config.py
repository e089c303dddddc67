"""Configuration settings for the matching engine."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MatchingConfig(BaseSettings):
    """Matching engine configuration settings.

    All settings have sensible defaults and can be overridden via
    environment variables with `MATCHING_` prefix or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="MATCHING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    prefetch_ceiling: Annotated[int, Field(gt=0)] = Field(
        default=1000,
        description=(
            "Maximum coarse-filtered candidates fetched before in-memory "
            "fine filtering in primary/secondary mode"
        ),
    )
    default_page: Annotated[int, Field(gt=0)] = Field(
        default=1,
        description="Page used when an any-skill query gives no valid page",
    )
    default_page_size: Annotated[int, Field(gt=0)] = Field(
        default=10,
        description="Page size used when an any-skill query gives no valid size",
    )


# Singleton instance for easy import
_matching_config: MatchingConfig | None = None


def get_matching_config() -> MatchingConfig:
    """Get the matching configuration singleton."""
    global _matching_config
    if _matching_config is None:
        _matching_config = MatchingConfig()
    return _matching_config


def reset_matching_config() -> None:
    """Reset the matching configuration singleton (useful for testing)."""
    global _matching_config
    _matching_config = None
