"""Mini README: Centralised configuration for bankqueue.

Structure:
    * BankQueueSettings - pydantic settings model read from the environment.
    * get_settings - cached accessor shared by the CLI and helpers.

Usage:
    Export ``BANKQUEUE_TIER_CAPACITY`` or ``BANKQUEUE_LOG_LEVEL`` (or put
    them in a ``.env`` file) to change the defaults. Routing thresholds and
    loan multipliers are domain rules and deliberately live in code.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BankQueueSettings(BaseSettings):
    """Runtime configuration for the bankqueue engine and CLI."""

    model_config = SettingsConfigDict(
        env_prefix="BANKQUEUE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        "development",
        description="Environment label shown in CLI reports.",
    )
    tier_capacity: int = Field(
        64,
        description="Number of slots reserved in each of the three tier heaps.",
        ge=1,
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level applied by the CLI.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        """Accept any casing but only real logging level names."""

        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache()
def get_settings() -> BankQueueSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return BankQueueSettings()
