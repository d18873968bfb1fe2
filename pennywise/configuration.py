"""Mini README: Centralised configuration for Pennywise.

Structure:
    * PennywiseSettings - Pydantic settings model read from the environment.
    * get_settings - cached accessor shared by the CLI and the web factory.

Usage:
    Values come from ``PENNYWISE_*`` environment variables or a local ``.env``
    file. The cache means validation happens once per process; tests build
    ``PennywiseSettings`` directly when they need different values.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .currency import CurrencyCode


class PennywiseSettings(BaseSettings):
    """Runtime configuration for the Pennywise dashboard."""

    model_config = SettingsConfigDict(
        env_prefix="PENNYWISE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    interface_host: str = Field(
        "127.0.0.1",
        description="Network interface for the dashboard to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the dashboard listens on.",
        ge=1,
        le=65535,
    )
    display_currency: CurrencyCode = Field(
        CurrencyCode.USD,
        description="Currency used for display and form entry until the user picks another.",
    )
    activity_feed_size: int = Field(
        10,
        description="Number of recent ledger changes listed on the dashboard.",
        ge=1,
    )
    log_level: str = Field("INFO", description="Root logging level.")

    @field_validator("display_currency", mode="before")
    @classmethod
    def _coerce_currency(cls, value: object) -> object:
        """Accept currency codes in any casing."""

        if isinstance(value, str):
            return CurrencyCode.from_str(value)
        return value

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unsupported log level: {value}")
        return level


@lru_cache()
def get_settings() -> PennywiseSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return PennywiseSettings()
