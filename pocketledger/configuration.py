"""Mini README: Centralised configuration models and helpers for Pocket Ledger.

Structure:
    * PocketLedgerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``POCKET_LEDGER_*`` environment variables
    (or a local ``.env`` file) for the web server binding, log level, and the
    display options used when rendering totals and dates.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PocketLedgerSettings(BaseSettings):
    """Runtime configuration for the Pocket Ledger service."""

    model_config = SettingsConfigDict(
        env_prefix="POCKET_LEDGER_",
        env_file=".env",
        case_sensitive=False,
    )

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the web form to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the web form is served on.",
        ge=1,
        le=65535,
    )
    currency_symbol: str = Field(
        "$",
        description="Symbol prefixed to every rendered amount.",
        min_length=1,
    )
    date_format: str = Field(
        "%m/%d/%Y",
        description="strftime pattern used for the date shown next to each expense.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level name (DEBUG, INFO, WARNING, ...).",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value: object) -> str:
        """Accept any casing but only real logging level names."""

        normalised = str(value).strip().upper()
        if not isinstance(logging.getLevelName(normalised), int):
            raise ValueError(f"Unknown log level: {value}")
        return normalised


@lru_cache()
def get_settings() -> PocketLedgerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return PocketLedgerSettings()
