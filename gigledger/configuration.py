"""Mini README: Centralised configuration models and helpers for Gig Ledger.

Structure:
    * GigLedgerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``GIGLEDGER_*`` environment variables (or a
    local ``.env`` file) controlling report wording, share targets, logging and
    the web interface binding. Settings are validated once per process.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class GigLedgerSettings(BaseSettings):
    """Runtime configuration for the Gig Ledger tracker."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    log_level: str = Field(
        "INFO",
        description="Name of the root logging level, e.g. DEBUG or WARNING.",
    )
    currency_label: str = Field(
        "RM",
        description="Currency label printed before amounts in lists and reports.",
    )
    report_greeting: str = Field(
        "Hello, here is my Gig Finance Report.",
        description="First line of the exported report message.",
    )
    email_subject: str = Field(
        "Monthly Finance Report",
        description="Subject line used for e-mail share links.",
    )
    whatsapp_base_url: str = Field(
        "https://wa.me/",
        description="Base URL of the WhatsApp click-to-chat endpoint.",
    )
    interface_host: str = Field(
        "127.0.0.1",
        description="Network interface for the web tracker to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the web tracker exposes.",
        ge=1,
        le=65535,
    )

    class Config:
        env_prefix = "GIGLEDGER_"
        env_file = ".env"
        case_sensitive = False

    @validator("log_level", pre=True)
    def _normalise_level(cls, value: str) -> str:
        """Accept any casing and reject names the logging module does not know."""

        level = str(value).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache()
def get_settings() -> GigLedgerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return GigLedgerSettings()
