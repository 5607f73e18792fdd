"""Pydantic-based settings loaded from ``MAILSYNTAX_*`` environment variables.

Every field has a default, so an empty environment yields the reference
grammar: IP literals (v4 and v6) allowed, no domain label cap, and a comment
loop bounded by the input length.

Usage::

    from mailsyntax.config import get_settings
    settings = get_settings()
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Validator configuration — every field maps to a MAILSYNTAX_ env var."""

    model_config = SettingsConfigDict(
        env_prefix="MAILSYNTAX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        env_ignore_empty=True,
    )

    # -- Domain part --------------------------------------------------------
    allow_ip_literals: bool = True
    allow_ipv6_literals: bool = True
    max_domain_atoms: int = Field(default=0, ge=0)  # 0 = no cap

    # -- Comment stripping --------------------------------------------------
    max_comment_passes: int = Field(default=0, ge=0)  # 0 = len(input) + 1

    # -- General ------------------------------------------------------------
    log_level: str = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> str:
        """Upper-case the level name and reject names logging doesn't know."""
        level = str(value).strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached singleton Settings instance.

    Call ``get_settings.cache_clear()`` in tests to reset.
    """
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Apply ``settings.log_level`` to the ``mailsyntax`` logger.

    Handlers are left to the host application.
    """
    settings = settings or get_settings()
    logging.getLogger("mailsyntax").setLevel(settings.log_level)
