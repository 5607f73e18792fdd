"""Configuration module — ENV-driven settings with sensible defaults."""

from mailsyntax.config.settings import Settings, configure_logging, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
