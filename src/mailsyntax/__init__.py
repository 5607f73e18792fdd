"""Syntactic email address validation (pragmatic RFC 822)."""

from mailsyntax.config import Settings, configure_logging, get_settings
from mailsyntax.core import (
    AddressGrammar,
    EmailValidator,
    Reason,
    Rfc822Grammar,
    ValidationResult,
    get_validator,
    is_valid,
    strip_comments,
    validate,
)
from mailsyntax.utils import extract_addresses, partition_addresses

__all__ = [
    "AddressGrammar",
    "EmailValidator",
    "Reason",
    "Rfc822Grammar",
    "Settings",
    "ValidationResult",
    "configure_logging",
    "extract_addresses",
    "get_settings",
    "get_validator",
    "is_valid",
    "partition_addresses",
    "strip_comments",
    "validate",
]
