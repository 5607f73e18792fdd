"""Core validation modules."""

from mailsyntax.core.base import AddressGrammar, Reason, ValidationResult
from mailsyntax.core.comments import strip_comments
from mailsyntax.core.grammar import Rfc822Grammar, extract_atoms
from mailsyntax.core.ip_literal import (
    is_valid_inet4,
    is_valid_inet6,
    is_valid_ip_literal,
)
from mailsyntax.core.validator import (
    EmailValidator,
    get_validator,
    is_valid,
    validate,
)

__all__ = [
    "AddressGrammar",
    "EmailValidator",
    "Reason",
    "Rfc822Grammar",
    "ValidationResult",
    "extract_atoms",
    "get_validator",
    "is_valid",
    "is_valid_inet4",
    "is_valid_inet6",
    "is_valid_ip_literal",
    "strip_comments",
    "validate",
]
