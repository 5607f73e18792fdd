"""Grammar protocol and result types shared by the validator and its parts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable


@runtime_checkable
class AddressGrammar(Protocol):
    """Protocol for the replaceable steps of address validation.

    ``EmailValidator`` only talks to its grammar through these four
    operations, so an alternative grammar can be swapped in by composition.
    """

    def strip_comments(self, text: str) -> str:
        """Return *text* with RFC 822 comments replaced by single spaces."""
        ...

    def is_valid_user(self, user: str) -> bool:
        """Return True if *user* is an acceptable local part."""
        ...

    def is_valid_domain(self, domain: str) -> bool:
        """Return True if *domain* is an acceptable IP literal or symbolic name."""
        ...

    def is_valid_symbolic_domain(self, domain: str) -> bool:
        """Return True if the atoms of *domain* form a host plus a plausible TLD."""
        ...


class Reason(str, Enum):
    """Why an address was accepted or rejected (first failing step wins)."""

    OK = "ok"
    MISSING = "missing"
    NOT_ASCII = "not_ascii"
    NO_AT_SIGN = "no_at_sign"
    TRAILING_DOT = "trailing_dot"
    INVALID_USER = "invalid_user"
    INVALID_DOMAIN = "invalid_domain"


@dataclass(frozen=True)
class ValidationResult:
    """Verdict for one candidate address."""

    valid: bool
    reason: Reason

    def __bool__(self) -> bool:
        return self.valid
