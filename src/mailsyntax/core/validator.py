"""Email address validation — orchestrates the grammar steps in order.

Usage::

    from mailsyntax import is_valid
    is_valid("joe@example.com")  # True

This is a syntax check only. An address like ``nobody@noplace.somedog``
passes even though no such TLD exists.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import TYPE_CHECKING

from mailsyntax.config.defaults import ADDRESS_PATTERN, LEGAL_ASCII_PATTERN
from mailsyntax.config.settings import get_settings
from mailsyntax.core.base import AddressGrammar, Reason, ValidationResult
from mailsyntax.core.grammar import Rfc822Grammar

if TYPE_CHECKING:
    from mailsyntax.config.settings import Settings

logger = logging.getLogger(__name__)

_LEGAL_ASCII = re.compile(LEGAL_ASCII_PATTERN)
_ADDRESS = re.compile(ADDRESS_PATTERN)

_OK = ValidationResult(valid=True, reason=Reason.OK)


class EmailValidator:
    """Check candidate strings against the pragmatic RFC 822 grammar.

    Holds no per-call state; share one instance freely between threads.
    """

    def __init__(self, grammar: AddressGrammar | None = None) -> None:
        self.grammar: AddressGrammar = (
            grammar if grammar is not None else Rfc822Grammar()
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> EmailValidator:
        """Build a validator with the default grammar configured by *settings*."""
        return cls(Rfc822Grammar.from_settings(settings))

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def is_valid(self, candidate: str | None) -> bool:
        """Return True if *candidate* is a syntactically valid address.

        ``None`` and malformed input give False; nothing is raised.
        """
        return self.validate(candidate).valid

    def validate(self, candidate: str | None) -> ValidationResult:
        """Validate *candidate* and report the first step that rejected it."""
        if not isinstance(candidate, str):
            return _reject(candidate, Reason.MISSING)

        if _LEGAL_ASCII.fullmatch(candidate) is None:
            return _reject(candidate, Reason.NOT_ASCII)

        address = self.grammar.strip_comments(candidate)

        # Greedy first group: splits on the rightmost usable '@'
        match = _ADDRESS.fullmatch(address)
        if match is None:
            return _reject(candidate, Reason.NO_AT_SIGN)

        if address.endswith("."):
            return _reject(candidate, Reason.TRAILING_DOT)

        user, domain = match.group(1), match.group(2)
        if not self.grammar.is_valid_user(user):
            return _reject(candidate, Reason.INVALID_USER)
        if not self.grammar.is_valid_domain(domain):
            return _reject(candidate, Reason.INVALID_DOMAIN)

        return _OK


def _reject(candidate: object, reason: Reason) -> ValidationResult:
    """Log and build a failed result."""
    logger.debug("Rejected %r: %s", candidate, reason.value)
    return ValidationResult(valid=False, reason=reason)


@lru_cache(maxsize=1)
def get_validator() -> EmailValidator:
    """Return a cached validator built from ``get_settings()``.

    Call ``get_validator.cache_clear()`` after changing settings.
    """
    return EmailValidator.from_settings(get_settings())


def is_valid(candidate: str | None) -> bool:
    """Validate *candidate* with the default validator."""
    return get_validator().is_valid(candidate)


def validate(candidate: str | None) -> ValidationResult:
    """Validate *candidate* with the default validator, keeping the reason."""
    return get_validator().validate(candidate)
