"""Pragmatic RFC 822 grammar: local part, domain part, and comments.

All patterns are compiled once at import. ``Rfc822Grammar`` only stores
immutable options, so one instance can be shared across threads.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from typing import TYPE_CHECKING

from mailsyntax.config.defaults import (
    ATOM_PATTERN,
    DOMAIN_PATTERN,
    IP_DOMAIN_PATTERN,
    MIN_DOMAIN_ATOMS,
    MIN_TLD_LENGTH,
    TLD_PATTERN,
    USER_PATTERN,
)
from mailsyntax.core.comments import strip_comments
from mailsyntax.core.ip_literal import is_valid_ip_literal

if TYPE_CHECKING:
    from mailsyntax.config.settings import Settings

logger = logging.getLogger(__name__)

_USER = re.compile(USER_PATTERN, re.ASCII)
_DOMAIN = re.compile(DOMAIN_PATTERN, re.ASCII)
_IP_DOMAIN = re.compile(IP_DOMAIN_PATTERN, re.ASCII)
_ATOM = re.compile(ATOM_PATTERN, re.ASCII)
_TLD = re.compile(TLD_PATTERN, re.ASCII)

IpValidator = Callable[[str], bool]


def extract_atoms(domain: str, max_atoms: int = 0) -> list[str]:
    """Return the maximal valid-char runs of *domain*, left to right.

    With *max_atoms* > 0 only the first *max_atoms* runs are returned.
    """
    atoms: list[str] = []
    for match in _ATOM.finditer(domain):
        atoms.append(match.group(1))
        if max_atoms and len(atoms) >= max_atoms:
            break
    return atoms


class Rfc822Grammar:
    """Default ``AddressGrammar`` implementation."""

    def __init__(
        self,
        *,
        allow_ip_literals: bool = True,
        allow_ipv6_literals: bool = True,
        max_domain_atoms: int = 0,
        max_comment_passes: int = 0,
        ip_validator: IpValidator | None = None,
    ) -> None:
        if max_domain_atoms < 0:
            raise ValueError("max_domain_atoms must be >= 0")
        if max_comment_passes < 0:
            raise ValueError("max_comment_passes must be >= 0")
        self._allow_ip_literals = allow_ip_literals
        self._allow_ipv6_literals = allow_ipv6_literals
        self._max_domain_atoms = max_domain_atoms
        self._max_comment_passes = max_comment_passes
        self._ip_validator = ip_validator

    @classmethod
    def from_settings(cls, settings: Settings) -> Rfc822Grammar:
        """Build a grammar from the ``MAILSYNTAX_*`` settings."""
        return cls(
            allow_ip_literals=settings.allow_ip_literals,
            allow_ipv6_literals=settings.allow_ipv6_literals,
            max_domain_atoms=settings.max_domain_atoms,
            max_comment_passes=settings.max_comment_passes,
        )

    # ------------------------------------------------------------------
    # AddressGrammar
    # ------------------------------------------------------------------

    def strip_comments(self, text: str) -> str:
        return strip_comments(text, self._max_comment_passes or None)

    def is_valid_user(self, user: str) -> bool:
        return _USER.fullmatch(user) is not None

    def is_valid_domain(self, domain: str) -> bool:
        """Accept a bracketed IP literal or a dotted run of atoms.

        A bracketed domain never falls back to symbolic checks.
        """
        ip_match = _IP_DOMAIN.fullmatch(domain)
        if ip_match is not None:
            if not self._allow_ip_literals:
                logger.debug("IP literal domains disabled: %s", domain)
                return False
            return self._is_valid_ip(ip_match.group(1))

        if _DOMAIN.fullmatch(domain) is None:
            return False
        return self.is_valid_symbolic_domain(domain)

    def is_valid_symbolic_domain(self, domain: str) -> bool:
        """
        Check the atom structure of a symbolic domain.

        Rules:
        1. At least a host label and a top-level label
        2. TLD is at least two characters long
        3. TLD is letters only (not checked against any registry)
        """
        atoms = extract_atoms(domain, self._max_domain_atoms)
        if len(atoms) < MIN_DOMAIN_ATOMS:
            return False

        tld = atoms[-1]
        if len(tld) < MIN_TLD_LENGTH:
            return False
        return _TLD.fullmatch(tld) is not None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _is_valid_ip(self, text: str) -> bool:
        if self._ip_validator is not None:
            return self._ip_validator(text)
        return is_valid_ip_literal(text, allow_ipv6=self._allow_ipv6_literals)
