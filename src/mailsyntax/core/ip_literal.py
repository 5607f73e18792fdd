"""IP-address syntax checks for bracketed domain literals (``user@[1.2.3.4]``)."""

from __future__ import annotations

import ipaddress
import re

# Four dotted groups of 1-3 digits; range is checked separately
_INET4 = re.compile(r"(\d{1,3})\.(\d{1,3})\.(\d{1,3})\.(\d{1,3})", re.ASCII)

INET4_MAX_OCTET = 255


def is_valid_inet4(text: str) -> bool:
    """Return True if *text* is a dotted-quad IPv4 address.

    Leading zeros are accepted (``010.0.0.1``); each group must be 0-255.
    """
    match = _INET4.fullmatch(text)
    if match is None:
        return False
    return all(int(group) <= INET4_MAX_OCTET for group in match.groups())


def is_valid_inet6(text: str) -> bool:
    """Return True if *text* parses as an IPv6 address (no zone id)."""
    if not text or "%" in text:
        return False
    try:
        ipaddress.IPv6Address(text)
    except ValueError:
        return False
    return True


def is_valid_ip_literal(text: str, *, allow_ipv6: bool = True) -> bool:
    """Return True if the bracket-stripped *text* is a valid IP literal."""
    if is_valid_inet4(text):
        return True
    return allow_ipv6 and is_valid_inet6(text)
