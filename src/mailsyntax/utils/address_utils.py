"""Helpers for form fields that carry several addresses at once.

Built on ``EmailValidator`` — no network calls, syntax only.
"""

from __future__ import annotations

from collections.abc import Iterable

from mailsyntax.core.validator import EmailValidator, get_validator


def extract_addresses(
    text: str, validator: EmailValidator | None = None
) -> list[str]:
    """Split a comma-separated string into a list of valid addresses.

    Invalid entries are silently dropped. Duplicates are compared
    case-insensitively; the first spelling and the input order are kept.
    """
    if not text or not isinstance(text, str):
        return []
    validator = validator or get_validator()
    seen: set[str] = set()
    result: list[str] = []
    for raw in text.split(","):
        address = raw.strip()
        key = address.lower()
        if address and key not in seen and validator.is_valid(address):
            seen.add(key)
            result.append(address)
    return result


def partition_addresses(
    values: Iterable[str | None], validator: EmailValidator | None = None
) -> tuple[list[str], list[str | None]]:
    """Split *values* into ``(valid, invalid)`` lists, preserving order."""
    validator = validator or get_validator()
    valid: list[str] = []
    invalid: list[str | None] = []
    for value in values:
        if validator.is_valid(value):
            valid.append(value)  # type: ignore[arg-type]
        else:
            invalid.append(value)
    return valid, invalid
