"""Tests for mailsyntax.utils — address list helpers."""

from __future__ import annotations

from mailsyntax.core.grammar import Rfc822Grammar
from mailsyntax.core.validator import EmailValidator
from mailsyntax.utils.address_utils import extract_addresses, partition_addresses


# ── address_utils: extract_addresses ─────────────────────────────────────────


class TestExtractAddresses:
    """Tests for extract_addresses — CSV string to validated list."""

    def test_single_address(self) -> None:
        assert extract_addresses("joe@example.com") == ["joe@example.com"]

    def test_multiple_addresses(self) -> None:
        result = extract_addresses("a@b.com, c@d.com, e@f.org")
        assert result == ["a@b.com", "c@d.com", "e@f.org"]

    def test_filters_invalid(self) -> None:
        result = extract_addresses("good@email.com, bad-email, joe@localhost")
        assert result == ["good@email.com"]

    def test_keeps_first_spelling(self) -> None:
        result = extract_addresses("Joe@Example.com, joe@example.com")
        assert result == ["Joe@Example.com"]

    def test_strips_whitespace(self) -> None:
        result = extract_addresses("  a@example.com  ,  b@example.com  ")
        assert result == ["a@example.com", "b@example.com"]

    def test_empty_string(self) -> None:
        assert extract_addresses("") == []

    def test_none(self) -> None:
        assert extract_addresses(None) == []  # type: ignore[arg-type]

    def test_custom_validator(self) -> None:
        validator = EmailValidator(Rfc822Grammar(allow_ip_literals=False))
        result = extract_addresses("a@[1.2.3.4], b@example.com", validator)
        assert result == ["b@example.com"]


# ── address_utils: partition_addresses ───────────────────────────────────────


class TestPartitionAddresses:
    """Tests for partition_addresses — split into valid and invalid."""

    def test_partition(self) -> None:
        valid, invalid = partition_addresses(
            ["a@example.com", "nope", None, "b@[10.0.0.1]"]
        )
        assert valid == ["a@example.com", "b@[10.0.0.1]"]
        assert invalid == ["nope", None]

    def test_empty(self) -> None:
        assert partition_addresses([]) == ([], [])

    def test_accepts_generator(self) -> None:
        valid, invalid = partition_addresses(f"u{i}@example.com" for i in range(3))
        assert len(valid) == 3
        assert invalid == []
