"""Grammar fragments and built-in defaults for mailsyntax.

The fragments below are plain strings so they can be composed into the
compiled patterns in ``mailsyntax.core.grammar``. All patterns are meant to
be compiled with ``re.ASCII`` so ``\\s`` means ``[ \\t\\n\\r\\f\\v]``.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Character classes
# Specials: control chars, ()<>@,;:'\".[]
# ---------------------------------------------------------------------------
SPECIAL_CHARS: str = r"\x00-\x1f\x7f()<>@,;:'\\\".\[\]"
VALID_CHARS: str = rf"[^\s{SPECIAL_CHARS}]"

# ---------------------------------------------------------------------------
# Building blocks
# ---------------------------------------------------------------------------
QUOTED_USER: str = r'("[^"]*")'
ATOM: str = VALID_CHARS + "+"
WORD: str = rf"(({VALID_CHARS}|')+|{QUOTED_USER})"

# ---------------------------------------------------------------------------
# Full patterns (used with fullmatch, so no ^/$ anchors)
# ---------------------------------------------------------------------------
LEGAL_ASCII_PATTERN: str = r"[\x00-\x7f]+"
# ``.`` in the reference grammar never matches a line terminator
ADDRESS_PATTERN: str = r"([^\r\n]+)@([^\r\n]+)"
IP_DOMAIN_PATTERN: str = r"\[([^\r\n]*)\]"
TLD_PATTERN: str = r"[A-Za-z]+"
USER_PATTERN: str = rf"\s*{WORD}(\.{WORD})*"
DOMAIN_PATTERN: str = rf"{ATOM}(\.{ATOM})*\s*"
ATOM_PATTERN: str = rf"({ATOM})"

# ---------------------------------------------------------------------------
# RFC 822 comment: an anchored prefix (plain chars, escapes, complete quoted
# strings) followed by one parenthesised run with no nested parens.
# ---------------------------------------------------------------------------
COMMENT_PATTERN: str = (
    r'^((?:[^"\\]|\\.)*(?:"(?:[^"\\]|\\.)*"(?:[^"\\]|\\.)*)*)'
    r"\((?:[^()\\]|\\.)*\)"
)

# ---------------------------------------------------------------------------
# Limits
# ---------------------------------------------------------------------------
MIN_DOMAIN_ATOMS: int = 2
MIN_TLD_LENGTH: int = 2
# Label cap used by the legacy fixed-size segment array
LEGACY_MAX_DOMAIN_ATOMS: int = 10
