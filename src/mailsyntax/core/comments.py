"""RFC 822 comment stripping.

A comment is a parenthesised run of text outside any quoted string. Each
pass removes one comment (the innermost one reachable from the start of
the string) and leaves a single space in its place; passes repeat over the
whole string until nothing changes.
"""

from __future__ import annotations

import logging
import re

from mailsyntax.config.defaults import COMMENT_PATTERN

logger = logging.getLogger(__name__)

_COMMENT = re.compile(COMMENT_PATTERN, re.DOTALL)


def strip_comments(text: str, max_passes: int | None = None) -> str:
    """Remove comments from *text* until a fixed point is reached.

    Every pass that changes the string shortens it by at least one
    character, so ``len(text) + 1`` passes always suffice. *max_passes*
    (when given and positive) lowers that bound; if it is hit the partially
    stripped string is returned and a warning is logged.
    """
    if not text:
        return text

    limit = max_passes if max_passes and max_passes > 0 else len(text) + 1
    current = text
    for _ in range(limit):
        result = _COMMENT.sub(r"\1 ", current, count=1)
        if result == current:
            return result
        current = result

    logger.warning(
        "Comment stripping stopped after %d passes (input length %d)",
        limit,
        len(text),
    )
    return current
