"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from bigote.lexer.charsets import IDENTIFIER_CHARS

    if char in IDENTIFIER_CHARS:  # O(1) lookup
        ...
"""

import string

# ASCII letters, ASCII digits and underscore. Unicode letters are not
# identifier characters.
IDENTIFIER_CHARS: frozenset[str] = frozenset(string.ascii_letters + string.digits + "_")


def is_identifier_char(char: str) -> bool:
    """Check if character may appear in an identifier."""
    return char in IDENTIFIER_CHARS
