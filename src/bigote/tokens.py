"""Token and TokenType definitions for the Bigote tokenizer.

The tokenizer produces a stream of Token objects that a template parser
consumes. Each Token has a type and, for text and identifiers, a value.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Token types produced by the tokenizer.

    - TEXT is the only token produced outside a tag
    - L_MUSTACHE and R_MUSTACHE bracket a tag
    - The remaining types are only produced between them

    """

    # Outside tags
    TEXT = auto()  # Run of literal characters

    # Delimiters
    L_MUSTACHE = auto()  # {{
    R_MUSTACHE = auto()  # }}

    # Markers (inside tags only)
    UNESCAPE_TAG = auto()  # &
    POUND = auto()  # #
    SLASH = auto()  # /
    HAT = auto()  # ^

    # Names (inside tags only)
    ID = auto()  # [A-Za-z0-9_]+


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the tokenizer.

    Attributes:
        type: The token type (from TokenType enum)
        value: Text content for TEXT, the name for ID, empty otherwise

    Equality is structural: two tokens with the same type and value are equal.

    """

    type: TokenType
    value: str = ""

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if not self.value:
            return f"Token({self.type.name})"
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r})"


def Text(content: str) -> Token:
    """Build a TEXT token."""
    return Token(TokenType.TEXT, content)


def Id(name: str) -> Token:
    """Build an ID token."""
    return Token(TokenType.ID, name)


L_MUSTACHE = Token(TokenType.L_MUSTACHE)
R_MUSTACHE = Token(TokenType.R_MUSTACHE)
UNESCAPE_TAG = Token(TokenType.UNESCAPE_TAG)
POUND = Token(TokenType.POUND)
SLASH = Token(TokenType.SLASH)
HAT = Token(TokenType.HAT)
