"""
Bigote — Mustache template tokenizer

Turns mustache-style template text into a lazy stream of tokens for a
template parser to consume. Delimiters are configurable; nothing is
rendered, escaped or loaded from disk here.

Quick Start:
    >>> from bigote import tokenize
    >>> tokenize("abc{{bcd}}")
    [Token(TEXT, 'abc'), Token(L_MUSTACHE), Token(ID, 'bcd'), Token(R_MUSTACHE)]

    >>> # Or pull tokens one at a time
    >>> from bigote import Tokenizer
    >>> tokenizer = Tokenizer("<% #items %>", "<%", "%>")
    >>> tokenizer.next_token()
    Token(L_MUSTACHE)

Installation:
    pip install bigote              # Zero runtime dependencies
"""

from collections.abc import Iterable

from bigote.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from bigote.errors import (
    BigoteError,
    ConfigError,
    LexError,
    UnrecognizedTagContentError,
    UnterminatedTagError,
)
from bigote.lexer import LexState, PushbackReader, Tokenizer
from bigote.tokens import (
    HAT,
    L_MUSTACHE,
    POUND,
    R_MUSTACHE,
    SLASH,
    UNESCAPE_TAG,
    Id,
    Text,
    Token,
    TokenType,
)

__version__ = "0.1.0"


def tokenize(
    source: Iterable[str],
    *,
    open_delim: str | None = None,
    close_delim: str | None = None,
    strict: bool | None = None,
) -> list[Token]:
    """Tokenize a whole template.

    Args:
        source: Template text, or any iterable of text chunks
        open_delim: String that opens a tag (default from config)
        close_delim: String that closes a tag (default from config)
        strict: Raise on malformed tags instead of stopping early

    Returns:
        List of tokens in source order

    Raises:
        LexError: In strict mode, on a malformed tag.

    Example:
        >>> tokenize("{{!}}")
        [Token(L_MUSTACHE)]
        >>> tokenize("{{!}}", strict=True)
        Traceback (most recent call last):
        ...
        bigote.errors.UnrecognizedTagContentError: Unrecognized character '!' inside tag
    """
    return list(Tokenizer(source, open_delim, close_delim, strict=strict))


__all__ = [
    # Main API
    "tokenize",
    "Tokenizer",
    "PushbackReader",
    "LexState",
    # Tokens
    "Token",
    "TokenType",
    "Text",
    "Id",
    "L_MUSTACHE",
    "R_MUSTACHE",
    "UNESCAPE_TAG",
    "POUND",
    "SLASH",
    "HAT",
    # Configuration
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
    # Errors
    "BigoteError",
    "ConfigError",
    "LexError",
    "UnterminatedTagError",
    "UnrecognizedTagContentError",
    # Version
    "__version__",
]
