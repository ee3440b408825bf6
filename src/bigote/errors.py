"""Exception classes for Bigote.

Provides standardized exceptions for error handling throughout Bigote.
"""

from __future__ import annotations


class BigoteError(Exception):
    """Base exception for all Bigote errors.
    
    Subclass this for specific error categories.
    """

    pass


class ConfigError(BigoteError):
    """Invalid tokenizer configuration.
    
    Raised when a delimiter is empty or not a string.
    """

    pass


class LexError(BigoteError):
    """Error during template tokenization.
    
    Only raised by tokenizers running in strict mode. In compatibility
    mode the same conditions end the token stream silently.
    """

    def __init__(self, message: str, open_delim: str | None = None) -> None:
        """Initialize lex error.
        
        Args:
            message: Error description
            open_delim: Opening delimiter of the tag being lexed (optional)
        """
        self.message = message
        self.open_delim = open_delim
        super().__init__(message)


class UnterminatedTagError(LexError):
    """Source ended inside a tag, before the closing delimiter."""

    def __init__(self, open_delim: str, close_delim: str) -> None:
        self.close_delim = close_delim
        super().__init__(
            f"Unterminated tag: {open_delim!r} was never closed by {close_delim!r}",
            open_delim,
        )


class UnrecognizedTagContentError(LexError):
    """Character inside a tag is not a marker, identifier or closing delimiter."""

    def __init__(self, char: str, open_delim: str) -> None:
        """Initialize unrecognized content error.
        
        Args:
            char: The offending character (left unconsumed in the source)
            open_delim: Opening delimiter of the enclosing tag
        """
        self.char = char
        super().__init__(f"Unrecognized character {char!r} inside tag", open_delim)
