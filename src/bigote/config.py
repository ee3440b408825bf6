"""ContextVar-based tokenizer configuration for Bigote.

Provides context-local defaults using Python's ContextVars (PEP 567).
A Tokenizer reads the active config once, at construction; explicit
constructor arguments take precedence over it.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Direct construction
    from bigote.lexer import Tokenizer
    tokens = list(Tokenizer("Hi <%name%>", "<%", "%>"))

    # Or change the defaults for a block of code
    from bigote.config import LexConfig, lex_config_context

    with lex_config_context(LexConfig(open_delim="<%", close_delim="%>")):
        tokens = list(Tokenizer("Hi <%name%>"))

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator

from bigote.errors import ConfigError


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable tokenizer configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        open_delim: String that opens a tag
        close_delim: String that closes a tag
        strict: Raise LexError on malformed tags instead of ending the
            token stream silently

    """

    open_delim: str = "{{"
    close_delim: str = "}}"
    strict: bool = False

    def __post_init__(self) -> None:
        for field_name in ("open_delim", "close_delim"):
            value = getattr(self, field_name)
            if not isinstance(value, str):
                raise ConfigError(f"{field_name} must be a str, got {type(value).__name__}")
            if not value:
                raise ConfigError(f"{field_name} must not be empty")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexConfig":
        """Create LexConfig from dictionary.

        Only includes keys that are valid LexConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                LexConfig attribute names.

        Returns:
            New LexConfig instance with values from dict.

        Example:
            >>> config = LexConfig.from_dict({
            ...     "open_delim": "<%",
            ...     "close_delim": "%>",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.open_delim
            '<%'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get current tokenizer configuration (thread-local).

    Returns:
        The active LexConfig for this thread/context.

    """
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set tokenizer configuration for current context.

    Tokenizers that already exist keep the configuration they were built with.

    Args:
        config: LexConfig instance to use for this context.

    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: LexConfig to use within the context.

    Yields:
        None

    Example:
        >>> with lex_config_context(LexConfig(strict=True)):
        ...     tokens = list(Tokenizer("{{name}}"))
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _lex_config.get()
    _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.set(previous)


__all__ = [
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
]
