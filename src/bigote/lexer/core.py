"""Pull-based state-machine tokenizer for mustache-style templates.

Each call to next_token() consumes just enough of the source to produce one
token, using a PushbackReader to undo lookahead. Nothing is buffered ahead.

The state machine has two states:
- NORMAL: text up to the opening delimiter becomes a TEXT token
- IN_TAG: markers, identifiers and the closing delimiter are recognized,
  with plain spaces skipped in between

Malformed tags (unknown character, or end of input before the closing
delimiter) end the token stream silently. With strict=True they raise a
LexError subclass instead.

Thread Safety:
Tokenizer instances are single-use. Create one per source.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import replace

from bigote.config import get_lex_config
from bigote.errors import UnrecognizedTagContentError, UnterminatedTagError
from bigote.lexer.charsets import is_identifier_char
from bigote.lexer.modes import LexState
from bigote.lexer.stream import PushbackReader
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
)
from bigote.utils.logger import get_logger

logger = get_logger(__name__)

# Tried in order inside a tag; the closing delimiter is tried after these.
_TAG_MARKERS: tuple[tuple[str, Token], ...] = (
    ("#", POUND),
    ("&", UNESCAPE_TAG),
    ("/", SLASH),
    ("^", HAT),
)


class Tokenizer:
    """Lazy tokenizer over a character source.

    Usage:
            >>> tokenizer = Tokenizer("abc{{^ # abc}}bcd")
            >>> list(tokenizer)
        [Token(TEXT, 'abc'), Token(L_MUSTACHE), Token(HAT), Token(POUND),
         Token(ID, 'abc'), Token(R_MUSTACHE), Token(TEXT, 'bcd')]

    Delimiters and strictness not passed explicitly come from the active
    LexConfig (see bigote.config), read once at construction.

    The token sequence is not restartable: once next_token() has returned
    None it keeps returning None.

    """

    __slots__ = (
        "_reader",
        "_state",
        "_open_delim",
        "_close_delim",
        "_strict",
        "_exhausted",
    )

    def __init__(
        self,
        source: Iterable[str],
        open_delim: str | None = None,
        close_delim: str | None = None,
        *,
        strict: bool | None = None,
    ) -> None:
        """Initialize tokenizer over a character source.

        Args:
            source: A str, or any iterable of strings (characters or chunks)
            open_delim: String that opens a tag (default from config)
            close_delim: String that closes a tag (default from config)
            strict: Raise on malformed tags (default from config)

        Raises:
            ConfigError: If a delimiter is empty or not a string.
        """
        overrides = {
            name: value
            for name, value in (
                ("open_delim", open_delim),
                ("close_delim", close_delim),
                ("strict", strict),
            )
            if value is not None
        }
        config = get_lex_config()
        if overrides:
            # replace() re-runs validation
            config = replace(config, **overrides)

        self._reader = PushbackReader(source)
        self._state = LexState.NORMAL
        self._open_delim = config.open_delim
        self._close_delim = config.close_delim
        self._strict = config.strict
        self._exhausted = False

    @property
    def state(self) -> LexState:
        return self._state

    @property
    def open_delim(self) -> str:
        return self._open_delim

    @property
    def close_delim(self) -> str:
        return self._close_delim

    @property
    def strict(self) -> bool:
        return self._strict

    def __iter__(self) -> Tokenizer:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def tokenize(self) -> Iterator[Token]:
        """Yield the remaining tokens.

        Yields:
            Token objects one at a time

        Raises:
            LexError: In strict mode, on a malformed tag.
        """
        while (token := self.next_token()) is not None:
            yield token

    def next_token(self) -> Token | None:
        """Produce the next token.

        Returns:
            The next Token, or None when the sequence has ended.

        Raises:
            UnterminatedTagError: In strict mode, if the source ends inside a tag.
            UnrecognizedTagContentError: In strict mode, on an unknown
                character inside a tag.
        """
        if self._exhausted:
            return None

        if self._state is LexState.NORMAL:
            token = self._scan_normal()
        else:
            token = self._scan_tag()

        if token is None:
            self._exhausted = True
        return token

    def _scan_normal(self) -> Token | None:
        """Scan outside a tag: the opening delimiter, or text up to it."""
        reader = self._reader
        if reader.starts_with(self._open_delim):
            self._state = LexState.IN_TAG
            logger.debug("Entered tag on %r", self._open_delim)
            return L_MUSTACHE

        text = reader.read_until(self._open_delim)
        if text is None:
            return None
        return Text(text)

    def _scan_tag(self) -> Token | None:
        """Scan inside a tag. First match wins: markers, closing delimiter, identifier."""
        reader = self._reader
        reader.skip_spaces()

        for marker, token in _TAG_MARKERS:
            if reader.starts_with(marker):
                return token

        if reader.starts_with(self._close_delim):
            self._state = LexState.NORMAL
            logger.debug("Left tag on %r", self._close_delim)
            return R_MUSTACHE

        name = reader.read_while(is_identifier_char)
        if name is not None:
            return Id(name)

        return self._end_inside_tag()

    def _end_inside_tag(self) -> None:
        """Handle a tag that cannot be continued.

        Raises in strict mode; otherwise logs and ends the sequence.
        The offending character, if any, is left unconsumed.
        """
        reader = self._reader
        if reader.at_eof():
            if self._strict:
                self._exhausted = True
                raise UnterminatedTagError(self._open_delim, self._close_delim)
            logger.debug("Source ended inside tag opened by %r", self._open_delim)
            return None

        char = reader.read_char()
        reader.push_back_char(char)
        if self._strict:
            self._exhausted = True
            raise UnrecognizedTagContentError(char, self._open_delim)
        logger.debug("Unrecognized character %r inside tag; ending token stream", char)
        return None
