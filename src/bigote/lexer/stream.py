"""Character stream with pushback.

PushbackReader wraps a forward-only source of characters and lets the
tokenizer un-read characters after looking ahead. Pushed back characters
are replayed, in their original order, before anything else is pulled
from the source.

Invariant:
The pushback queue followed by the unread remainder of the source is
always exactly the character sequence that would have been read had no
lookahead happened.

Thread Safety:
Instances are not shared. Create one per source.

"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator
from itertools import chain


class PushbackReader:
    """Forward-only character reader with unlimited pushback.

    The source may be a ``str`` or any iterable of strings. Items longer
    than one character (lines from a text stream, chunks from a socket)
    are split into characters lazily.

    Usage:
            >>> reader = PushbackReader("abc")
            >>> reader.read_exact(2)
            'ab'
            >>> reader.push_back_str("ab")
            >>> reader.read_until("c")
            'ab'
            >>> reader.read_char()
            'c'
            >>> reader.read_char() is None
            True

    """

    __slots__ = ("_chars", "_pushback")

    def __init__(self, source: Iterable[str]) -> None:
        self._chars: Iterator[str] = chain.from_iterable(source)
        # Front of the deque is the next character to be read
        self._pushback: deque[str] = deque()

    def read_char(self) -> str | None:
        """Read one character, preferring pushed back characters.

        Returns:
            The next character, or None at end of input.
        """
        if self._pushback:
            return self._pushback.popleft()
        return next(self._chars, None)

    def push_back_char(self, char: str) -> None:
        """Return a character to the front of the stream."""
        self._pushback.appendleft(char)

    def push_back_str(self, text: str) -> None:
        """Return a string to the front of the stream.

        The characters are replayed left to right by later reads.
        """
        # extendleft reverses, so feed it the string backwards
        self._pushback.extendleft(reversed(text))

    def at_eof(self) -> bool:
        """Check for end of input without consuming anything."""
        char = self.read_char()
        if char is None:
            return True
        self.push_back_char(char)
        return False

    def read_exact(self, size: int) -> str | None:
        """Read exactly ``size`` characters.

        All or nothing: if the source runs out first, every character read
        is pushed back and None is returned.

        Args:
            size: Number of characters to read

        Returns:
            The characters read, or None if fewer than ``size`` remain.
        """
        buf: list[str] = []
        for _ in range(size):
            char = self.read_char()
            if char is None:
                self.push_back_str("".join(buf))
                return None
            buf.append(char)
        return "".join(buf)

    def read_until(self, delimiter: str) -> str | None:
        """Read up to, but not including, the next ``delimiter``.

        The delimiter itself is pushed back so that it can be matched again.
        End of input also terminates the read.

        Args:
            delimiter: Non-empty terminator string

        Returns:
            The characters before the delimiter (or before end of input),
            or None if there were none.

        Raises:
            ValueError: If ``delimiter`` is empty.
        """
        if not delimiter:
            raise ValueError("delimiter must not be empty")

        size = len(delimiter)
        last = delimiter[-1]
        buf: list[str] = []
        while (char := self.read_char()) is not None:
            buf.append(char)
            # Only join the tail when it could possibly match
            if char == last and len(buf) >= size and "".join(buf[-size:]) == delimiter:
                del buf[-size:]
                self.push_back_str(delimiter)
                break
        return "".join(buf) or None

    def read_while(self, predicate: Callable[[str], bool]) -> str | None:
        """Read the longest run of characters satisfying ``predicate``.

        The first character that fails the predicate is pushed back.

        Returns:
            The run, or None if it is empty.
        """
        buf: list[str] = []
        while (char := self.read_char()) is not None:
            if not predicate(char):
                self.push_back_char(char)
                break
            buf.append(char)
        return "".join(buf) or None

    def starts_with(self, text: str) -> bool:
        """Consume ``text`` if the stream starts with it.

        On a mismatch nothing is consumed.
        """
        candidate = self.read_exact(len(text))
        if candidate is None:
            return False
        if candidate == text:
            return True
        self.push_back_str(candidate)
        return False

    def skip_spaces(self) -> None:
        """Consume consecutive space characters (not tabs or newlines)."""
        while (char := self.read_char()) is not None:
            if char != " ":
                self.push_back_char(char)
                return
