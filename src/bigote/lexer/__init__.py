"""Pull-based tokenizer for mustache-style templates.

Architecture:
lexer/
├── __init__.py          # Re-exports Tokenizer, LexState, PushbackReader
├── core.py              # Tokenizer (state machine + token rules)
├── modes.py             # LexState enum
├── stream.py            # PushbackReader (character source with undo)
└── charsets.py          # Identifier character set

Usage:
    >>> from bigote.lexer import Tokenizer
    >>> for token in Tokenizer("Hello {{name}}!"):
    ...     print(token)
Token(TEXT, 'Hello ')
Token(L_MUSTACHE)
Token(ID, 'name')
Token(R_MUSTACHE)
Token(TEXT, '!')

"""

from bigote.lexer.core import Tokenizer
from bigote.lexer.modes import LexState
from bigote.lexer.stream import PushbackReader

__all__ = ["LexState", "PushbackReader", "Tokenizer"]
