"""Tokenizer states.

This module defines the two-state machine the tokenizer runs on.
"""

from __future__ import annotations

from enum import Enum, auto


class LexState(Enum):
    """Tokenizer states.
    
    The tokenizer switches state only when it consumes a delimiter:
    - NORMAL: Outside tags, producing TEXT
    - IN_TAG: Between an opening and a closing delimiter
        
    """

    NORMAL = auto()  # Outside tags
    IN_TAG = auto()  # After the opening delimiter
