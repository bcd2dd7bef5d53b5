"""Lexer line classifications.

Each input line is classified before anything is committed to the token
stream: it either starts a comment run of some kind or is plain code.
"""

from __future__ import annotations

from enum import Enum, auto


class LexerMode(Enum):
    """What the line at the cursor starts.

    - CODE: Tokenized and kept in the stream
    - LINE_COMMENT: A run of consecutive line comments
    - BLOCK_COMMENT: A block comment, possibly spanning lines

    """

    CODE = auto()
    LINE_COMMENT = auto()
    BLOCK_COMMENT = auto()
