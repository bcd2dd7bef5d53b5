"""Token and TokenType definitions for the scopelex tokenizer.

Code lines are broken into four classes of fragment:

- WORD: a maximal run of alphanumeric/underscore characters
- WHITESPACE: a maximal run of spaces and tabs
- LINE_BREAK: exactly one "\\n"; two are never merged
- SYMBOL: any other single character; consecutive symbols stay separate,
  so "::" is two tokens

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto

# One alternative per token class; DOTALL keeps every character covered.
_TOKEN_RE = re.compile(r"\w+|[ \t]+|.", re.DOTALL)
_WORD_START_RE = re.compile(r"\w")

LINE_BREAK_VALUE = "\n"


class TokenType(Enum):
    """Token classes produced when tokenizing a line of code."""

    WORD = auto()  # foo_bar42
    WHITESPACE = auto()  # spaces/tabs
    LINE_BREAK = auto()  # \n
    SYMBOL = auto()  # any other single character


@dataclass(frozen=True, slots=True)
class Token:
    """A classified fragment of source text.

    Attributes:
        type: The token class
        value: The raw text of the fragment

    """

    type: TokenType
    value: str

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        return f"Token({self.type.name}, {self.value!r})"

    @property
    def is_line_break(self) -> bool:
        return self.type is TokenType.LINE_BREAK

    @property
    def is_whitespace(self) -> bool:
        return self.type is TokenType.WHITESPACE


LINE_BREAK = Token(TokenType.LINE_BREAK, LINE_BREAK_VALUE)


def classify(fragment: str) -> TokenType:
    """Classify a single fragment produced by the token pattern.

    Args:
        fragment: Non-empty text matched as one token

    Returns:
        The TokenType for the fragment
    """
    first = fragment[0]
    if first == LINE_BREAK_VALUE:
        return TokenType.LINE_BREAK
    if first == " " or first == "\t":
        return TokenType.WHITESPACE
    if _WORD_START_RE.match(first):
        return TokenType.WORD
    return TokenType.SYMBOL


def tokenize_text(text: str) -> list[Token]:
    """Break text into tokens without appending a line break.

    Example:
        >>> [t.value for t in tokenize_text("a::b  c")]
        ['a', ':', ':', 'b', '  ', 'c']
    """
    tokens = []
    for fragment in _TOKEN_RE.findall(text):
        if fragment == LINE_BREAK_VALUE:
            tokens.append(LINE_BREAK)
        else:
            tokens.append(Token(classify(fragment), fragment))
    return tokens
