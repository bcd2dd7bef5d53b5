"""Token stream owned by a single parse.

The stream is append-only while the comment/code splitter runs and is
read by index afterwards. Consumers keep integer positions into it (see
scopelex.parsing.token_nav.Cursor), never references to its interior.

Thread Safety:
TokenStream is mutable and owned by one parse. Do not share an instance
between threads while it is being filled.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import overload

from scopelex.tokens import LINE_BREAK, Token, TokenType, tokenize_text


class TokenStream:
    """Ordered sequence of tokens for one source file.

    Usage:
        >>> stream = TokenStream()
        >>> stream.tokenize_line("int x;")
        >>> stream.values()
        ['int', ' ', 'x', ';', '\\n']

    """

    __slots__ = ("_tokens",)

    def __init__(self, tokens: Iterable[Token] | None = None) -> None:
        self._tokens: list[Token] = list(tokens) if tokens is not None else []

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    @overload
    def __getitem__(self, index: int) -> Token: ...

    @overload
    def __getitem__(self, index: slice) -> list[Token]: ...

    def __getitem__(self, index: int | slice) -> Token | list[Token]:
        return self._tokens[index]

    def __repr__(self) -> str:
        return f"TokenStream({len(self._tokens)} tokens)"

    # =========================================================================
    # Building
    # =========================================================================

    def tokenize_line(self, line: str) -> None:
        """Tokenize a line of code and append it followed by a line break.

        Args:
            line: Line text without its line terminator
        """
        self._tokens.extend(tokenize_text(line))
        self._tokens.append(LINE_BREAK)

    def add_line_break(self) -> None:
        """Append a lone line break (placeholder for a consumed comment line)."""
        self._tokens.append(LINE_BREAK)

    def clear(self) -> None:
        """Drop all tokens."""
        self._tokens.clear()

    # =========================================================================
    # Reading
    # =========================================================================

    def value_at(self, index: int) -> str | None:
        """Get the text of the token at index, or None outside the stream."""
        if 0 <= index < len(self._tokens):
            return self._tokens[index].value
        return None

    def values(self) -> list[str]:
        """Get the text of every token in order."""
        return [token.value for token in self._tokens]

    def text(self, start: int = 0, end: int | None = None) -> str:
        """Concatenate token values in [start, end).

        The end index is clamped to the stream length.

        Args:
            start: First index to include
            end: Index one past the last token to include (default: end of stream)

        Returns:
            The joined text, empty if the range is empty
        """
        stop = len(self._tokens) if end is None else min(end, len(self._tokens))
        return "".join(token.value for token in self._tokens[start:stop])

    def line_count(self) -> int:
        """Count line break tokens (one per source line)."""
        return sum(1 for token in self._tokens if token.type is TokenType.LINE_BREAK)
