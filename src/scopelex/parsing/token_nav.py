"""Token navigation utilities for language parsers.

Provides a cursor type and a mixin of cursor-based helpers for walking a
TokenStream: skipping strings, lines, and token sequences, and testing a
position's surroundings. None of these raise on unexpected input; running
off the end of the stream is reported by the cursor landing at len(tokens).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from scopelex.tokens import LINE_BREAK_VALUE

if TYPE_CHECKING:
    from scopelex.stream import TokenStream

BACKSLASH = "\\"


@dataclass(slots=True)
class Cursor:
    """A position in a token stream.

    Navigation helpers advance a cursor in place; use copy() to keep a
    position for backtracking.

    Attributes:
        index: Index of the current token
        lineno: Line number of the current token (1-indexed)

    """

    index: int = 0
    lineno: int = 1

    def copy(self) -> Cursor:
        return Cursor(self.index, self.lineno)


@dataclass(frozen=True, slots=True)
class StringSpan:
    """Token index range of a string's content, delimiters excluded.

    Attributes:
        start: Index of the first content token
        end: Index one past the last content token
        terminated: False when the stream ended before the closing delimiter

    """

    start: int
    end: int
    terminated: bool = True


class TokenNavigationMixin:
    """Mixin providing token stream navigation methods.

    Required Host Attributes:
        - _tokens: TokenStream

    """

    __slots__ = ()

    _tokens: TokenStream

    def try_to_skip_string(
        self,
        cursor: Cursor,
        opening: str,
        closing: str | None = None,
    ) -> StringSpan | None:
        """Skip a string if the cursor is on its opening delimiter.

        Everything is allowed inside the string, including line breaks. A
        backslash protects the token after it, so an escaped delimiter does
        not end the string.

        Args:
            cursor: Position to test; advanced past the closing delimiter
                (or to the end of the stream) on success
            opening: Opening delimiter, such as '"'
            closing: Closing delimiter if different from opening

        Returns:
            The content span, or None (cursor unchanged) if the cursor is not
            on the opening delimiter.
        """
        tokens = self._tokens
        if tokens.value_at(cursor.index) != opening:
            return None
        if closing is None:
            closing = opening

        total = len(tokens)
        index = cursor.index + 1
        lineno = cursor.lineno
        start = index

        while index < total:
            value = tokens[index].value
            if value == BACKSLASH:
                if tokens.value_at(index + 1) == LINE_BREAK_VALUE:
                    lineno += 1
                index += 2
            elif value == LINE_BREAK_VALUE:
                lineno += 1
                index += 1
            elif value == closing:
                cursor.index = index + 1
                cursor.lineno = lineno
                return StringSpan(start, index)
            else:
                index += 1

        cursor.index = total
        cursor.lineno = lineno
        return StringSpan(start, total, terminated=False)

    def skip_rest_of_line(self, cursor: Cursor) -> None:
        """Move past the next line break, or to the end of the stream.

        Skips blindly; nothing between the cursor and the line break (such
        as a string delimiter) is interpreted.
        """
        tokens = self._tokens
        total = len(tokens)
        index = cursor.index
        while index < total:
            if tokens[index].value == LINE_BREAK_VALUE:
                cursor.index = index + 1
                cursor.lineno += 1
                return
            index += 1
        cursor.index = total

    def skip_until_after(self, cursor: Cursor, *sequence: str) -> bool:
        """Move past the next occurrence of a token sequence.

        Line breaks passed over, including any inside the matched sequence,
        advance the cursor's line number.

        Args:
            cursor: Position to advance
            *sequence: Token values to match in order, e.g. "*", "/"

        Returns:
            True if the sequence was found; False if the cursor ran to the
            end of the stream.
        """
        if not sequence:
            return True

        tokens = self._tokens
        total = len(tokens)
        index = cursor.index
        lineno = cursor.lineno

        while index < total:
            if self.is_at_sequence(index, *sequence):
                cursor.index = index + len(sequence)
                cursor.lineno = lineno + sequence.count(LINE_BREAK_VALUE)
                return True
            if tokens[index].value == LINE_BREAK_VALUE:
                lineno += 1
            index += 1

        cursor.index = total
        cursor.lineno = lineno
        return False

    def is_first_line_token(self, index: int) -> bool:
        """Whether index is the first token of its line, ignoring indentation.

        False for an index outside [0, len(tokens)].
        """
        tokens = self._tokens
        if index < 0 or index > len(tokens):
            return False
        prev = index - 1
        if prev >= 0 and tokens[prev].is_whitespace:
            prev -= 1
        return prev < 0 or tokens[prev].is_line_break

    def is_last_line_token(self, index: int) -> bool:
        """Whether index is the last token of its line, ignoring trailing whitespace.

        False for an index outside [0, len(tokens)].
        """
        tokens = self._tokens
        total = len(tokens)
        if index < 0 or index > total:
            return False
        nxt = index + 1
        if nxt < total and tokens[nxt].is_whitespace:
            nxt += 1
        return nxt >= total or tokens[nxt].is_line_break

    def is_at_sequence(self, index: int, *sequence: str) -> bool:
        """Whether the tokens starting at index equal sequence exactly."""
        tokens = self._tokens
        if index < 0 or index + len(sequence) > len(tokens):
            return False
        for offset, value in enumerate(sequence):
            if tokens[index + offset].value != value:
                return False
        return True

    def is_backslashed(self, index: int) -> bool:
        """Whether the token before index is a backslash."""
        return index > 0 and self._tokens.value_at(index - 1) == BACKSLASH

    def create_string(self, start: int, end: int) -> str:
        """Join token values in [start, end), clamped to the stream."""
        return self._tokens.text(start, end)
