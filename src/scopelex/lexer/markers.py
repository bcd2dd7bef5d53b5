"""Comment marker classification.

Pure string logic, no position mutation: given a line, decide whether it
opens a comment and strip the marker off. Markers must be the first thing on
the line apart from spaces and tabs; the leading whitespace is kept in the
returned text.

Doc-flavored markers take priority over plain ones. A doc marker is rejected
when it is immediately followed by its own last character, so "////" and
"/***" separator banners stay plain comments, and a doc block opener is
rejected when it runs into its closer, so "/**/" is an empty plain comment.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from scopelex.lexer.modes import LexerMode

if TYPE_CHECKING:
    from collections.abc import Iterable

    from scopelex.syntax import BlockPair, CommentSyntax


@dataclass(frozen=True, slots=True)
class OpeningMatch:
    """Result of classifying a line.

    Attributes:
        mode: What the line starts
        body: The line with the opening marker removed; the whole line for CODE
        is_doc: Whether the marker was doc-flavored
        closing: Closing marker for block comments, fixed at open

    """

    mode: LexerMode
    body: str
    is_doc: bool = False
    closing: str | None = None


def _content_start(line: str) -> int:
    pos = 0
    line_len = len(line)
    while pos < line_len and line[pos] in " \t":
        pos += 1
    return pos


def _longest_at(line: str, pos: int, markers: Iterable[str]) -> str | None:
    found = None
    for marker in markers:
        if line.startswith(marker, pos) and (found is None or len(marker) > len(found)):
            found = marker
    return found


def _is_doc_opening(line: str, pos: int, marker: str, closing: str | None = None) -> bool:
    after = line[pos + len(marker) :]
    if after.startswith(marker[-1]):
        return False
    if closing is not None and (marker[-1] + after).startswith(closing):
        return False
    return True


class MarkerClassifierMixin:
    """Mixin for classifying comment-opening lines.

    Required Host Attributes:
        - _syntax: CommentSyntax

    """

    __slots__ = ()

    _syntax: CommentSyntax

    def _strip_line_opening(self, line: str) -> str | None:
        """Strip a plain line comment marker.

        Returns:
            The line without its marker, or None if it is not a line comment.
        """
        pos = _content_start(line)
        marker = _longest_at(line, pos, self._syntax.line_markers)
        if marker is None:
            return None
        return line[:pos] + line[pos + len(marker) :]

    def _strip_doc_line_opening(self, line: str) -> str | None:
        """Strip a doc-flavored line comment marker, or return None."""
        pos = _content_start(line)
        candidates = [
            marker
            for marker in self._syntax.doc_line_markers
            if line.startswith(marker, pos) and _is_doc_opening(line, pos, marker)
        ]
        if not candidates:
            return None
        marker = max(candidates, key=len)
        return line[:pos] + line[pos + len(marker) :]

    def _strip_block_opening(
        self, line: str, pairs: tuple[BlockPair, ...], *, doc: bool = False
    ) -> tuple[str, str] | None:
        """Strip a block comment opening marker.

        Args:
            line: Line to test
            pairs: (open, close) marker pairs to try
            doc: Apply the doc-flavored rejection rules

        Returns:
            (line without the opener, closing marker), or None
        """
        pos = _content_start(line)
        best: BlockPair | None = None
        for opening, closing in pairs:
            if not line.startswith(opening, pos):
                continue
            if doc and not _is_doc_opening(line, pos, opening, closing):
                continue
            if best is None or len(opening) > len(best[0]):
                best = (opening, closing)
        if best is None:
            return None
        opening, closing = best
        return line[:pos] + line[pos + len(opening) :], closing

    def _classify_line(self, line: str) -> OpeningMatch:
        """Classify a line by the comment it opens.

        Order: doc line, plain line, doc block, plain block.

        Returns:
            OpeningMatch whose mode is CODE when no marker opens the line.
        """
        syntax = self._syntax

        body = self._strip_doc_line_opening(line)
        if body is not None:
            return OpeningMatch(LexerMode.LINE_COMMENT, body, is_doc=True)

        body = self._strip_line_opening(line)
        if body is not None:
            return OpeningMatch(LexerMode.LINE_COMMENT, body)

        block = self._strip_block_opening(line, syntax.doc_block_markers, doc=True)
        if block is not None:
            return OpeningMatch(LexerMode.BLOCK_COMMENT, block[0], is_doc=True, closing=block[1])

        block = self._strip_block_opening(line, syntax.block_markers)
        if block is not None:
            return OpeningMatch(LexerMode.BLOCK_COMMENT, block[0], closing=block[1])

        return OpeningMatch(LexerMode.CODE, line)

    @staticmethod
    def _split_at_closing(line: str, closing: str) -> tuple[str, str | None]:
        """Split a comment line at the first closing marker.

        Returns:
            (comment text before the closer, text after it). The second item
            is None when the line holds no closer.
        """
        idx = line.find(closing)
        if idx == -1:
            return line, None
        return line[:idx], line[idx + len(closing) :]
