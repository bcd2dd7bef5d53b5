"""Line-oriented comment/code splitter.

Walks a file's lines once. Lines that open a comment are consumed as a
comment run and forwarded to the comment sink; each consumed line leaves a
single line break in the token stream so line numbers stay aligned. All
other lines are tokenized as code.

Block comments get special treatment when text follows the closer on its
line. A multi-line comment is then discarded and only the trailing text is
kept as code. A comment opened and closed on one line is discarded and the
whole original line is retokenized, so that annotations such as

    int get_array(integer_t id,
                  /*@out@*/ array_t array);

stay visible to the code.

Thread Safety:
Lexer instances are single-use. Create one per file.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from scopelex.lexer.markers import MarkerClassifierMixin, OpeningMatch
from scopelex.lexer.modes import LexerMode
from scopelex.stream import TokenStream
from scopelex.syntax import CommentSyntax
from scopelex.utils.logger import get_logger

if TYPE_CHECKING:
    from scopelex.protocols import CommentSink

logger = get_logger(__name__)


class Lexer(MarkerClassifierMixin):
    """Comment/code splitter producing a TokenStream.

    Usage:
        >>> from scopelex.comments import CommentCollector
        >>> from scopelex.syntax import get_syntax
        >>> sink = CommentCollector()
        >>> stream = Lexer(["// hi", "x = 1;"], get_syntax("java"), sink).tokenize()
        >>> stream.values()
        ['\\n', 'x', ' ', '=', ' ', '1', ';', '\\n']
        >>> sink.runs[0].lines
        (' hi',)

    """

    __slots__ = (
        "_lines",
        "_total",
        "_syntax",
        "_on_comment",
        "_stream",
        "_source_file",
        "_comment_runs",
        "_rejected_blocks",
    )

    def __init__(
        self,
        lines: Sequence[str],
        syntax: CommentSyntax | None = None,
        on_comment: CommentSink | None = None,
        *,
        stream: TokenStream | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize lexer with the file's lines.

        Args:
            lines: Source lines without terminators (already preprocessed)
            syntax: Comment markers; None means the file has no comments
            on_comment: Sink receiving (lines, lineno, is_doc) per comment run
            stream: Stream to append to (a new one is created if None)
            source_file: Optional source file path for log messages
        """
        self._lines = lines
        self._total = len(lines)
        self._syntax = syntax if syntax is not None else CommentSyntax()
        self._on_comment = on_comment
        self._stream = stream if stream is not None else TokenStream()
        self._source_file = source_file
        self._comment_runs = 0
        self._rejected_blocks = 0

    @property
    def comment_runs(self) -> int:
        """Number of comment runs forwarded to the sink so far."""
        return self._comment_runs

    def tokenize(self) -> TokenStream:
        """Split every line into comments and code tokens.

        Returns:
            The filled TokenStream, holding exactly one line break per line.
        """
        index = 0
        while index < self._total:
            index = self._dispatch(index)

        logger.debug(
            "Split %s: %d lines, %d comment runs, %d block comments kept as code",
            self._source_file or "<lines>",
            self._total,
            self._comment_runs,
            self._rejected_blocks,
        )
        return self._stream

    def _dispatch(self, index: int) -> int:
        """Scan the construct starting at line index.

        Returns:
            Index of the first line not consumed.
        """
        line = self._lines[index]
        match = self._classify_line(line)

        if match.mode is LexerMode.CODE:
            self._stream.tokenize_line(line)
            return index + 1
        if match.mode is LexerMode.LINE_COMMENT:
            return self._scan_line_comments(index, match)
        return self._scan_block_comment(index, match)

    def _scan_line_comments(self, index: int, match: OpeningMatch) -> int:
        """Consume a run of line comments.

        Only the first line may be doc-flavored; the run continues while
        lines start with a plain line marker.
        """
        lineno = index + 1
        comment_lines = []
        body: str | None = match.body

        while body is not None:
            comment_lines.append(body)
            self._stream.add_line_break()
            index += 1
            if index >= self._total:
                break
            body = self._strip_line_opening(self._lines[index])

        self._emit_comment(comment_lines, lineno, match.is_doc)
        return index

    def _scan_block_comment(self, index: int, match: OpeningMatch) -> int:
        """Consume a block comment, deciding whether it really is one."""
        lineno = index + 1
        closing = match.closing
        assert closing is not None, "block comment match without closing marker"

        comment_lines = []
        line = match.body
        is_multiline = False

        while True:
            body, remainder = self._split_at_closing(line, closing)
            comment_lines.append(body)
            if remainder is not None:
                break

            self._stream.add_line_break()
            index += 1
            is_multiline = True

            if index >= self._total:
                # Unterminated: runs to end of input, every line already placed
                self._emit_comment(comment_lines, lineno, match.is_doc)
                return index

            line = self._lines[index]

        if remainder.strip(" \t"):
            self._rejected_blocks += 1
            if is_multiline:
                logger.debug(
                    "Block comment at line %d has code after its closer; keeping the code",
                    lineno,
                )
                self._stream.tokenize_line(remainder)
            else:
                logger.debug(
                    "Block comment at line %d is followed by code on the same line; "
                    "keeping the whole line as code",
                    lineno,
                )
                self._stream.tokenize_line(self._lines[index])
            return index + 1

        self._stream.add_line_break()
        self._emit_comment(comment_lines, lineno, match.is_doc)
        return index + 1

    def _emit_comment(self, comment_lines: list[str], lineno: int, is_doc: bool) -> None:
        self._comment_runs += 1
        if self._on_comment is not None:
            self._on_comment(comment_lines, lineno, is_doc)
