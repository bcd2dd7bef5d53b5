"""Per-file engine that language parsers build on.

A Parser owns everything produced while processing one file: the token
stream, the scope stack with its change record, and the automatically
generated topics a language parser collects. Each parse_* call resets that
state, so one instance can process many files in turn, and separate
instances share nothing.

Architecture:
- `Lexer`: splits comments out and fills the token stream
- `TokenNavigationMixin`: cursor helpers over the token stream
- `ScopeStack`: scope frames and the scope change record

Language parsers subclass Parser, override preprocess() for source quirks,
and set scope_stack_class to a ScopeStack subclass when their scope names
are more than the package.

Thread Safety:
- Parser instances are single-threaded; use one per worker
- Configuration is read from ContextVar (thread-local)

"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from scopelex.config import get_lex_config
from scopelex.lexer import Lexer
from scopelex.parsing import ScopeChange, ScopeStack, TokenNavigationMixin
from scopelex.source import read_source_lines, split_lines
from scopelex.stream import TokenStream
from scopelex.utils.logger import get_logger

if TYPE_CHECKING:
    from scopelex.protocols import CommentSink
    from scopelex.syntax import CommentSyntax
    from scopelex.tokens import Token

logger = get_logger(__name__)


class Parser(TokenNavigationMixin):
    """Tokenizing and scope-tracking engine for one file at a time.

    Usage:
        >>> from scopelex.comments import CommentCollector
        >>> from scopelex.syntax import get_syntax
        >>> comments = CommentCollector()
        >>> parser = Parser(get_syntax("java"), comments)
        >>> tokens = parser.parse_lines(["/** A widget. */", "class Widget {", "}"])
        >>> parser.is_at_sequence(1, "class", " ", "Widget")
        True
        >>> comments.runs[0].is_doc
        True

    """

    scope_stack_class: ClassVar[type[ScopeStack]] = ScopeStack

    def __init__(
        self,
        syntax: CommentSyntax | None = None,
        on_comment: CommentSink | None = None,
        *,
        source_file: str | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            syntax: Comment markers; falls back to the active LexConfig's
                syntax, then to no comments at all
            on_comment: Sink receiving each accepted comment run
            source_file: Optional source file path for log messages
        """
        self._syntax = syntax
        self._on_comment = on_comment
        self._source_file = source_file
        self._tokens = TokenStream()
        self._scope_stack = self.scope_stack_class()
        self._auto_topics: list[Any] | None = None

    # =========================================================================
    # Parsing
    # =========================================================================

    def parse_lines(self, lines: Sequence[str]) -> TokenStream:
        """Split comments out of lines and tokenize the rest.

        Resets the token stream, scope stack, and auto topics first. The
        lines are copied, then preprocessed, so the caller's list is never
        modified.

        Args:
            lines: Source lines without line terminators

        Returns:
            The new token stream (also available as `tokens`)
        """
        config = get_lex_config()
        syntax = self._syntax if self._syntax is not None else config.syntax

        self.clear_auto_topics()
        self.clear_scope_stack()
        self._tokens = TokenStream()

        working = list(lines)
        self.preprocess(working)
        if config.preprocessor is not None:
            config.preprocessor(working)

        lexer = Lexer(
            working,
            syntax,
            self._on_comment,
            stream=self._tokens,
            source_file=self._source_file,
        )
        lexer.tokenize()

        logger.debug(
            "Parsed %s: %d lines, %d tokens, %d comment runs",
            self._source_file or "<lines>",
            len(working),
            len(self._tokens),
            lexer.comment_runs,
        )
        return self._tokens

    def parse_source(self, text: str) -> TokenStream:
        """Parse source text, normalizing its line breaks first."""
        return self.parse_lines(split_lines(text))

    def parse_file(self, path: str | Path) -> TokenStream:
        """Load a file and parse it.

        Args:
            path: Source file to read

        Returns:
            The new token stream

        Raises:
            SourceReadError: If the file cannot be read
        """
        self._source_file = str(path)
        return self.parse_lines(read_source_lines(path))

    def preprocess(self, lines: list[str]) -> None:
        """Rewrite the file's lines in place before comments are split out.

        Override in language parsers to normalize source quirks. The
        default leaves the lines untouched.
        """

    # =========================================================================
    # State
    # =========================================================================

    @property
    def tokens(self) -> TokenStream:
        return self._tokens

    def set_tokens(self, tokens: TokenStream | Iterable[Token]) -> None:
        """Replace the token stream."""
        self._tokens = tokens if isinstance(tokens, TokenStream) else TokenStream(tokens)

    def clear_tokens(self) -> None:
        """Drop the token stream, e.g. to free memory once parsing is over."""
        self._tokens = TokenStream()

    @property
    def scope_stack(self) -> ScopeStack:
        return self._scope_stack

    @property
    def scope_record(self) -> tuple[ScopeChange, ...]:
        """How and when the scope changed through the file.

        Always has at least one entry, for line 1.
        """
        return self._scope_stack.record

    def clear_scope_stack(self) -> None:
        """Reset the scope stack for a new file."""
        self._scope_stack.clear()

    @property
    def auto_topics(self) -> list[Any] | None:
        """Topics generated automatically from the code, or None if none."""
        return self._auto_topics

    def add_auto_topic(self, topic: Any) -> None:
        if self._auto_topics is None:
            self._auto_topics = []
        self._auto_topics.append(topic)

    def clear_auto_topics(self) -> None:
        self._auto_topics = None

    @property
    def source_file(self) -> str | None:
        return self._source_file
