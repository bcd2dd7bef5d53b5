"""
scopelex: Source Tokenizing and Scope Tracking for Documentation Parsers

A lexical substrate for per-language parsers in documentation extractors.
Splits comments (plain and doc-flavored) out of source lines, tokenizes the
remaining code, and tracks package/using scope as a language parser walks
the tokens.

Quick Start:
    >>> from scopelex import CommentCollector, Parser, get_syntax
    >>> comments = CommentCollector()
    >>> parser = Parser(get_syntax("c#"), comments)
    >>> tokens = parser.parse_lines([
    ...     "/// Greets people.",
    ...     "class Greeter {",
    ...     "}",
    ... ])
    >>> comments.runs[0].lines
    (' Greets people.',)

    >>> # Track scope as declarations are recognized
    >>> parser.scope_stack.open_scope("}", 2, package="Greeter")
    >>> _ = parser.scope_stack.close_scope(3)
    >>> [(c.scope, c.lineno) for c in parser.scope_record]
    [(None, 1), ('Greeter', 2), (None, 3)]

Installation:
    pip install scopelex             # Zero runtime dependencies
"""

from __future__ import annotations

from collections.abc import Sequence

from scopelex.comments import CommentCollector, CommentRun
from scopelex.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from scopelex.errors import ScopelexError, SourceReadError, SyntaxConfigError
from scopelex.lexer import Lexer, LexerMode
from scopelex.parser import Parser
from scopelex.parsing import Cursor, Scope, ScopeChange, ScopeStack, StringSpan
from scopelex.protocols import CommentSink, Preprocessor
from scopelex.source import read_source_lines, split_lines
from scopelex.stream import TokenStream
from scopelex.syntax import CommentSyntax, get_syntax, register_syntax
from scopelex.tokens import Token, TokenType

__version__ = "0.1.0"


def tokenize_lines(
    lines: Sequence[str],
    syntax: CommentSyntax | None = None,
    on_comment: CommentSink | None = None,
) -> TokenStream:
    """Split comments out of lines and tokenize the rest in one call.

    Args:
        lines: Source lines without terminators
        syntax: Comment markers (uses the active LexConfig's if None)
        on_comment: Sink receiving each accepted comment run

    Returns:
        The token stream

    Example:
        >>> tokenize_lines(["a::b"]).values()
        ['a', ':', ':', 'b', '\\n']
    """
    return Parser(syntax, on_comment).parse_lines(lines)


__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "tokenize_lines",
    "Parser",
    "Lexer",
    "LexerMode",
    # Tokens
    "Token",
    "TokenType",
    "TokenStream",
    # Navigation
    "Cursor",
    "StringSpan",
    # Scope
    "Scope",
    "ScopeChange",
    "ScopeStack",
    # Comments
    "CommentRun",
    "CommentCollector",
    "CommentSink",
    "Preprocessor",
    # Comment syntax
    "CommentSyntax",
    "get_syntax",
    "register_syntax",
    # Configuration (ContextVar-based)
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
    # Source loading
    "read_source_lines",
    "split_lines",
    # Errors
    "ScopelexError",
    "SourceReadError",
    "SyntaxConfigError",
]
