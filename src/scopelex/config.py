"""ContextVar-based lexing configuration for scopelex.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A host sets the config once for a batch of files; every Parser created in
that context reads it.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and hosts can parse files in parallel.

Usage:
    from scopelex.config import LexConfig, lex_config_context
    from scopelex.syntax import get_syntax

    with lex_config_context(LexConfig(syntax=get_syntax("java"))):
        parser = Parser(on_comment=sink)
        parser.parse_file("Widget.java")

"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Any

from scopelex.protocols import Preprocessor
from scopelex.syntax import CommentSyntax


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexing configuration.

    Attributes:
        syntax: Comment syntax used when a Parser is created without one
        preprocessor: Optional callback that rewrites the list of lines in
            place before comments are split out
        encoding: Text encoding for reading source files
        errors: Decoding error policy passed to open() ("strict", "replace", ...)

    """

    syntax: CommentSyntax | None = None
    preprocessor: Preprocessor | None = None
    encoding: str = "utf-8"
    errors: str = "strict"

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> LexConfig:
        """Create LexConfig from dictionary.

        A "syntax" entry may itself be a mapping, which is turned into a
        CommentSyntax. Unknown keys are silently ignored.

        Example:
            >>> config = LexConfig.from_dict({
            ...     "syntax": {"line_markers": ["#"]},
            ...     "encoding": "latin-1",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.syntax.line_markers
            ('#',)

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        syntax = filtered.get("syntax")
        if isinstance(syntax, Mapping):
            filtered["syntax"] = CommentSyntax.from_dict(syntax)
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get current lexing configuration (thread-local)."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set lexing configuration for the current context.

    Args:
        config: LexConfig instance to use for this context.

    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to the default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Args:
        config: LexConfig to use within the context.

    Yields:
        None

    """
    previous = _lex_config.get()
    _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.set(previous)


__all__ = [
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
]
