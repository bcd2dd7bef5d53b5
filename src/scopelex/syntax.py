"""Comment syntax descriptors.

A CommentSyntax tells the lexer which markers open line comments and
block comments, and which variants are "doc-flavored" (documentation
input rather than ordinary remarks). Any of the four groups may be empty.

Usage:
    >>> from scopelex.syntax import CommentSyntax, get_syntax
    >>> c = get_syntax("c")
    >>> c.block_markers
    (('/*', '*/'),)

    >>> custom = CommentSyntax(line_markers=("--",))

Thread Safety:
CommentSyntax is frozen. The preset registry is written at import time and
by register_syntax(); register presets before parsing starts.

"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, fields
from typing import Any

from scopelex.errors import SyntaxConfigError

BlockPair = tuple[str, str]


def _as_markers(field_name: str, value: Iterable[str]) -> tuple[str, ...]:
    if isinstance(value, str):
        value = (value,)
    markers = tuple(value)
    for marker in markers:
        if not isinstance(marker, str) or not marker:
            raise SyntaxConfigError(field_name, f"markers must be non-empty strings, got {marker!r}")
    return markers


def _as_pairs(field_name: str, value: Iterable[Any]) -> tuple[BlockPair, ...]:
    pairs = []
    for entry in value:
        if isinstance(entry, str) or len(entry) != 2:
            raise SyntaxConfigError(field_name, f"expected (open, close) pair, got {entry!r}")
        opening, closing = entry
        if not isinstance(opening, str) or not isinstance(closing, str) or not opening or not closing:
            raise SyntaxConfigError(field_name, f"markers must be non-empty strings, got {entry!r}")
        pairs.append((opening, closing))
    return tuple(pairs)


@dataclass(frozen=True, slots=True)
class CommentSyntax:
    """Immutable comment syntax for one language.

    Attributes:
        line_markers: Symbols that start a line comment, e.g. "//"
        block_markers: (open, close) pairs for block comments, e.g. ("/*", "*/")
        doc_line_markers: Line comment symbols marking documentation, e.g. "///"
        doc_block_markers: Block pairs marking documentation, e.g. ("/**", "*/")

    """

    line_markers: tuple[str, ...] = ()
    block_markers: tuple[BlockPair, ...] = ()
    doc_line_markers: tuple[str, ...] = ()
    doc_block_markers: tuple[BlockPair, ...] = ()

    def __post_init__(self) -> None:
        """Normalize lists to tuples and validate every marker."""
        object.__setattr__(self, "line_markers", _as_markers("line_markers", self.line_markers))
        object.__setattr__(
            self, "doc_line_markers", _as_markers("doc_line_markers", self.doc_line_markers)
        )
        object.__setattr__(self, "block_markers", _as_pairs("block_markers", self.block_markers))
        object.__setattr__(
            self, "doc_block_markers", _as_pairs("doc_block_markers", self.doc_block_markers)
        )

    @classmethod
    def from_dict(cls, syntax_dict: Mapping[str, Any]) -> CommentSyntax:
        """Create a CommentSyntax from a mapping.

        Lists are accepted wherever tuples are expected. Unknown keys are
        ignored.

        Example:
            >>> syntax = CommentSyntax.from_dict({
            ...     "line_markers": ["#"],
            ...     "block_markers": [["=begin", "=end"]],
            ... })
            >>> syntax.block_markers
            (('=begin', '=end'),)

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in syntax_dict.items() if k in valid_fields}
        return cls(**filtered)

    @property
    def is_empty(self) -> bool:
        """True when no comment markers of any kind are defined."""
        return not (
            self.line_markers
            or self.block_markers
            or self.doc_line_markers
            or self.doc_block_markers
        )


_C_FAMILY = CommentSyntax(
    line_markers=("//",),
    block_markers=(("/*", "*/"),),
    doc_line_markers=("///",),
    doc_block_markers=(("/**", "*/"),),
)

# Registry of built-in syntaxes, keyed by lowercase language name
SYNTAX_PRESETS: dict[str, CommentSyntax] = {
    "c": CommentSyntax(block_markers=(("/*", "*/"),), doc_block_markers=(("/**", "*/"),)),
    "c++": _C_FAMILY,
    "c#": _C_FAMILY,
    "java": _C_FAMILY,
    "javascript": _C_FAMILY,
    "perl": CommentSyntax(line_markers=("#",), doc_line_markers=("##",)),
    "python": CommentSyntax(line_markers=("#",), doc_line_markers=("##",)),
    "shell": CommentSyntax(line_markers=("#",)),
    "pascal": CommentSyntax(line_markers=("//",), block_markers=(("{", "}"), ("(*", "*)"))),
    "sql": CommentSyntax(line_markers=("--",), block_markers=(("/*", "*/"),)),
}


def register_syntax(name: str, syntax: CommentSyntax) -> None:
    """Register (or replace) a named comment syntax.

    Args:
        name: Language name, matched case-insensitively
        syntax: The syntax descriptor
    """
    SYNTAX_PRESETS[name.lower()] = syntax


def get_syntax(name: str) -> CommentSyntax:
    """Get a registered comment syntax by name.

    Args:
        name: Language name (e.g., "java", "perl"), case-insensitive

    Returns:
        The registered CommentSyntax

    Raises:
        KeyError: If the name is not registered

    """
    key = name.lower()
    if key not in SYNTAX_PRESETS:
        available = ", ".join(sorted(SYNTAX_PRESETS.keys()))
        raise KeyError(f"Unknown comment syntax: {name!r}. Available: {available}")
    return SYNTAX_PRESETS[key]


__all__ = [
    "BlockPair",
    "CommentSyntax",
    "SYNTAX_PRESETS",
    "get_syntax",
    "register_syntax",
]
