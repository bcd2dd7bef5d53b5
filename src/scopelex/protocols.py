"""Protocols for scopelex collaborators.

Defines the contracts for the comment sink and the line preprocessing hook,
the two points where language plugins plug behavior into the lexer.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class CommentSink(Protocol):
    """Receiver for comment runs split out of the source.

    Called once per accepted comment run, in file order.

    """

    def __call__(self, lines: Sequence[str], lineno: int, is_doc: bool) -> None:
        """Receive one comment run.

        Args:
            lines: Comment text per line, opening/closing markers removed
            lineno: Line number of the run's first line (1-indexed)
            is_doc: Whether the run opened with a doc-flavored marker
        """
        ...


class Preprocessor(Protocol):
    """Hook that rewrites a file's lines in place before splitting."""

    def __call__(self, lines: list[str]) -> None: ...
