"""Comment runs and a collecting sink.

The lexer hands each accepted comment run to a sink as
(lines, lineno, is_doc). CommentCollector is the ready-made sink: it keeps
every run as a CommentRun in file order.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CommentRun:
    """One contiguous comment as delivered to a sink.

    Attributes:
        lines: Comment text, one entry per source line, markers removed
        lineno: Line number of the first line (1-indexed)
        is_doc: Whether the run opened with a doc-flavored marker

    """

    lines: tuple[str, ...]
    lineno: int
    is_doc: bool = False

    @property
    def end_lineno(self) -> int:
        """Line number of the last line of the run."""
        return self.lineno + len(self.lines) - 1


class CommentCollector:
    """Sink that records every comment run it receives.

    Usage:
        >>> from scopelex.comments import CommentCollector
        >>> from scopelex.parser import Parser
        >>> from scopelex.syntax import get_syntax
        >>> collector = CommentCollector()
        >>> parser = Parser(syntax=get_syntax("java"), on_comment=collector)
        >>> _ = parser.parse_lines(["/** Docs */", "int x;"])
        >>> collector.runs[0]
        CommentRun(lines=(' Docs ',), lineno=1, is_doc=True)

    """

    __slots__ = ("runs",)

    def __init__(self) -> None:
        self.runs: list[CommentRun] = []

    def __call__(self, lines: Sequence[str], lineno: int, is_doc: bool) -> None:
        self.runs.append(CommentRun(tuple(lines), lineno, is_doc))

    def __len__(self) -> int:
        return len(self.runs)

    def __iter__(self) -> Iterator[CommentRun]:
        return iter(self.runs)

    @property
    def doc_runs(self) -> list[CommentRun]:
        return [run for run in self.runs if run.is_doc]

    def clear(self) -> None:
        self.runs.clear()
