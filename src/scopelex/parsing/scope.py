"""Scope stack for language parsers.

Tracks lexical nesting while a language parser walks the token stream and
keeps a compacted log of how the resolved scope changes line by line.

Assumptions of the default implementation:

- Packages replace one another rather than concatenating. A language that
  nests namespaces has to build the combined name itself.
- Packages inherit: a frame that sets none uses its parent's.

Usage:
    stack = ScopeStack()              # Bottom frame, log [(None, 1)]

    stack.open_scope("}", 3, package="Outer")
    stack.add_using("System.IO")
    stack.close_scope(9)

    stack.record
    # (ScopeChange(None, 1), ScopeChange('Outer', 3), ScopeChange(None, 9))

Subclasses that need richer scope names (say namespace plus class) override
resolve_scope().
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Scope:
    """A frame on the scope stack representing one nesting level.

    Attributes:
        closing_symbol: Symbol that ends this scope, None for the bottom frame
        package: Package set by this level; None means inherit from the parent
        using: Ordered, duplicate-free using/import identifiers, or None

    """

    closing_symbol: str | None = None
    package: str | None = None
    using: list[str] | None = None

    def add_using(self, identifier: str) -> None:
        """Add an identifier to this frame's using list, ignoring duplicates."""
        if self.using is None:
            self.using = [identifier]
        elif identifier not in self.using:
            self.using.append(identifier)


@dataclass(frozen=True, slots=True)
class ScopeChange:
    """The resolved scope in effect starting at a line.

    Attributes:
        scope: Resolved scope identifier, None for top level
        lineno: Line the scope takes effect on (1-indexed)

    """

    scope: str | None
    lineno: int


class ScopeStack:
    """Manages scope frames and the scope change record during parsing.

    Invariant: the bottom frame (no closing symbol, no package) is always
    present and never popped. The record starts with ScopeChange(None, 1),
    never holds two consecutive entries with the same scope, and holds at
    most one entry per line.

    Thread Safety:
        Owned by one parse; not safe to share between threads.

    """

    __slots__ = ("_stack", "_record")

    def __init__(self) -> None:
        self._stack: list[Scope] = []
        self._record: list[ScopeChange] = []
        self.clear()

    def clear(self) -> None:
        """Reset to a single bottom frame and a fresh record for a new file."""
        self._stack = [Scope()]
        self._record = [ScopeChange(None, 1)]

    # =========================================================================
    # Mutation
    # =========================================================================

    def open_scope(self, closing_symbol: str | None, lineno: int, package: str | None = None) -> None:
        """Push a new scope level.

        The new frame starts with a copy of the current using list.

        Args:
            closing_symbol: Symbol that will end the scope, e.g. "}"
            lineno: Line where the scope begins
            package: Package for the new level; None inherits the parent's
        """
        using = self.current_using()
        self._stack.append(
            Scope(
                closing_symbol=closing_symbol,
                package=package,
                using=list(using) if using is not None else None,
            )
        )
        self._add_to_record(self.resolve_scope(), lineno)

    def close_scope(self, lineno: int) -> Scope | None:
        """Pop the current scope level.

        Blind: the caller decides whether closing_symbol was really reached.
        Closing at top level is a no-op, which tolerates unbalanced input.

        Args:
            lineno: Line where the scope ends

        Returns:
            The popped frame, or None at top level
        """
        frame = self._stack.pop() if len(self._stack) > 1 else None
        self._add_to_record(self.resolve_scope(), lineno)
        return frame

    def set_package(self, package: str | None, lineno: int) -> None:
        """Set the package of the current scope level.

        Args:
            package: The new package
            lineno: Line the new package starts on
        """
        self._stack[-1].package = package
        self._add_to_record(self.resolve_scope(), lineno)

    def add_using(self, identifier: str) -> None:
        """Add a using/import identifier to the current scope level."""
        self._stack[-1].add_using(identifier)

    # =========================================================================
    # Queries
    # =========================================================================

    def resolve_package(self) -> str | None:
        """Get the nearest package set on the stack, or None."""
        for frame in reversed(self._stack):
            if frame.package is not None:
                return frame.package
        return None

    def resolve_scope(self) -> str | None:
        """Get the current resolved scope, or None at top level.

        The default is resolve_package(). Override for languages whose scope
        is built from more than the package.
        """
        return self.resolve_package()

    def current_using(self) -> tuple[str, ...] | None:
        """Get the current level's using identifiers, or None if there are none."""
        using = self._stack[-1].using
        return tuple(using) if using is not None else None

    @property
    def closing_symbol(self) -> str | None:
        """Symbol that ends the current scope level, None at top level."""
        return self._stack[-1].closing_symbol

    @property
    def current(self) -> Scope:
        """The innermost frame."""
        return self._stack[-1]

    @property
    def depth(self) -> int:
        """Number of frames above the bottom frame."""
        return len(self._stack) - 1

    @property
    def record(self) -> tuple[ScopeChange, ...]:
        """The scope change record, oldest first."""
        return tuple(self._record)

    # =========================================================================
    # Support
    # =========================================================================

    def _add_to_record(self, scope: str | None, lineno: int) -> None:
        """Add a change to the record, condensing unnecessary entries.

        Several changes on one line keep only the last; a change to the scope
        already in effect is dropped, and a line whose changes end where the
        previous entry's scope was loses its entry entirely.
        """
        last = self._record[-1]
        if scope == last.scope:
            return
        if lineno <= last.lineno:
            # Also covers a line before the last entry, keeping the record ordered
            if len(self._record) > 1 and self._record[-2].scope == scope:
                # The line's changes cancel out
                self._record.pop()
            else:
                self._record[-1] = ScopeChange(scope, last.lineno)
        else:
            self._record.append(ScopeChange(scope, lineno))
