"""Exception classes for scopelex.

Source text is never treated as ill-formed: unbalanced scopes and
unterminated strings or comments degrade quietly. The exceptions here cover
setup problems only (unreadable files, malformed comment syntax).
"""

from __future__ import annotations


class ScopelexError(Exception):
    """Base exception for all scopelex errors.

    Subclass this for specific error categories.
    """

    pass


class SourceReadError(ScopelexError):
    """Error when a source file cannot be turned into lines.

    Fatal for the one file being processed; other files are unaffected.
    """

    def __init__(self, path: str, reason: str) -> None:
        """Initialize source read error.

        Args:
            path: Path of the file that could not be read
            reason: Description of the underlying failure
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Couldn't read source file {path}: {reason}")


class SyntaxConfigError(ScopelexError):
    """Error when a comment syntax descriptor is malformed.

    Raised for empty markers or block entries that are not open/close pairs.
    """

    def __init__(self, field_name: str, message: str) -> None:
        """Initialize syntax config error.

        Args:
            field_name: Name of the offending CommentSyntax field
            message: Description of the problem
        """
        self.field_name = field_name
        super().__init__(f"Comment syntax '{field_name}': {message}")
