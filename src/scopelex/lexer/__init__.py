"""Comment/code splitting lexer for scopelex.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerMode
├── core.py              # Lexer class (line dispatch + comment scanners)
├── markers.py           # Comment marker classification mixin
└── modes.py             # LexerMode enum

Usage:
    >>> from scopelex.lexer import Lexer
    >>> from scopelex.syntax import get_syntax
    >>> stream = Lexer(["int x; // no", "/* gone */"], get_syntax("c++")).tokenize()
    >>> stream.text()
    'int x; // no\\n\\n'

"""

from scopelex.lexer.core import Lexer
from scopelex.lexer.markers import MarkerClassifierMixin, OpeningMatch
from scopelex.lexer.modes import LexerMode

__all__ = ["Lexer", "LexerMode", "MarkerClassifierMixin", "OpeningMatch"]
