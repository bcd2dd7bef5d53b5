"""Building blocks for language-specific parsers.

Provides:
- token_nav: Cursor, StringSpan, TokenNavigationMixin
- scope: Scope, ScopeChange, ScopeStack
"""

from scopelex.parsing.scope import Scope, ScopeChange, ScopeStack
from scopelex.parsing.token_nav import Cursor, StringSpan, TokenNavigationMixin

__all__ = [
    "Cursor",
    "Scope",
    "ScopeChange",
    "ScopeStack",
    "StringSpan",
    "TokenNavigationMixin",
]
