"""Utility modules for scopelex.

Provides:
- logger: get_logger for namespaced logging
"""

from scopelex.utils.logger import get_logger

__all__ = ["get_logger"]
