"""Utility modules for smartequals.

Provides:
- logger: get_logger for logging
"""

from smartequals.utils.logger import get_logger

__all__ = [
    "get_logger",
]
