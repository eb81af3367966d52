"""Exception classes for smartequals.

Provides standardized exceptions for error handling throughout smartequals.
"""

from __future__ import annotations


class SmartEqualsError(Exception):
    """Base exception for all smartequals errors.
    
    Subclass this for specific error categories.
    """

    pass


class ConfigError(SmartEqualsError):
    """Invalid resolver configuration.
    
    Raised when an EqualsConfig is built with values the resolver cannot
    work with, such as an empty assignment token.
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize config error.
        
        Args:
            field: Name of the offending configuration field
            message: Description of the problem
        """
        self.field = field
        super().__init__(f"Config '{field}': {message}")
