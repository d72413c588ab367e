"""
Custom exceptions for the application.
"""

from typing import Any, Optional


class LifeCoreError(Exception):
    """Base exception for lifecore."""

    def __init__(self, message: str, details: Optional[Any] = None):
        self.message = message
        self.details = details
        super().__init__(message)


class ValidationError(LifeCoreError):
    """Validation error."""

    pass


class InvalidRuleError(ValidationError):
    """Recurrence form input cannot be turned into a rule."""

    pass
