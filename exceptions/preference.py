"""
Preference-related exceptions.
"""

from .base import AppException, ValidationError


class PreferenceException(AppException):
    """Base exception for preference store errors."""
    pass


class InvalidPreferenceKeyException(ValidationError, PreferenceException):
    """Raised when a preference is written under an empty or non-string key."""

    def __init__(self, key):
        if isinstance(key, str):
            message = "Preference key must not be empty"
        else:
            message = f"Preference key must be a string, got {type(key).__name__}"

        super().__init__(message, details={'key': key})
        self.key = key
