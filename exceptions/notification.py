"""
Notification-related exceptions.
"""

from .base import AppException


class NotificationException(AppException):
    """Base exception for notification errors."""
    pass


class NotificationDeliveryException(NotificationException):
    """Raised when Telegram rejects a message or cannot be reached."""

    def __init__(self, destination: str, reason: str):
        super().__init__(
            f"Failed to deliver notification to chat {destination}: {reason}",
            details={'destination': destination, 'reason': reason}
        )
        self.destination = destination
        self.reason = reason
