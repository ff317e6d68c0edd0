"""
Custom exceptions for the application.

Exception Hierarchy:
--------------------
AppException (base)
├── ValidationError
│   └── InvalidPreferenceKeyException
├── PreferenceException
│   └── InvalidPreferenceKeyException
└── NotificationException
    └── NotificationDeliveryException

Usage:
------
Services raise specific exceptions:
    raise InvalidPreferenceKeyException(key)

Callers catch the family they care about:
    try:
        await notification_service.notify_new_demo_request(...)
    except NotificationDeliveryException as e:
        logging.warning(str(e))
"""

from .base import AppException, ValidationError
from .preference import PreferenceException, InvalidPreferenceKeyException
from .notification import NotificationException, NotificationDeliveryException

__all__ = [
    # Base
    'AppException',
    'ValidationError',

    # Preference
    'PreferenceException',
    'InvalidPreferenceKeyException',

    # Notification
    'NotificationException',
    'NotificationDeliveryException',
]
