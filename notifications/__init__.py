"""
Notification dispatch built from three patterns.

- Builder: NotificationBuilder accumulates fields, then builds a Notification
- Observer: NotificationManager fans each notification out to its observers
- Factory: one factory per kind owns a manager and creates notifications
"""

from notifications.models import Notification, NotificationKind
from notifications.builder import NotificationBuilder
from notifications.manager import InvalidObserverError, NotificationManager, Observer
from notifications.factory import (
    EmailNotificationFactory,
    NotificationFactory,
    SMSNotificationFactory,
    create_factory,
)
from notifications.observers import (
    CallbackObserver,
    EmailObserver,
    RecordingObserver,
    SMSObserver,
)

__all__ = [
    "Notification",
    "NotificationKind",
    "NotificationBuilder",
    "NotificationManager",
    "Observer",
    "InvalidObserverError",
    "NotificationFactory",
    "EmailNotificationFactory",
    "SMSNotificationFactory",
    "create_factory",
    "EmailObserver",
    "SMSObserver",
    "RecordingObserver",
    "CallbackObserver",
]
