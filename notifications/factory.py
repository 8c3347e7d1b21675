"""
Notification factories.

A factory owns one NotificationManager. Creating a notification builds it,
fans it out to the factory's observers, and hands it back to the caller.

Note: factories only ever call build_content(). The platform field is left
at its default (None) on every notification they produce.
"""

import logging
from typing import Any, Generic, Optional, TypeVar, Union

from notifications.builder import NotificationBuilder
from notifications.manager import NotificationManager, Observer
from notifications.models import Notification, NotificationKind

logger = logging.getLogger("notification_factory")

T = TypeVar("T")


class NotificationFactory(Generic[T]):
    """
    Produces notifications of one kind and notifies observers of each.

    Subclasses fix the kind; the base class can also be used directly with
    an explicit kind.

    Example:
        factory = EmailNotificationFactory()
        factory.add_observer(EmailObserver())
        notification = factory.create_notification("Hello")
    """

    kind: NotificationKind

    def __init__(
        self,
        kind: Optional[Union[NotificationKind, str]] = None,
        manager: Optional[NotificationManager[T]] = None,
        isolate_failures: bool = False,
    ):
        """
        Initialize the factory.

        Args:
            kind: Notification kind (defaults to the subclass's kind)
            manager: Manager to dispatch through (defaults to a new one)
            isolate_failures: Failure policy for the default manager. An
                injected manager keeps its own policy.

        Raises:
            ValueError: If no kind is known, or if isolate_failures is set
                together with an injected manager
        """
        if kind is not None:
            self.kind = NotificationKind(kind)
        elif getattr(self, "kind", None) is None:
            raise ValueError(f"{type(self).__name__} needs a notification kind")

        if manager is not None and isolate_failures:
            raise ValueError(
                "isolate_failures only applies to the default manager; "
                "configure the injected manager instead"
            )

        self._manager: NotificationManager[T] = manager or NotificationManager(
            isolate_failures=isolate_failures
        )

    def add_observer(self, observer: Observer) -> None:
        """Register an observer for this factory's notifications."""
        self._manager.add_observer(observer)

    def create_notification(self, content: Optional[T]) -> Notification[T]:
        """
        Build a notification, deliver it to all observers, and return it.

        Args:
            content: Payload for the notification (may be None)

        Returns:
            The same Notification instance every observer received
        """
        builder: NotificationBuilder[T] = NotificationBuilder(self.kind)
        builder.build_content(content)
        notification = builder.build()

        logger.info(f"Created {notification}")

        self._manager.notify_observers(notification)
        return notification

    @property
    def observers(self) -> tuple[Observer, ...]:
        """Snapshot of this factory's observers in delivery order."""
        return self._manager.observers

    @property
    def observer_count(self) -> int:
        """Number of observer registrations on this factory."""
        return self._manager.observer_count


class EmailNotificationFactory(NotificationFactory[str]):
    """Factory for email notifications."""
    kind = NotificationKind.EMAIL


class SMSNotificationFactory(NotificationFactory[str]):
    """Factory for SMS notifications."""
    kind = NotificationKind.SMS


FACTORY_TYPES: dict[NotificationKind, type[NotificationFactory]] = {
    NotificationKind.EMAIL: EmailNotificationFactory,
    NotificationKind.SMS: SMSNotificationFactory,
}


def create_factory(kind: Union[NotificationKind, str], **kwargs: Any) -> NotificationFactory:
    """
    Create a new factory for a notification kind.

    Args:
        kind: NotificationKind or its name ("email", "SMS", ...)
        **kwargs: Passed through to the factory constructor

    Raises:
        ValueError: If kind is not recognized
    """
    if isinstance(kind, str) and not isinstance(kind, NotificationKind):
        kind = kind.lower()
    try:
        factory_type = FACTORY_TYPES[NotificationKind(kind)]
    except ValueError:
        raise ValueError(f"Unknown notification kind: {kind}") from None
    return factory_type(**kwargs)
