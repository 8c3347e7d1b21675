"""
Observer registry and fan-out for notifications.

Each factory owns one NotificationManager. Observers are registered in order
and every notification is delivered to all of them, synchronously, in that
order.

Design decisions:
- Synchronous delivery on the caller's thread
- Duplicates allowed (an observer registered twice is called twice)
- Append-only: there is no way to remove an observer
- Fail-fast by default: an observer's exception stops delivery to the ones
  after it and reaches the caller. Isolation can be switched on per manager.
- The observer list is lock-guarded; observers run outside the lock on a
  snapshot, so one registered mid-dispatch sees the next notification
"""

import logging
import threading
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from notifications.models import Notification

logger = logging.getLogger("notification_manager")

T = TypeVar("T")


@runtime_checkable
class Observer(Protocol):
    """
    Anything that can receive notifications.

    An observer written for a broader payload type can subscribe to a
    narrower source; only the update() capability is checked.
    """

    def update(self, notification: Notification[Any]) -> None:  # pragma: no cover - Protocol
        ...


class InvalidObserverError(ValueError):
    """Raised when something that is not an observer is registered."""


class NotificationManager(Generic[T]):
    """
    Ordered fan-out of notifications to registered observers.

    Example usage:
        manager = NotificationManager()
        manager.add_observer(EmailObserver())
        manager.notify_observers(notification)
    """

    def __init__(self, isolate_failures: bool = False):
        """
        Initialize the manager with no observers.

        Args:
            isolate_failures: If True, an observer's exception is logged and
                delivery continues. If False (default), it propagates.
        """
        self.isolate_failures = isolate_failures
        self._observers: list[Observer] = []
        self._lock = threading.Lock()

    def add_observer(self, observer: Observer) -> None:
        """
        Register an observer at the end of the delivery order.

        Raises:
            InvalidObserverError: If observer is None or has no update() method
        """
        if not isinstance(observer, Observer) or not callable(observer.update):
            raise InvalidObserverError(f"Not an observer: {observer!r}")

        with self._lock:
            self._observers.append(observer)
            count = len(self._observers)
        logger.debug(f"Registered {type(observer).__name__} (observers={count})")

    def notify_observers(self, notification: Notification[T]) -> None:
        """
        Deliver a notification to every registered observer, in order.

        Args:
            notification: The notification to deliver

        Raises:
            Exception: Whatever an observer raised, unless failures are isolated
        """
        with self._lock:
            observers = list(self._observers)

        logger.debug(f"Dispatching {notification} to {len(observers)} observer(s)")

        for observer in observers:
            try:
                observer.update(notification)
            except Exception:
                logger.exception(
                    f"Observer {type(observer).__name__} failed for {notification}"
                )
                if not self.isolate_failures:
                    raise

    @property
    def observers(self) -> tuple[Observer, ...]:
        """Snapshot of registered observers in delivery order."""
        with self._lock:
            return tuple(self._observers)

    @property
    def observer_count(self) -> int:
        """Number of registrations (duplicates included)."""
        with self._lock:
            return len(self._observers)
