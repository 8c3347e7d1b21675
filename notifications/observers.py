"""
Observers for the notification demo.

The console observers print one line per notification they receive. In a real
system these would hand off to an email or SMS provider.

Also included:
- RecordingObserver keeps received notifications for test assertions
- CallbackObserver adapts a plain function into an observer
"""

import sys
from typing import Any, Callable, Optional, TextIO

from notifications.models import Notification


class ConsoleObserver:
    """
    Prints "<prefix>: <content>" for every notification.

    The stream is resolved when printing, so output redirection applied after
    construction (e.g. pytest's capsys) still takes effect.
    """

    prefix = "New Notification"

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def update(self, notification: Notification[Any]) -> None:
        print(f"{self.prefix}: {notification.content}", file=self.stream or sys.stdout)


class EmailObserver(ConsoleObserver):
    """Announces new email notifications on the console."""
    prefix = "New Email"


class SMSObserver(ConsoleObserver):
    """Announces new SMS notifications on the console."""
    prefix = "New SMS"


class RecordingObserver:
    """
    Observer that remembers everything it receives.

    Received notifications are kept in arrival order. With max_history set,
    only the most recent max_history notifications are kept.
    """

    def __init__(self, max_history: Optional[int] = None):
        if max_history is not None and max_history < 1:
            raise ValueError(f"max_history must be at least 1, got {max_history}")
        self.max_history = max_history
        self.received: list[Notification[Any]] = []

    def update(self, notification: Notification[Any]) -> None:
        self.received.append(notification)
        if self.max_history is not None and len(self.received) > self.max_history:
            del self.received[: -self.max_history]

    def get_received_count(self) -> int:
        """Get the number of notifications received."""
        return len(self.received)

    def clear_history(self) -> None:
        """Clear received history (useful between tests)."""
        self.received.clear()


class CallbackObserver:
    """
    Wraps a callable so it can be registered as an observer.

    Example:
        factory.add_observer(CallbackObserver(lambda n: print(n.content)))
    """

    def __init__(self, callback: Callable[[Notification[Any]], None]):
        if not callable(callback):
            raise TypeError(f"Callback must be callable, got {type(callback).__name__}")
        self.callback = callback

    def update(self, notification: Notification[Any]) -> None:
        self.callback(notification)
