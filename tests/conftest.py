"""
Shared pytest fixtures for the notification patterns tests.

Every fixture returns a fresh instance so tests don't interfere with each other.
"""

import pytest

from notifications.factory import EmailNotificationFactory, SMSNotificationFactory
from notifications.manager import NotificationManager
from notifications.observers import RecordingObserver


@pytest.fixture
def manager() -> NotificationManager:
    """Fresh fail-fast NotificationManager for each test."""
    return NotificationManager()


@pytest.fixture
def email_factory() -> EmailNotificationFactory:
    """Fresh email factory with no observers."""
    return EmailNotificationFactory()


@pytest.fixture
def sms_factory() -> SMSNotificationFactory:
    """Fresh SMS factory with no observers."""
    return SMSNotificationFactory()


@pytest.fixture
def recorder() -> RecordingObserver:
    """Fresh RecordingObserver for each test."""
    return RecordingObserver()


class OrderLog:
    """Records which observer saw which notification, in call order."""

    def __init__(self):
        self.calls: list[tuple[str, object]] = []

    def observer(self, name: str) -> "NamedObserver":
        return NamedObserver(name, self)


class NamedObserver:
    def __init__(self, name: str, log: OrderLog):
        self.name = name
        self.log = log

    def update(self, notification) -> None:
        self.log.calls.append((self.name, notification))


@pytest.fixture
def order_log() -> OrderLog:
    """Shared log for asserting delivery order across observers."""
    return OrderLog()
