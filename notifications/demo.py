"""
Demonstration script for the notification patterns.

Runs the MarketBridge scenario: two email observers and one SMS observer,
then one notification from each factory. Expected output:

    New Email: Bye from MarketBridge!
    New Email: Bye from MarketBridge!
    New SMS: Hello from MarketBridge!
"""

import logging
from typing import Optional, TextIO

from notifications.factory import EmailNotificationFactory, SMSNotificationFactory
from notifications.models import Notification
from notifications.observers import EmailObserver, SMSObserver

# Logs go to stderr; stdout only carries the observer output
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s | %(name)-24s | %(levelname)-5s | %(message)s",
    datefmt="%H:%M:%S",
)


def run_marketbridge_demo(
    stream: Optional[TextIO] = None,
) -> tuple[Notification[str], Notification[str]]:
    """
    Run the MarketBridge scenario.

    Args:
        stream: Where the observers print (defaults to stdout)

    Returns:
        The email and SMS notifications that were created
    """
    # Factories
    email_factory = EmailNotificationFactory()
    sms_factory = SMSNotificationFactory()

    # Observers
    email_factory.add_observer(EmailObserver(stream=stream))
    email_factory.add_observer(EmailObserver(stream=stream))
    sms_factory.add_observer(SMSObserver(stream=stream))

    # Notifications
    email = email_factory.create_notification("Bye from MarketBridge!")
    sms = sms_factory.create_notification("Hello from MarketBridge!")

    return email, sms


if __name__ == "__main__":
    run_marketbridge_demo()
