"""
Builder for notifications.

The builder accumulates the content and platform fields, then produces an
immutable Notification of the kind it was constructed for. A fresh builder is
used for every notification a factory creates; nothing stops a caller from
reusing one, but factories never do.
"""

from typing import Generic, Optional, TypeVar, Union

from notifications.models import Notification, NotificationKind

T = TypeVar("T")


class NotificationBuilder(Generic[T]):
    """
    Two-step accumulator for a Notification.

    Example:
        builder = NotificationBuilder(NotificationKind.EMAIL)
        notification = builder.build_content("Hello").build()
    """

    def __init__(self, kind: Union[NotificationKind, str]):
        """
        Initialize an empty builder.

        Args:
            kind: The kind of notification this builder produces

        Raises:
            ValueError: If kind is not a known notification kind
        """
        self.kind = NotificationKind(kind)
        self.content: Optional[T] = None
        self.platform: Optional[T] = None

    def build_content(self, content: Optional[T]) -> "NotificationBuilder[T]":
        """Set the content field, replacing any previous value."""
        self.content = content
        return self

    def build_platform(self, platform: Optional[T]) -> "NotificationBuilder[T]":
        """Set the platform field, replacing any previous value."""
        self.platform = platform
        return self

    def build(self) -> Notification[T]:
        """
        Produce a Notification from the accumulated fields.

        Fields that were never set come out as None.
        """
        return Notification(kind=self.kind, content=self.content, platform=self.platform)

    def build_email_notification(self) -> Notification[T]:
        """Finalize as an email notification."""
        self._check_kind(NotificationKind.EMAIL)
        return self.build()

    def build_sms_notification(self) -> Notification[T]:
        """Finalize as an SMS notification."""
        self._check_kind(NotificationKind.SMS)
        return self.build()

    def _check_kind(self, expected: NotificationKind) -> None:
        if self.kind != expected:
            raise ValueError(
                f"Builder produces {self.kind.value} notifications, not {expected.value}"
            )
