"""
Notification entities.

A notification carries a content payload and a platform field of the same
type. Email and SMS notifications differ only by their kind tag; nothing about
their runtime behaviour depends on it.

Design decisions:
- Using Pydantic for the immutable value (frozen model)
- A single generic model with an explicit kind tag instead of one subclass per
  kind, since the payload type is not inspectable at runtime
- Each notification gets an id and timestamp for logging and API responses
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Generic, Optional, TypeVar
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class NotificationKind(str, Enum):
    """Supported notification kinds."""
    EMAIL = "email"
    SMS = "sms"


class Notification(BaseModel, Generic[T]):
    """
    An immutable notification produced by a builder.

    Attributes:
        kind: Which kind of notification this is (email or SMS)
        content: The payload delivered to observers
        platform: Metadata of the same payload type (never set by factories)
        notification_id: Unique identifier for this notification instance
        created_at: When the notification was built (UTC)
    """
    kind: NotificationKind = Field(..., description="Variant tag")
    content: Optional[T] = Field(default=None, description="Payload delivered to observers")
    platform: Optional[T] = Field(default=None, description="Platform metadata")
    notification_id: str = Field(default_factory=lambda: str(uuid4()))
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return (
            f"Notification({self.kind.value}, id={self.notification_id[:8]}, "
            f"content={self.content!r})"
        )
