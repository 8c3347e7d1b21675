"""
FastAPI application for the notification patterns demo.

This application provides:
1. Notification creation endpoints (/notifications/{kind})
2. Observer inspection (/notifications/{kind}/observers)
3. Recent notification history (/notifications/{kind}/history)
4. A health check

Each kind is served by one long-lived factory. By default every factory has a
console observer and a RecordingObserver that keeps only the last
HISTORY_LIMIT notifications.

Run with:
    uv run uvicorn api.main:app --reload

Then visit http://localhost:8000/docs for interactive API documentation.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel, Field

from notifications.factory import NotificationFactory, create_factory
from notifications.models import Notification, NotificationKind
from notifications.observers import EmailObserver, RecordingObserver, SMSObserver

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(name)-24s | %(levelname)-5s | %(message)s",
    datefmt="%H:%M:%S",
)

logger = logging.getLogger("notification_api")


# Request/response models
class NotificationRequest(BaseModel):
    """Request to create a notification."""
    content: Optional[str] = Field(default=None, description="Notification content")


class NotificationSummary(BaseModel):
    """A notification as returned by the API."""
    notification_id: str
    kind: NotificationKind
    content: Optional[str]
    platform: Optional[str]
    created_at: datetime

    @classmethod
    def from_notification(cls, notification: Notification) -> "NotificationSummary":
        return cls(
            notification_id=notification.notification_id,
            kind=notification.kind,
            content=notification.content,
            platform=notification.platform,
            created_at=notification.created_at,
        )


class NotificationResponse(NotificationSummary):
    """A notification that was created and delivered to observers."""
    observer_count: int = Field(
        ...,
        description="Observers registered on the factory (not a delivery count)",
    )


class ObserverInfo(BaseModel):
    """Observer registrations for one kind."""
    kind: NotificationKind
    observer_count: int


class HistoryResponse(BaseModel):
    """Most recent notifications of one kind, oldest first."""
    kind: NotificationKind
    notifications: list[NotificationSummary]


# Module-level instances (would use proper DI in production)
_factories: Optional[dict[NotificationKind, NotificationFactory]] = None

# Notifications kept per kind for /history
HISTORY_LIMIT = 100

CONSOLE_OBSERVERS = {
    NotificationKind.EMAIL: EmailObserver,
    NotificationKind.SMS: SMSObserver,
}


def build_default_factories(
    history_limit: int = HISTORY_LIMIT,
) -> dict[NotificationKind, NotificationFactory]:
    """One factory per kind, each with a console and a bounded recording observer."""
    factories = {}
    for kind in NotificationKind:
        factory = create_factory(kind)
        factory.add_observer(CONSOLE_OBSERVERS[kind]())
        factory.add_observer(RecordingObserver(max_history=history_limit))
        factories[kind] = factory
    return factories


def find_recorder(factory: NotificationFactory) -> Optional[RecordingObserver]:
    """The first RecordingObserver registered on a factory, if any."""
    for observer in factory.observers:
        if isinstance(observer, RecordingObserver):
            return observer
    return None


def get_factories() -> dict[NotificationKind, NotificationFactory]:
    """Get the factory for each notification kind."""
    global _factories
    if _factories is None:
        _factories = build_default_factories()
    return _factories


def reset_api_state(
    factories: Optional[dict[NotificationKind, NotificationFactory]] = None,
) -> None:
    """Reset API state (for testing)."""
    global _factories
    _factories = factories


# Application lifespan
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    logger.info("Starting Notification Patterns API")
    yield
    logger.info("Shutting down")


app = FastAPI(
    title="Notification Patterns",
    description="""
    Creates email and SMS notifications through per-kind factories.

    Every created notification is delivered synchronously, in registration
    order, to the observers of its factory before the response is returned.
    """,
    version="1.0.0",
    lifespan=lifespan,
)


@app.get("/health", tags=["Health"])
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "notification-patterns"}


@app.post(
    "/notifications/{kind}",
    response_model=NotificationResponse,
    tags=["Notifications"],
)
def create_notification(
    kind: NotificationKind,
    request: NotificationRequest,
    factories: dict[NotificationKind, NotificationFactory] = Depends(get_factories),
) -> NotificationResponse:
    """
    Create a notification of the given kind.

    The factory builds the notification and fans it out to its observers.
    If an observer fails, the request fails with 500.
    """
    factory = factories[kind]

    try:
        notification = factory.create_notification(request.content)
    except Exception as e:
        logger.error(f"Observer failed for {kind.value} notification: {e}")
        raise HTTPException(status_code=500, detail=f"Observer failed: {e}")

    return NotificationResponse(
        **NotificationSummary.from_notification(notification).model_dump(),
        observer_count=factory.observer_count,
    )


@app.get(
    "/notifications/{kind}/observers",
    response_model=ObserverInfo,
    tags=["Notifications"],
)
def get_observers(
    kind: NotificationKind,
    factories: dict[NotificationKind, NotificationFactory] = Depends(get_factories),
) -> ObserverInfo:
    """Get the number of observers registered for a kind."""
    return ObserverInfo(kind=kind, observer_count=factories[kind].observer_count)


@app.get(
    "/notifications/{kind}/history",
    response_model=HistoryResponse,
    tags=["Notifications"],
)
def get_history(
    kind: NotificationKind,
    factories: dict[NotificationKind, NotificationFactory] = Depends(get_factories),
) -> HistoryResponse:
    """
    Get the most recent notifications of a kind.

    Only as many notifications as the factory's RecordingObserver keeps are
    returned (HISTORY_LIMIT by default).
    """
    recorder = find_recorder(factories[kind])
    if recorder is None:
        raise HTTPException(status_code=404, detail=f"No history kept for {kind.value}")

    return HistoryResponse(
        kind=kind,
        notifications=[NotificationSummary.from_notification(n) for n in recorder.received],
    )
