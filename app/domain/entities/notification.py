"""Domain entities representing user notifications and cached pages of them."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

NOTIFICATION_TYPE_FOLLOW = "FOLLOW"
NOTIFICATION_TYPE_COMMENT = "COMMENT"
NOTIFICATION_TYPE_LIKE = "LIKE"
NOTIFICATION_TYPE_MENTION = "MENTION"
NOTIFICATION_TYPE_EVENT = "EVENT"
NOTIFICATION_TYPE_SYSTEM = "SYSTEM"


@dataclass(frozen=True)
class NotificationActor:
    """Summary of the user that triggered a notification."""

    id: str
    username: str
    name: str | None = None
    display_color: str | None = None
    profile_image: str | None = None


@dataclass(frozen=True)
class Notification:
    """Information message delivered to a specific user."""

    id: str
    type: str
    title: str
    read: bool
    created_at: datetime
    updated_at: datetime
    body: str | None = None
    read_at: datetime | None = None
    context_url: str | None = None
    data: dict[str, Any] | None = None
    actor: NotificationActor | None = None

    @property
    def is_unread(self) -> bool:
        return not self.read


@dataclass(frozen=True)
class NotificationsSnapshot:
    """A cached page of notifications together with the unread badge count.

    ``unread_count`` spans every notification of the user, not only the ones
    retained in ``notifications``; it is maintained incrementally and is never
    recomputed from the page.
    """

    notifications: tuple[Notification, ...] = field(default_factory=tuple)
    unread_count: int = 0

    def find(self, notification_id: str) -> Notification | None:
        """Return the entry identified by ``notification_id`` if present."""

        for notification in self.notifications:
            if notification.id == notification_id:
                return notification
        return None


__all__ = [
    "NOTIFICATION_TYPE_COMMENT",
    "NOTIFICATION_TYPE_EVENT",
    "NOTIFICATION_TYPE_FOLLOW",
    "NOTIFICATION_TYPE_LIKE",
    "NOTIFICATION_TYPE_MENTION",
    "NOTIFICATION_TYPE_SYSTEM",
    "Notification",
    "NotificationActor",
    "NotificationsSnapshot",
]
