"""Domain entities exposed by the application."""

from .comment import Comment
from .event import Event
from .notification import (
    NOTIFICATION_TYPE_COMMENT,
    NOTIFICATION_TYPE_EVENT,
    NOTIFICATION_TYPE_FOLLOW,
    NOTIFICATION_TYPE_LIKE,
    NOTIFICATION_TYPE_MENTION,
    NOTIFICATION_TYPE_SYSTEM,
    Notification,
    NotificationActor,
    NotificationsSnapshot,
)
from .user import User

__all__ = [
    "Comment",
    "Event",
    "User",
    "Notification",
    "NotificationActor",
    "NotificationsSnapshot",
    "NOTIFICATION_TYPE_COMMENT",
    "NOTIFICATION_TYPE_EVENT",
    "NOTIFICATION_TYPE_FOLLOW",
    "NOTIFICATION_TYPE_LIKE",
    "NOTIFICATION_TYPE_MENTION",
    "NOTIFICATION_TYPE_SYSTEM",
]
