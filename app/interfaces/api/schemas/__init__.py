from .notification import (
    NOTIFICATION_CREATED,
    NOTIFICATION_READ,
    NotificationActorRead,
    NotificationEventData,
    NotificationEventMessage,
    NotificationRead,
    NotificationsResponse,
)

__all__ = [
    "NOTIFICATION_CREATED",
    "NOTIFICATION_READ",
    "NotificationActorRead",
    "NotificationEventData",
    "NotificationEventMessage",
    "NotificationRead",
    "NotificationsResponse",
]
