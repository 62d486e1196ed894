"""Serialize notification entities into the client cache payload shape."""

from __future__ import annotations

from typing import Any

from app.domain.entities import Notification, NotificationsSnapshot
from app.interfaces.api.schemas import NotificationRead, NotificationsResponse


def serialize_notification(notification: Notification) -> dict[str, Any]:
    """Return the camelCase JSON representation of ``notification``."""

    return NotificationRead.model_validate(notification).model_dump(
        by_alias=True, mode="json"
    )


def serialize_snapshot(snapshot: NotificationsSnapshot) -> dict[str, Any]:
    """Return ``{"notifications": [...], "unreadCount": n}`` for ``snapshot``."""

    return {
        "notifications": [
            serialize_notification(notification)
            for notification in snapshot.notifications
        ],
        "unreadCount": snapshot.unread_count,
    }


def deserialize_snapshot(payload: dict[str, Any]) -> NotificationsSnapshot:
    """Validate a cached or fetched page and return it as a snapshot."""

    return NotificationsResponse.model_validate(payload).to_snapshot()


__all__ = ["deserialize_snapshot", "serialize_notification", "serialize_snapshot"]
