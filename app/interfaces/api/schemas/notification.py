"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.domain.entities import Notification, NotificationActor, NotificationsSnapshot

NOTIFICATION_CREATED = "notification:created"
NOTIFICATION_READ = "notification:read"


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class NotificationActorRead(_CamelModel):
    """Summary of the user who triggered a notification."""

    id: str
    username: str
    name: str | None = None
    display_color: str | None = None
    profile_image: str | None = None

    def to_entity(self) -> NotificationActor:
        return NotificationActor(
            id=self.id,
            username=self.username,
            name=self.name,
            display_color=self.display_color,
            profile_image=self.profile_image,
        )


class NotificationRead(_CamelModel):
    """Representation of a notification delivered to the client."""

    id: str = Field(..., min_length=1)
    type: str
    title: str
    body: str | None = None
    context_url: str | None = None
    data: dict[str, Any] | None = None
    read: bool
    read_at: datetime | None = None
    created_at: datetime
    updated_at: datetime | None = None
    actor: NotificationActorRead | None = None

    def to_entity(self) -> Notification:
        """Return the domain entity described by this payload."""

        return Notification(
            id=self.id,
            type=self.type,
            title=self.title,
            body=self.body,
            context_url=self.context_url,
            data=self.data,
            read=self.read,
            read_at=self.read_at,
            created_at=self.created_at,
            updated_at=self.updated_at or self.created_at,
            actor=self.actor.to_entity() if self.actor else None,
        )


class NotificationsResponse(_CamelModel):
    """A page of notifications as returned by ``GET /api/notifications``."""

    notifications: list[NotificationRead] = Field(default_factory=list)
    unread_count: int = Field(default=0, ge=0)

    def to_snapshot(self) -> NotificationsSnapshot:
        return NotificationsSnapshot(
            notifications=tuple(item.to_entity() for item in self.notifications),
            unread_count=self.unread_count,
        )


class NotificationEventData(_CamelModel):
    """Body of a realtime notification message.

    Carries either a single ``notification`` or the ``all_read`` marker sent
    after a bulk mark-all-read.
    """

    notification: NotificationRead | None = None
    all_read: bool = False
    count: int | None = None


class NotificationEventMessage(_CamelModel):
    """A realtime message pushed to the client over SSE."""

    type: Literal["notification:created", "notification:read"]
    data: NotificationEventData


__all__ = [
    "NOTIFICATION_CREATED",
    "NOTIFICATION_READ",
    "NotificationActorRead",
    "NotificationEventData",
    "NotificationEventMessage",
    "NotificationRead",
    "NotificationsResponse",
]
