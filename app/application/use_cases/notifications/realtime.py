"""Apply realtime notification messages to a cached notification page."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from app.domain.entities import NotificationsSnapshot
from app.interfaces.api.schemas import (
    NOTIFICATION_CREATED,
    NOTIFICATION_READ,
    NotificationEventMessage,
)

from .reconciler import mark_all_read, mark_read, reconcile

logger = logging.getLogger(__name__)

_HANDLED_TYPES = frozenset({NOTIFICATION_CREATED, NOTIFICATION_READ})


def apply_realtime_message(
    current: NotificationsSnapshot,
    message: Mapping[str, Any],
    limit: int | None = None,
) -> NotificationsSnapshot:
    """Return ``current`` updated with a pushed ``message``.

    ``notification:created`` messages are merged at the top of the page with
    :func:`reconcile`. ``notification:read`` messages update the matching entry
    in place with :func:`mark_read`, or mark the whole page read when flagged
    ``allRead``. Messages of any other type are ignored. A handled message
    with a malformed body raises :class:`pydantic.ValidationError`.
    """

    message_type = message.get("type")
    if message_type not in _HANDLED_TYPES:
        logger.debug("Ignoring realtime message of type %r", message_type)
        return current

    event = NotificationEventMessage.model_validate(message)
    if event.data.all_read:
        return mark_all_read(current)

    if event.data.notification is None:
        logger.debug("Realtime %s message without a notification", event.type)
        return current

    notification = event.data.notification.to_entity()
    if event.type == NOTIFICATION_READ:
        return mark_read(current, notification)
    return reconcile(current, notification, limit)


__all__ = ["apply_realtime_message"]
