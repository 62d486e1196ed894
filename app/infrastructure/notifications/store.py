"""In-memory holder of the cached notification page of each user."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping
from typing import Any

from app.application.use_cases.notifications import (
    apply_realtime_message,
    clamp_limit,
    mark_all_read,
    mark_read,
    reconcile,
)
from app.config import get_settings
from app.domain.entities import Notification, NotificationsSnapshot

logger = logging.getLogger(__name__)

Transition = Callable[[NotificationsSnapshot], NotificationsSnapshot]


class NotificationSnapshotStore:
    """Keep one :class:`NotificationsSnapshot` per user.

    Every update computes the next snapshot from the current one and stores it
    as a whole under a lock, so concurrent updates for the same user are
    applied one after the other and none of them is lost.
    """

    def __init__(self, limit: int | None = None) -> None:
        self._limit = clamp_limit(limit) if limit is not None else None
        self._snapshots: dict[str, NotificationsSnapshot] = {}
        self._lock = threading.Lock()

    @property
    def limit(self) -> int | None:
        return self._limit

    def snapshot(self, user_id: str) -> NotificationsSnapshot:
        """Return the current snapshot for ``user_id`` (empty when unknown)."""

        with self._lock:
            return self._snapshots.get(user_id, NotificationsSnapshot())

    def replace(self, user_id: str, snapshot: NotificationsSnapshot) -> NotificationsSnapshot:
        """Store ``snapshot`` as returned by a full refetch."""

        with self._lock:
            self._snapshots[user_id] = snapshot
        logger.debug(
            "Replaced notifications of user %s (%d cached, %d unread)",
            user_id,
            len(snapshot.notifications),
            snapshot.unread_count,
        )
        return snapshot

    def apply(self, user_id: str, notification: Notification) -> NotificationsSnapshot:
        """Merge a created or updated ``notification`` at the top of the page."""

        return self._update(
            user_id, lambda current: reconcile(current, notification, self._limit)
        )

    def apply_message(
        self, user_id: str, message: Mapping[str, Any]
    ) -> NotificationsSnapshot:
        """Apply a realtime ``message`` pushed to ``user_id``."""

        return self._update(
            user_id, lambda current: apply_realtime_message(current, message, self._limit)
        )

    def mark_read(self, user_id: str, notification: Notification) -> NotificationsSnapshot:
        """Record the server response of a single mark-read request."""

        return self._update(user_id, lambda current: mark_read(current, notification))

    def mark_all_read(self, user_id: str) -> NotificationsSnapshot:
        return self._update(user_id, mark_all_read)

    def clear(self, user_id: str) -> None:
        """Forget the cached page of ``user_id``."""

        with self._lock:
            self._snapshots.pop(user_id, None)

    def _update(self, user_id: str, transition: Transition) -> NotificationsSnapshot:
        with self._lock:
            current = self._snapshots.get(user_id, NotificationsSnapshot())
            updated = transition(current)
            self._snapshots[user_id] = updated
        if updated.unread_count != current.unread_count:
            logger.debug(
                "Unread notifications of user %s: %d -> %d",
                user_id,
                current.unread_count,
                updated.unread_count,
            )
        return updated


def create_snapshot_store() -> NotificationSnapshotStore:
    """Return a store using the configured notification page size."""

    return NotificationSnapshotStore(limit=get_settings().notifications_page_limit)


__all__ = ["NotificationSnapshotStore", "Transition", "create_snapshot_store"]
