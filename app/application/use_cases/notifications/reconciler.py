"""Unread-count reconciliation for cached notification pages.

A cached :class:`NotificationsSnapshot` holds one page of notifications and
the user's total unread count. The count covers notifications outside the
page, so it is adjusted by the read/unread change of each update and never
recounted from the page itself.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime

from app.config import MAX_PAGE_LIMIT, MIN_PAGE_LIMIT
from app.domain.entities import Notification, NotificationsSnapshot
from app.utils import utc_now

from ..validators import require


def clamp_limit(limit: int) -> int:
    """Clamp a requested page size into the supported ``[1, 100]`` range."""

    return max(MIN_PAGE_LIMIT, min(limit, MAX_PAGE_LIMIT))


def unread_delta(was_unread: bool, incoming: Notification) -> int:
    """Return how the unread count moves when ``incoming`` replaces an entry.

    ``was_unread`` describes the replaced entry; it is ``False`` when there
    was no entry with that id in the page.
    """

    if incoming.is_unread and not was_unread:
        return 1
    if incoming.read and was_unread:
        return -1
    return 0


def reconcile(
    current: NotificationsSnapshot,
    incoming: Notification,
    limit: int | None = None,
) -> NotificationsSnapshot:
    """Merge ``incoming`` at the top of ``current`` and adjust the unread count.

    Entries sharing the id of ``incoming`` are replaced, which makes repeated
    delivery of the same notification harmless. When ``limit`` is given the
    merged page is truncated after the merge, so ``incoming`` is kept whenever
    ``limit`` is positive; a negative ``limit`` raises :class:`ValueError`.
    Each call handles exactly one notification; apply several updates by
    calling it repeatedly.
    """

    notification_id = require(incoming.id, entity="Notification", field="id")
    if limit is not None and limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")

    was_unread = False
    remaining: list[Notification] = []
    for notification in current.notifications:
        if notification.id == notification_id:
            was_unread = was_unread or notification.is_unread
            continue
        remaining.append(notification)

    merged = [incoming, *remaining]
    if limit is not None:
        merged = merged[:limit]

    unread_count = max(0, current.unread_count + unread_delta(was_unread, incoming))
    return NotificationsSnapshot(notifications=tuple(merged), unread_count=unread_count)


def mark_read(
    current: NotificationsSnapshot, updated: Notification
) -> NotificationsSnapshot:
    """Replace the entry matching ``updated`` in place after a single mark-read.

    Unlike :func:`reconcile` the page keeps its order and nothing is prepended:
    a notification missing from the page leaves the snapshot unchanged.
    """

    notification_id = require(updated.id, entity="Notification", field="id")

    existing = current.find(notification_id)
    if existing is None:
        return current

    notifications = tuple(
        updated if notification.id == notification_id else notification
        for notification in current.notifications
    )
    unread_count = current.unread_count
    if existing.is_unread and updated.read:
        unread_count = max(0, unread_count - 1)
    return NotificationsSnapshot(notifications=notifications, unread_count=unread_count)


def mark_all_read(
    current: NotificationsSnapshot, now: datetime | None = None
) -> NotificationsSnapshot:
    """Mark every cached entry as read and reset the unread count to zero.

    Entries that already carry ``read_at`` keep it, so applying this twice
    leaves the timestamps of the first call untouched.
    """

    read_at = now or utc_now()
    notifications = tuple(
        replace(notification, read=True, read_at=notification.read_at or read_at)
        for notification in current.notifications
    )
    return NotificationsSnapshot(notifications=notifications, unread_count=0)


__all__ = ["clamp_limit", "mark_all_read", "mark_read", "reconcile", "unread_delta"]
