"""Client-side notification cache helpers for the infrastructure layer."""

from .serializers import deserialize_snapshot, serialize_notification, serialize_snapshot
from .store import NotificationSnapshotStore, create_snapshot_store

__all__ = [
    "NotificationSnapshotStore",
    "create_snapshot_store",
    "deserialize_snapshot",
    "serialize_notification",
    "serialize_snapshot",
]
