"""Public helpers for keeping cached notification pages consistent."""

from .realtime import apply_realtime_message
from .reconciler import clamp_limit, mark_all_read, mark_read, reconcile, unread_delta

__all__ = [
    "apply_realtime_message",
    "clamp_limit",
    "mark_all_read",
    "mark_read",
    "reconcile",
    "unread_delta",
]
