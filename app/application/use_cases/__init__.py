"""Aggregate application use cases."""

from .federation import ActivityBuilder, get_activity_builder
from .notifications import apply_realtime_message, mark_all_read, mark_read, reconcile

__all__ = [
    "ActivityBuilder",
    "apply_realtime_message",
    "get_activity_builder",
    "mark_all_read",
    "mark_read",
    "reconcile",
]
