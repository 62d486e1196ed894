"""Helpers handing built activities to the delivery layer."""

from .serializer import (
    activity_addressing,
    activity_to_json,
    delivery_headers,
    delivery_inboxes,
    serialize_activity,
)

__all__ = [
    "activity_addressing",
    "activity_to_json",
    "delivery_headers",
    "delivery_inboxes",
    "serialize_activity",
]
