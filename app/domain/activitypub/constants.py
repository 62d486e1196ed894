"""ActivityStreams vocabulary used by the federation layer."""

from __future__ import annotations

from enum import Enum
from typing import Final

ACTIVITYSTREAMS_CONTEXT: Final[str] = "https://www.w3.org/ns/activitystreams"
W3ID_SECURITY_CONTEXT: Final[str] = "https://w3id.org/security/v1"

ACTIVITYPUB_CONTEXTS: Final[tuple[str, ...]] = (
    ACTIVITYSTREAMS_CONTEXT,
    W3ID_SECURITY_CONTEXT,
)

PUBLIC_COLLECTION: Final[str] = "https://www.w3.org/ns/activitystreams#Public"

ACTIVITY_JSON_CONTENT_TYPE: Final[str] = "application/activity+json"
LD_JSON_CONTENT_TYPE: Final[str] = (
    'application/ld+json; profile="https://www.w3.org/ns/activitystreams"'
)


class ActivityType(str, Enum):
    CREATE = "Create"
    UPDATE = "Update"
    DELETE = "Delete"
    FOLLOW = "Follow"
    ACCEPT = "Accept"
    REJECT = "Reject"
    LIKE = "Like"
    UNDO = "Undo"
    ANNOUNCE = "Announce"
    TENTATIVE_ACCEPT = "TentativeAccept"
    BLOCK = "Block"
    FLAG = "Flag"
    ADD = "Add"
    REMOVE = "Remove"


class ObjectType(str, Enum):
    PERSON = "Person"
    EVENT = "Event"
    NOTE = "Note"
    PLACE = "Place"
    IMAGE = "Image"
    DOCUMENT = "Document"
    TOMBSTONE = "Tombstone"


class EventStatus(str, Enum):
    SCHEDULED = "EventScheduled"
    CANCELLED = "EventCancelled"
    POSTPONED = "EventPostponed"


class EventAttendanceMode(str, Enum):
    OFFLINE = "OfflineEventAttendanceMode"
    ONLINE = "OnlineEventAttendanceMode"
    MIXED = "MixedEventAttendanceMode"


__all__ = [
    "ACTIVITYPUB_CONTEXTS",
    "ACTIVITYSTREAMS_CONTEXT",
    "ACTIVITY_JSON_CONTENT_TYPE",
    "ActivityType",
    "EventAttendanceMode",
    "EventStatus",
    "LD_JSON_CONTENT_TYPE",
    "ObjectType",
    "PUBLIC_COLLECTION",
    "W3ID_SECURITY_CONTEXT",
]
