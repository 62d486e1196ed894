"""ActivityStreams vocabulary and wire models."""

from .constants import (
    ACTIVITY_JSON_CONTENT_TYPE,
    ACTIVITYPUB_CONTEXTS,
    ACTIVITYSTREAMS_CONTEXT,
    LD_JSON_CONTENT_TYPE,
    PUBLIC_COLLECTION,
    W3ID_SECURITY_CONTEXT,
    ActivityType,
    EventAttendanceMode,
    EventStatus,
    ObjectType,
)
from .objects import (
    Activity,
    Endpoints,
    EventObject,
    ImageObject,
    NoteObject,
    PersonObject,
    PublicKey,
    Tombstone,
    parse_activity,
)

__all__ = [
    "ACTIVITY_JSON_CONTENT_TYPE",
    "ACTIVITYPUB_CONTEXTS",
    "ACTIVITYSTREAMS_CONTEXT",
    "LD_JSON_CONTENT_TYPE",
    "PUBLIC_COLLECTION",
    "W3ID_SECURITY_CONTEXT",
    "Activity",
    "ActivityType",
    "Endpoints",
    "EventAttendanceMode",
    "EventObject",
    "EventStatus",
    "ImageObject",
    "NoteObject",
    "ObjectType",
    "PersonObject",
    "PublicKey",
    "Tombstone",
    "parse_activity",
]
