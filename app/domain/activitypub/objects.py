"""Pydantic models describing the ActivityStreams objects we emit.

Optional attributes default to ``None`` and are dropped on serialization, so
an unset field is an absent key rather than a JSON ``null``. Lists are kept
even when empty: an explicit ``cc: []`` and a missing ``cc`` mean different
things to remote servers.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .constants import ActivityType


class ActivityStreamsModel(BaseModel):
    """Base model serializing attribute names in ActivityStreams camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-ready representation without unset attributes."""

        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class ImageObject(ActivityStreamsModel):
    type: Literal["Image"] = "Image"
    url: str


class PublicKey(ActivityStreamsModel):
    id: str
    owner: str
    public_key_pem: str


class Endpoints(ActivityStreamsModel):
    shared_inbox: str


class Tombstone(ActivityStreamsModel):
    type: Literal["Tombstone"] = "Tombstone"
    id: str
    former_type: str
    deleted: str


class EventObject(ActivityStreamsModel):
    type: Literal["Event"] = "Event"
    id: str
    name: str
    start_time: str
    attributed_to: str
    summary: str | None = None
    end_time: str | None = None
    duration: str | None = None
    location: str | None = None
    url: str | None = None
    published: str | None = None
    updated: str | None = None
    event_status: str | None = None
    event_attendance_mode: str | None = None
    maximum_attendee_capacity: int | None = None
    attachment: list[ImageObject] | None = None
    to: list[str] | None = None
    cc: list[str] | None = None


class NoteObject(ActivityStreamsModel):
    type: Literal["Note"] = "Note"
    id: str
    content: str
    attributed_to: str
    in_reply_to: str
    published: str
    to: list[str] | None = None
    cc: list[str] | None = None


class PersonObject(ActivityStreamsModel):
    type: Literal["Person"] = "Person"
    id: str
    preferred_username: str
    name: str
    inbox: str
    outbox: str
    followers: str
    following: str
    public_key: PublicKey
    endpoints: Endpoints
    summary: str | None = None
    display_color: str | None = None
    icon: ImageObject | None = None
    image: ImageObject | None = None


ActivityObject = Annotated[
    Union[Tombstone, EventObject, NoteObject, PersonObject],
    Field(discriminator="type"),
]


class Activity(ActivityStreamsModel):
    """An ActivityStreams activity.

    Unknown attributes sent by remote servers are preserved so that an
    activity parsed from an inbox can be echoed back unchanged. ``@context``
    is kept as received (JSON-LD term definitions included) and stays unset
    when the sender omitted it.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )

    context: str | dict[str, Any] | list[str | dict[str, Any]] | None = Field(
        default=None, alias="@context"
    )
    id: str
    type: ActivityType
    actor: str
    object: Union[str, ActivityObject, "Activity", dict[str, Any]] = Field(
        union_mode="left_to_right"
    )
    to: list[str] | None = None
    cc: list[str] | None = None
    published: str | None = None


Activity.model_rebuild()


def parse_activity(payload: dict[str, Any]) -> Activity:
    """Validate a JSON payload (for example a received Follow) as an ``Activity``."""

    return Activity.model_validate(payload)


__all__ = [
    "Activity",
    "ActivityObject",
    "ActivityStreamsModel",
    "Endpoints",
    "EventObject",
    "ImageObject",
    "NoteObject",
    "PersonObject",
    "PublicKey",
    "Tombstone",
    "parse_activity",
]
