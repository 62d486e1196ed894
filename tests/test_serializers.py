"""Tests for activity delivery helpers and notification payload serialization."""

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone

from app.domain.activitypub import ACTIVITY_JSON_CONTENT_TYPE, PUBLIC_COLLECTION
from app.domain.entities import NotificationActor, NotificationsSnapshot, User
from app.infrastructure.federation import (
    activity_addressing,
    activity_to_json,
    delivery_headers,
    delivery_inboxes,
)
from app.infrastructure.notifications import (
    deserialize_snapshot,
    serialize_notification,
    serialize_snapshot,
)
from app.utils import ensure_utc, isoformat_or_none, isoformat_utc

EVENT_URL = "https://remote.example/events/42"
AUTHOR_URL = "https://remote.example/users/bob"


def test_activity_json_has_no_null_values(builder, alice):
    like = builder.build_like_activity(alice, EVENT_URL, AUTHOR_URL, is_public=False)

    body = activity_to_json(like)

    assert "null" not in body
    assert ", " not in body
    assert json.loads(body)["type"] == "Like"


def test_activity_addressing(builder, alice):
    like = builder.build_like_activity(alice, EVENT_URL, AUTHOR_URL)

    addressing = activity_addressing(like)

    assert addressing.to == [AUTHOR_URL]
    assert addressing.cc == [PUBLIC_COLLECTION]
    assert addressing.is_public()


def test_delivery_headers():
    headers = delivery_headers()

    assert headers["Content-Type"] == ACTIVITY_JSON_CONTENT_TYPE
    assert headers["Accept"].startswith(ACTIVITY_JSON_CONTENT_TYPE)
    assert "application/ld+json" in headers["Accept"]


def test_delivery_inboxes_prefer_shared_inbox(alice, remote_bob):
    """Actors of the same instance share one delivery through its shared inbox."""

    remote_carol = User(
        id="user-carol",
        username="carol@remote.example",
        is_remote=True,
        external_actor_url="https://remote.example/users/carol",
        inbox_url="https://remote.example/users/carol/inbox",
        shared_inbox_url="https://remote.example/inbox",
    )
    remote_dave = User(
        id="user-dave",
        username="dave@other.example",
        is_remote=True,
        inbox_url="https://other.example/users/dave/inbox",
    )

    inboxes = delivery_inboxes([alice, remote_bob, remote_carol, remote_dave])

    assert inboxes == [
        "https://remote.example/inbox",
        "https://other.example/users/dave/inbox",
    ]


def test_serialize_notification_uses_camel_case(make_notification):
    notification = make_notification(
        "a",
        context_url="/events/1",
        actor=NotificationActor(id="user-bob", username="bob", display_color="#fff"),
    )

    payload = serialize_notification(notification)

    assert payload["id"] == "a"
    assert payload["contextUrl"] == "/events/1"
    assert payload["readAt"] is None
    assert payload["createdAt"].startswith("2024-05-01T10:00:00")
    assert payload["actor"]["displayColor"] == "#fff"


def test_snapshot_payload_round_trip(make_notification):
    snapshot = NotificationsSnapshot(
        notifications=(make_notification("a"), make_notification("b", read=True)),
        unread_count=7,
    )

    payload = serialize_snapshot(snapshot)

    assert payload["unreadCount"] == 7
    assert [item["id"] for item in payload["notifications"]] == ["a", "b"]
    assert deserialize_snapshot(payload) == snapshot


def test_deserialize_defaults_updated_at_to_created_at():
    snapshot = deserialize_snapshot(
        {
            "notifications": [
                {
                    "id": "a",
                    "type": "SYSTEM",
                    "title": "Welcome",
                    "read": False,
                    "createdAt": "2024-05-01T10:00:00Z",
                }
            ],
            "unreadCount": 1,
        }
    )

    notification = snapshot.notifications[0]
    assert notification.updated_at == notification.created_at


def test_isoformat_utc_uses_milliseconds_and_z_suffix():
    paris = timezone(timedelta(hours=2))

    assert isoformat_utc(datetime(2024, 1, 1, tzinfo=timezone.utc)) == "2024-01-01T00:00:00.000Z"
    assert isoformat_utc(datetime(2024, 1, 1, 2, 0, tzinfo=paris)) == "2024-01-01T00:00:00.000Z"
    assert isoformat_utc(datetime(2024, 1, 1, 12, 0, 0, 123456)) == "2024-01-01T12:00:00.123Z"
    assert isoformat_or_none(None) is None
    assert ensure_utc(datetime(2024, 1, 1)).tzinfo is timezone.utc
