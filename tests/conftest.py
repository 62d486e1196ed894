"""Shared fixtures for the federation and notification tests."""

from __future__ import annotations

import sys
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Ensure the project root (which contains the ``app`` package) is importable
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from app.application.use_cases.federation import ActivityBuilder
from app.config import reset_settings_cache
from app.domain.activitypub import EventAttendanceMode, EventStatus
from app.domain.entities import Comment, Event, Notification, User

BASE_URL = "https://constellate.example"
CREATED_AT = datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)
UPDATED_AT = datetime(2024, 5, 2, 12, 30, tzinfo=timezone.utc)
START_TIME = datetime(2024, 6, 1, 18, 0, tzinfo=timezone.utc)

NotificationFactory = Callable[..., Notification]


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Make every test read settings from its own environment."""

    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture()
def builder() -> ActivityBuilder:
    return ActivityBuilder(BASE_URL)


@pytest.fixture()
def alice() -> User:
    return User(id="user-alice", username="alice", name="Alice", public_key="PEM-ALICE")


@pytest.fixture()
def remote_bob() -> User:
    return User(
        id="user-bob",
        username="bob@remote.example",
        is_remote=True,
        external_actor_url="https://remote.example/users/bob",
        inbox_url="https://remote.example/users/bob/inbox",
        shared_inbox_url="https://remote.example/inbox",
    )


@pytest.fixture()
def minimal_event(alice: User) -> Event:
    """An event with every optional attribute unset."""

    return Event(
        id="event-1",
        title="Picnic",
        start_time=START_TIME,
        user=alice,
        created_at=CREATED_AT,
        updated_at=UPDATED_AT,
    )


@pytest.fixture()
def full_event(alice: User) -> Event:
    return Event(
        id="event-2",
        title="Concert",
        start_time=START_TIME,
        user=alice,
        created_at=CREATED_AT,
        updated_at=UPDATED_AT,
        summary="Live music in the park",
        location="Central Park",
        header_image="https://cdn.example/concert.png",
        url="https://concert.example",
        end_time=datetime(2024, 6, 1, 22, 0, tzinfo=timezone.utc),
        duration="PT4H",
        event_status=EventStatus.SCHEDULED.value,
        event_attendance_mode=EventAttendanceMode.OFFLINE.value,
        maximum_attendee_capacity=150,
    )


@pytest.fixture()
def comment(alice: User, minimal_event: Event) -> Comment:
    return Comment(
        id="comment-1",
        content="See you there!",
        author_id=alice.id,
        event_id=minimal_event.id,
        author=alice,
        event=minimal_event,
        created_at=CREATED_AT,
    )


@pytest.fixture()
def make_notification() -> NotificationFactory:
    """Return a factory building notifications with sensible defaults."""

    def _make(notification_id: str, read: bool = False, **overrides) -> Notification:
        values = {
            "id": notification_id,
            "type": "FOLLOW",
            "title": f"Notification {notification_id}",
            "read": read,
            "read_at": CREATED_AT if read else None,
            "created_at": CREATED_AT,
            "updated_at": CREATED_AT,
        }
        values.update(overrides)
        return Notification(**values)

    return _make
