"""Domain entity describing a scheduled event."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .user import User


@dataclass
class Event:
    """An event organised by ``user``."""

    id: str
    title: str
    start_time: datetime
    user: User | None
    created_at: datetime
    updated_at: datetime
    summary: str | None = None
    location: str | None = None
    header_image: str | None = None
    url: str | None = None
    end_time: datetime | None = None
    duration: str | None = None
    event_status: str | None = None
    event_attendance_mode: str | None = None
    maximum_attendee_capacity: int | None = None
    external_id: str | None = None


__all__ = ["Event"]
