"""Domain entity representing a comment posted on an event."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .event import Event
from .user import User


@dataclass
class Comment:
    """A comment, optionally replying to another comment on the same event."""

    id: str
    content: str
    author_id: str
    event_id: str
    author: User | None
    event: Event | None
    created_at: datetime
    in_reply_to_id: str | None = None
    external_id: str | None = None

    @property
    def is_reply(self) -> bool:
        return self.in_reply_to_id is not None


__all__ = ["Comment"]
