"""Domain entity representing a local or remote actor."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class User:
    """Core attributes describing a platform user.

    Remote users are cached copies of actors living on other instances; their
    federation identity is ``external_actor_url`` instead of a local path.
    """

    id: str
    username: str | None
    name: str | None = None
    profile_image: str | None = None
    header_image: str | None = None
    bio: str | None = None
    display_color: str | None = None
    public_key: str | None = None
    is_remote: bool = False
    external_actor_url: str | None = None
    inbox_url: str | None = None
    shared_inbox_url: str | None = None

    @property
    def display_name(self) -> str | None:
        """Return ``name`` falling back to ``username`` when it is blank."""

        return self.name or self.username

    def preferred_inbox(self) -> str | None:
        """Return the shared inbox when advertised, else the personal inbox."""

        return self.shared_inbox_url or self.inbox_url


__all__ = ["User"]
