"""Audience addressing helpers for outgoing activities.

``to``/``cc`` lists are built here so every activity follows the same rules:
URLs are deduplicated in first-seen order, and a ``cc`` with no recipients is
``None`` (omitted) rather than an empty list.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from app.domain.activitypub import PUBLIC_COLLECTION


@dataclass(frozen=True)
class Addressing:
    """Recipients of an activity split by ActivityStreams audience field."""

    to: list[str] = field(default_factory=list)
    cc: list[str] = field(default_factory=list)
    bcc: list[str] = field(default_factory=list)

    def recipients(self) -> list[str]:
        """Return every addressed URL once, ``to`` first, then ``cc`` and ``bcc``."""

        return dedupe([*self.to, *self.cc, *self.bcc])

    def is_public(self) -> bool:
        return PUBLIC_COLLECTION in self.to or PUBLIC_COLLECTION in self.cc


def followers_url(actor_url: str) -> str:
    """Return the followers collection URL of ``actor_url``."""

    return f"{actor_url}/followers"


def dedupe(urls: Iterable[str | None]) -> list[str]:
    """Return ``urls`` without blanks or duplicates, preserving order."""

    unique: list[str] = []
    for url in urls:
        if url and url not in unique:
            unique.append(url)
    return unique


def filtered_cc(*candidates: str | None) -> list[str] | None:
    """Return the defined ``candidates`` as a ``cc`` list or ``None`` if none remain."""

    cc = dedupe(candidates)
    return cc or None


def public_cc(is_public: bool, *followers: str | None) -> list[str] | None:
    """Return ``[PUBLIC, *followers]`` for public activities and ``None`` otherwise."""

    if not is_public:
        return None
    return filtered_cc(PUBLIC_COLLECTION, *followers)


def public_addressing(actor_url: str) -> Addressing:
    """Addressing for a public post: the public collection plus followers."""

    return Addressing(to=[PUBLIC_COLLECTION], cc=[followers_url(actor_url)])


def followers_addressing(actor_url: str) -> Addressing:
    """Addressing for a followers-only post."""

    return Addressing(to=[followers_url(actor_url)])


def direct_addressing(actor_urls: Sequence[str]) -> Addressing:
    """Addressing for an activity sent only to ``actor_urls``."""

    return Addressing(to=dedupe(actor_urls))


__all__ = [
    "Addressing",
    "dedupe",
    "direct_addressing",
    "filtered_cc",
    "followers_addressing",
    "followers_url",
    "public_addressing",
    "public_cc",
]
