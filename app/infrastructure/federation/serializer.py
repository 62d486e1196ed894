"""Serialization of outgoing activities for inbox delivery."""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from app.application.use_cases.federation import Addressing, dedupe
from app.domain.activitypub import ACTIVITY_JSON_CONTENT_TYPE, LD_JSON_CONTENT_TYPE, Activity
from app.domain.entities import User


def serialize_activity(activity: Activity) -> dict[str, Any]:
    """Return a JSON-serializable representation of ``activity``.

    Unset optional attributes are omitted entirely; empty lists are kept.
    """

    return activity.to_payload()


def activity_to_json(activity: Activity) -> str:
    """Return the request body used to POST ``activity`` to a remote inbox."""

    return json.dumps(serialize_activity(activity), ensure_ascii=False, separators=(",", ":"))


def activity_addressing(activity: Activity) -> Addressing:
    """Return the audience declared by ``activity``."""

    return Addressing(to=list(activity.to or []), cc=list(activity.cc or []))


def delivery_headers() -> dict[str, str]:
    """Return the headers every activity POST carries before signing."""

    return {
        "Content-Type": ACTIVITY_JSON_CONTENT_TYPE,
        "Accept": f"{ACTIVITY_JSON_CONTENT_TYPE}, {LD_JSON_CONTENT_TYPE}",
    }


def delivery_inboxes(recipients: Iterable[User]) -> list[str]:
    """Return the inboxes an activity addressed to ``recipients`` is POSTed to.

    Remote actors sharing an instance inbox receive a single delivery; local
    users and actors without a known inbox are skipped.
    """

    return dedupe(user.preferred_inbox() for user in recipients if user.is_remote)


__all__ = [
    "activity_addressing",
    "activity_to_json",
    "delivery_headers",
    "delivery_inboxes",
    "serialize_activity",
]
