"""Helpers for working with UTC datetimes and ISO-8601 strings."""

from __future__ import annotations

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""

    return datetime.now(tz=timezone.utc)


def ensure_utc(value: datetime | None) -> datetime | None:
    """Normalize ``value`` so it is expressed in UTC.

    Naive datetimes are assumed to already be in UTC, which is how the
    persistence layer stores timestamps.
    """

    if value is None:
        return None

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def isoformat_utc(value: datetime) -> str:
    """Return ``value`` as an ISO-8601 string with millisecond precision.

    The output matches the ``YYYY-MM-DDTHH:MM:SS.sssZ`` shape federated peers
    already receive from the platform.
    """

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    formatted = value.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return formatted.replace("+00:00", "Z")


def isoformat_or_none(value: datetime | None) -> str | None:
    """Return the ISO representation of ``value`` or ``None``."""

    return isoformat_utc(value) if value is not None else None


__all__ = ["ensure_utc", "isoformat_or_none", "isoformat_utc", "utc_now"]
