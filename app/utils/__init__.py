"""Utility helpers for reusable functionality."""

from .datetime import ensure_utc, isoformat_or_none, isoformat_utc, utc_now

__all__ = [
    "ensure_utc",
    "isoformat_or_none",
    "isoformat_utc",
    "utc_now",
]
