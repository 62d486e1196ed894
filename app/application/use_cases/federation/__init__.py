"""Use cases producing federated ActivityPub data."""

from ..validators import MissingFieldError, require
from .activity_builder import ActivityBuilder, get_activity_builder, new_activity_id
from .addressing import (
    Addressing,
    dedupe,
    direct_addressing,
    filtered_cc,
    followers_addressing,
    followers_url,
    public_addressing,
    public_cc,
)

__all__ = [
    "ActivityBuilder",
    "Addressing",
    "MissingFieldError",
    "dedupe",
    "direct_addressing",
    "filtered_cc",
    "followers_addressing",
    "followers_url",
    "get_activity_builder",
    "new_activity_id",
    "public_addressing",
    "public_cc",
    "require",
]
