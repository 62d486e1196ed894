"""Utility script to print the ActivityPub payload built for a local user."""

from __future__ import annotations

import argparse
import json
import logging

from app.application.use_cases.federation import get_activity_builder
from app.config import get_settings
from app.domain.activitypub import Activity
from app.domain.entities import User
from app.infrastructure.federation import serialize_activity

KINDS = ("follow", "like", "unlike", "attend", "profile")


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the preview."""

    parser = argparse.ArgumentParser(
        description="Print the activity a local user would federate.",
    )
    parser.add_argument("kind", choices=KINDS, help="Kind of activity to build")
    parser.add_argument(
        "--username",
        default="alice",
        help="Username of the local acting user (default: alice)",
    )
    parser.add_argument(
        "--target",
        default="https://remote.example/users/bob",
        help="Remote actor followed, or author of the liked/attended event",
    )
    parser.add_argument(
        "--event-url",
        default="https://remote.example/events/1",
        help="Event liked or attended",
    )
    parser.add_argument(
        "--private",
        action="store_true",
        help="Address the activity without the public collection",
    )
    parser.add_argument(
        "--public-key",
        default=None,
        help="PEM encoded public key, required for the profile activity",
    )
    return parser.parse_args()


def build(args: argparse.Namespace) -> Activity:
    """Return the activity requested on the command line."""

    builder = get_activity_builder()
    user = User(id=args.username, username=args.username, public_key=args.public_key)
    is_public = not args.private

    if args.kind == "follow":
        return builder.build_follow_activity(user, args.target)
    if args.kind == "profile":
        return builder.build_update_profile_activity(user)
    if args.kind == "attend":
        return builder.build_attending_activity(
            user, args.event_url, args.target, is_public=is_public
        )

    like = builder.build_like_activity(
        user, args.event_url, args.target, f"{args.target}/followers", is_public
    )
    if args.kind == "unlike":
        return builder.build_undo_activity(user, like)
    return like


def main() -> None:
    """Build the requested activity and print it as JSON."""

    args = parse_args()
    logging.basicConfig(level=get_settings().log_level.upper())

    try:
        activity = build(args)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    print(json.dumps(serialize_activity(activity), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
