"""Construction of the ActivityPub activities sent to remote instances.

Every builder is a pure function of its arguments and the instance base URL:
nothing is persisted or delivered here. The returned :class:`Activity` is
handed to the delivery layer, which serializes it with
:func:`app.infrastructure.federation.serialize_activity`.
"""

from __future__ import annotations

import logging
from typing import Any
from uuid import uuid4

from app.config import get_settings
from app.domain.activitypub import (
    ACTIVITYPUB_CONTEXTS,
    PUBLIC_COLLECTION,
    Activity,
    ActivityType,
    Endpoints,
    EventObject,
    ImageObject,
    NoteObject,
    ObjectType,
    PersonObject,
    PublicKey,
    Tombstone,
)
from app.domain.entities import Comment, Event, User
from app.utils import isoformat_or_none, isoformat_utc, utc_now

from ..validators import require
from .addressing import dedupe, filtered_cc, followers_url, public_cc

logger = logging.getLogger(__name__)


def new_activity_id(actor_url: str, verb: str, *, subject: str | None = None) -> str:
    """Return a fresh id such as ``<actor>/activities/<subject>/like-<uuid4>``.

    Ids embed a random UUID4, so two calls within the same millisecond still
    produce different values without any shared counter.
    """

    token = f"{verb}-{uuid4()}"
    if subject:
        return f"{actor_url}/activities/{subject}/{token}"
    return f"{actor_url}/activities/{token}"


def _last_path_segment(url: str) -> str:
    return url.rstrip("/").rsplit("/", 1)[-1] or "unknown"


def _activity(**fields: Any) -> Activity:
    """Return an activity created by this instance, carrying its JSON-LD contexts."""

    return Activity(context=list(ACTIVITYPUB_CONTEXTS), **fields)


class ActivityBuilder:
    """Build ActivityStreams activities for the instance served at ``base_url``."""

    def __init__(self, base_url: str) -> None:
        normalized = (base_url or "").strip().rstrip("/")
        if not normalized:
            raise ValueError("base_url is required to build federated URLs")
        self._base_url = normalized

    @property
    def base_url(self) -> str:
        return self._base_url

    # URL helpers -----------------------------------------------------------------

    def actor_url(self, user: User) -> str:
        """Return the federation identity of ``user``."""

        if user.is_remote and user.external_actor_url:
            return user.external_actor_url
        username = require(user.username, entity="User", field="username")
        return f"{self._base_url}/users/{username}"

    def event_url(self, event_id: str) -> str:
        return f"{self._base_url}/events/{event_id}"

    def comment_url(self, comment_id: str) -> str:
        return f"{self._base_url}/comments/{comment_id}"

    # Events ----------------------------------------------------------------------

    def build_create_event_activity(self, event: Event, acting_user_id: str) -> Activity:
        """Announce a newly created event to the public and the organizer's followers."""

        organizer = require(event.user, entity="Event", field="user")
        actor = self.actor_url(organizer)
        followers = followers_url(actor)
        published = isoformat_utc(event.created_at)

        activity = _activity(
            id=f"{actor}/activities/{event.id}/create",
            type=ActivityType.CREATE,
            actor=actor,
            published=published,
            to=[PUBLIC_COLLECTION],
            cc=[followers],
            object=self._event_object(event, actor, followers, published=published),
        )
        return self._built(activity, acting_user_id=acting_user_id)

    def build_update_event_activity(self, event: Event, acting_user_id: str) -> Activity:
        """Propagate edits of ``event``; every call yields a new activity id."""

        organizer = require(event.user, entity="Event", field="user")
        actor = self.actor_url(organizer)
        followers = followers_url(actor)

        activity = _activity(
            id=new_activity_id(actor, "update", subject=event.id),
            type=ActivityType.UPDATE,
            actor=actor,
            published=isoformat_utc(utc_now()),
            to=[PUBLIC_COLLECTION],
            cc=[followers],
            object=self._event_object(
                event, actor, followers, updated=isoformat_utc(event.updated_at)
            ),
        )
        return self._built(activity, acting_user_id=acting_user_id)

    def build_delete_event_activity(self, event_id: str, user: User) -> Activity:
        """Replace the event with a Tombstone on remote servers."""

        actor = self.actor_url(user)
        deleted = isoformat_utc(utc_now())

        activity = _activity(
            id=f"{actor}/activities/{event_id}/delete",
            type=ActivityType.DELETE,
            actor=actor,
            published=deleted,
            to=[PUBLIC_COLLECTION],
            cc=[followers_url(actor)],
            object=Tombstone(
                id=self.event_url(event_id),
                former_type=ObjectType.EVENT.value,
                deleted=deleted,
            ),
        )
        return self._built(activity)

    def _event_object(
        self,
        event: Event,
        actor: str,
        followers: str,
        *,
        published: str | None = None,
        updated: str | None = None,
    ) -> EventObject:
        attachment = (
            [ImageObject(url=event.header_image)] if event.header_image else None
        )
        return EventObject(
            id=self.event_url(event.id),
            name=event.title,
            start_time=isoformat_utc(event.start_time),
            attributed_to=actor,
            summary=event.summary or None,
            end_time=isoformat_or_none(event.end_time),
            duration=event.duration or None,
            location=event.location or None,
            url=event.url or None,
            published=published,
            updated=updated,
            event_status=event.event_status or None,
            event_attendance_mode=event.event_attendance_mode or None,
            maximum_attendee_capacity=event.maximum_attendee_capacity,
            attachment=attachment,
            to=[PUBLIC_COLLECTION],
            cc=[followers],
        )

    # Follow relationships ----------------------------------------------------------

    def build_follow_activity(self, user: User, target_actor_url: str) -> Activity:
        actor = self.actor_url(user)
        activity = _activity(
            id=new_activity_id(actor, "follow"),
            type=ActivityType.FOLLOW,
            actor=actor,
            object=target_actor_url,
            published=isoformat_utc(utc_now()),
        )
        return self._built(activity)

    def build_accept_activity(self, user: User, follow: Activity | str) -> Activity:
        """Accept a follow request.

        ``follow`` is echoed exactly as the remote server sent it: the full
        Follow activity when it was received as an object, its id otherwise.
        """

        actor = self.actor_url(user)
        activity = _activity(
            id=new_activity_id(actor, "accept"),
            type=ActivityType.ACCEPT,
            actor=actor,
            object=follow,
            published=isoformat_utc(utc_now()),
        )
        return self._built(activity)

    def build_reject_follow_activity(self, user: User, follow: Activity | str) -> Activity:
        """Decline a follow request, echoing ``follow`` like :meth:`build_accept_activity`."""

        actor = self.actor_url(user)
        activity = _activity(
            id=new_activity_id(actor, "reject"),
            type=ActivityType.REJECT,
            actor=actor,
            object=follow,
            published=isoformat_utc(utc_now()),
        )
        return self._built(activity)

    # Likes and undo ------------------------------------------------------------------

    def build_like_activity(
        self,
        user: User,
        event_url: str,
        event_author_url: str,
        event_author_followers_url: str | None = None,
        is_public: bool = True,
    ) -> Activity:
        actor = self.actor_url(user)
        activity = _activity(
            id=new_activity_id(actor, "like", subject=_last_path_segment(event_url)),
            type=ActivityType.LIKE,
            actor=actor,
            object=event_url,
            to=[event_author_url],
            cc=public_cc(is_public, event_author_followers_url),
            published=isoformat_utc(utc_now()),
        )
        return self._built(activity)

    def build_undo_activity(self, user: User, original_activity: Activity) -> Activity:
        """Retract ``original_activity``.

        The Undo reaches exactly the audience of the original: ``to`` and
        ``cc`` are copied from it unchanged, including an omitted ``cc``.
        """

        actor = self.actor_url(user)
        activity = _activity(
            id=new_activity_id(actor, "undo"),
            type=ActivityType.UNDO,
            actor=actor,
            object=original_activity,
            to=original_activity.to,
            cc=original_activity.cc,
            published=isoformat_utc(utc_now()),
        )
        return self._built(activity)

    # Attendance ----------------------------------------------------------------------

    def build_attending_activity(
        self,
        user: User,
        event_url: str,
        event_author_url: str,
        event_author_followers_url: str | None = None,
        user_followers_url: str | None = None,
        is_public: bool = True,
    ) -> Activity:
        """RSVP "attending", expressed as an Accept of the event."""

        return self._attendance_activity(
            ActivityType.ACCEPT,
            "accept",
            user,
            event_url,
            event_author_url,
            cc=public_cc(is_public, event_author_followers_url, user_followers_url),
        )

    def build_not_attending_activity(
        self,
        user: User,
        event_url: str,
        event_author_url: str,
        event_author_followers_url: str | None = None,
        user_followers_url: str | None = None,
        is_public: bool = True,
    ) -> Activity:
        return self._attendance_activity(
            ActivityType.REJECT,
            "reject",
            user,
            event_url,
            event_author_url,
            cc=public_cc(is_public, event_author_followers_url, user_followers_url),
        )

    def build_maybe_attending_activity(
        self,
        user: User,
        event_url: str,
        event_author_url: str,
        event_author_followers_url: str | None = None,
        user_followers_url: str | None = None,
        is_public: bool = True,
    ) -> Activity:
        return self._attendance_activity(
            ActivityType.TENTATIVE_ACCEPT,
            "tentative-accept",
            user,
            event_url,
            event_author_url,
            cc=public_cc(is_public, event_author_followers_url, user_followers_url),
        )

    def _attendance_activity(
        self,
        activity_type: ActivityType,
        verb: str,
        user: User,
        event_url: str,
        event_author_url: str,
        *,
        cc: list[str] | None,
    ) -> Activity:
        actor = self.actor_url(user)
        activity = _activity(
            id=new_activity_id(actor, verb, subject=_last_path_segment(event_url)),
            type=activity_type,
            actor=actor,
            object=event_url,
            to=[event_author_url],
            cc=cc,
            published=isoformat_utc(utc_now()),
        )
        return self._built(activity)

    # Comments ----------------------------------------------------------------------

    def build_create_comment_activity(
        self,
        comment: Comment,
        event_author_url: str,
        event_followers_url: str | None = None,
        parent_comment_author_url: str | None = None,
        is_public: bool = True,
    ) -> Activity:
        """Publish ``comment`` as a Note replying to its event or parent comment."""

        author = require(comment.author, entity="Comment", field="author")
        actor = self.actor_url(author)
        to, cc = self._comment_audience(
            event_author_url, event_followers_url, parent_comment_author_url, is_public
        )
        published = isoformat_utc(comment.created_at)

        if comment.is_reply:
            in_reply_to = self.comment_url(comment.in_reply_to_id)
        else:
            in_reply_to = self._comment_event_url(comment)

        activity = _activity(
            id=f"{actor}/activities/comment-{comment.id}",
            type=ActivityType.CREATE,
            actor=actor,
            published=published,
            to=to,
            cc=cc,
            object=NoteObject(
                id=self.comment_url(comment.id),
                content=comment.content,
                attributed_to=actor,
                in_reply_to=in_reply_to,
                published=published,
                to=to,
                cc=cc,
            ),
        )
        return self._built(activity)

    def build_delete_comment_activity(
        self,
        comment: Comment,
        event_author_url: str,
        event_followers_url: str | None = None,
        parent_comment_author_url: str | None = None,
        is_public: bool = True,
    ) -> Activity:
        """Retract ``comment``, addressed to the same audience as its Create."""

        author = require(comment.author, entity="Comment", field="author")
        actor = self.actor_url(author)
        to, cc = self._comment_audience(
            event_author_url, event_followers_url, parent_comment_author_url, is_public
        )
        deleted = isoformat_utc(utc_now())

        activity = _activity(
            id=f"{actor}/activities/comment-{comment.id}/delete",
            type=ActivityType.DELETE,
            actor=actor,
            published=deleted,
            to=to,
            cc=cc,
            object=Tombstone(
                id=comment.external_id or self.comment_url(comment.id),
                former_type=ObjectType.NOTE.value,
                deleted=deleted,
            ),
        )
        return self._built(activity)

    def _comment_event_url(self, comment: Comment) -> str:
        if comment.event is not None and comment.event.external_id:
            return comment.event.external_id
        return self.event_url(comment.event_id)

    @staticmethod
    def _comment_audience(
        event_author_url: str,
        event_followers_url: str | None,
        parent_comment_author_url: str | None,
        is_public: bool,
    ) -> tuple[list[str], list[str] | None]:
        to = dedupe([event_author_url, parent_comment_author_url])
        cc = filtered_cc(PUBLIC_COLLECTION if is_public else None, event_followers_url)
        return to, cc

    # Profiles ----------------------------------------------------------------------

    def build_update_profile_activity(self, user: User) -> Activity:
        """Push the full actor document of ``user`` after a profile change."""

        actor = self.actor_url(user)
        username = require(user.username, entity="User", field="username")
        public_key_pem = require(user.public_key, entity="User", field="public_key")
        followers = followers_url(actor)

        person = PersonObject(
            id=actor,
            preferred_username=username,
            name=user.display_name or username,
            summary=user.bio or None,
            display_color=user.display_color or None,
            icon=ImageObject(url=user.profile_image) if user.profile_image else None,
            image=ImageObject(url=user.header_image) if user.header_image else None,
            inbox=f"{actor}/inbox",
            outbox=f"{actor}/outbox",
            followers=followers,
            following=f"{actor}/following",
            public_key=PublicKey(
                id=f"{actor}#main-key",
                owner=actor,
                public_key_pem=public_key_pem,
            ),
            endpoints=Endpoints(shared_inbox=f"{self._base_url}/inbox"),
        )
        activity = _activity(
            id=new_activity_id(actor, "update"),
            type=ActivityType.UPDATE,
            actor=actor,
            published=isoformat_utc(utc_now()),
            to=[PUBLIC_COLLECTION],
            cc=[followers],
            object=person,
        )
        return self._built(activity)

    @staticmethod
    def _built(activity: Activity, *, acting_user_id: str | None = None) -> Activity:
        if acting_user_id is not None:
            logger.debug(
                "Built %s activity %s on behalf of user %s",
                activity.type.value,
                activity.id,
                acting_user_id,
            )
        else:
            logger.debug("Built %s activity %s", activity.type.value, activity.id)
        return activity


def get_activity_builder() -> ActivityBuilder:
    """Return a builder bound to the configured instance base URL."""

    return ActivityBuilder(get_settings().base_url)


__all__ = ["ActivityBuilder", "get_activity_builder", "new_activity_id"]
