"""Typed views over Reddit's listing JSON.

Every entity is a frozen snapshot built by ``from_dict``. Fields the
platform adds that are not declared here are dropped; structural keys
that are missing raise ``DecodeError``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, TypeVar

from .errors import DecodeError

T = TypeVar("T")


def _mapping(value: Any, what: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise DecodeError(f"Expected object for {what}, got {type(value).__name__}")
    return value


def _strings(value: Any, what: str) -> Tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise DecodeError(f"Expected array for {what}, got {type(value).__name__}")
    return tuple(value)


def _build(cls, data: Dict[str, Any], what: str):
    """Instantiate a dataclass from the keys it declares, ignoring the rest."""
    names = {f.name for f in fields(cls)}
    try:
        return cls(**{key: value for key, value in data.items() if key in names})
    except TypeError as err:
        raise DecodeError(f"Invalid {what}: {err}") from err


@dataclass(frozen=True)
class Thing(Generic[T]):
    """A ``{"kind": ..., "data": ...}`` wrapper around one listing entry."""

    kind: str
    data: T


@dataclass(frozen=True)
class Listing(Generic[T]):
    children: Tuple[Thing[T], ...] = ()
    after: Optional[str] = None
    before: Optional[str] = None
    dist: Optional[int] = None
    modhash: Optional[str] = None

    @classmethod
    def from_dict(
        cls, payload: Any, decode_child: Callable[[Dict[str, Any]], T], what: str
    ) -> Listing[T]:
        payload = _mapping(payload, f"{what} listing")
        children = payload.get("children")
        if not isinstance(children, list):
            raise DecodeError(f"Missing children list in {what} listing")

        things: List[Thing[T]] = []
        for child in children:
            child = _mapping(child, f"{what} entry")
            if "data" not in child:
                raise DecodeError(f"Missing data in {what} entry")
            things.append(Thing(kind=child.get("kind", ""), data=decode_child(child["data"])))

        return cls(
            children=tuple(things),
            after=payload.get("after"),
            before=payload.get("before"),
            dist=payload.get("dist"),
            modhash=payload.get("modhash"),
        )


def _listing_thing(payload: Any, decode_child: Callable[[Dict[str, Any]], T], what: str):
    payload = _mapping(payload, what)
    if "data" not in payload:
        raise DecodeError(f"Missing data in {what}")
    return payload.get("kind", ""), Listing.from_dict(payload["data"], decode_child, what)


@dataclass(frozen=True)
class SubmissionData:
    """A post in a subreddit feed."""

    id: str
    name: Optional[str] = None
    title: Optional[str] = None
    author: Optional[str] = None
    author_fullname: Optional[str] = None
    subreddit: Optional[str] = None
    subreddit_name_prefixed: Optional[str] = None
    permalink: Optional[str] = None
    url: Optional[str] = None
    domain: Optional[str] = None
    selftext: Optional[str] = None
    thumbnail: Optional[str] = None
    link_flair_text: Optional[str] = None
    score: Optional[int] = None
    ups: Optional[int] = None
    downs: Optional[int] = None
    upvote_ratio: Optional[float] = None
    num_comments: Optional[int] = None
    created: Optional[float] = None
    created_utc: Optional[float] = None
    edited: Any = None
    is_self: Optional[bool] = None
    over_18: Optional[bool] = None
    spoiler: Optional[bool] = None
    stickied: Optional[bool] = None
    locked: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: Any) -> SubmissionData:
        return _build(cls, _mapping(data, "submission"), "submission")


@dataclass(frozen=True)
class Submissions:
    """One page of posts plus its pagination cursors."""

    kind: str
    data: Listing[SubmissionData]

    @classmethod
    def from_dict(cls, payload: Any) -> Submissions:
        kind, listing = _listing_thing(payload, SubmissionData.from_dict, "submissions")
        return cls(kind=kind, data=listing)

    @property
    def posts(self) -> List[SubmissionData]:
        return [child.data for child in self.data.children]

    @property
    def after(self) -> Optional[str]:
        return self.data.after

    @property
    def before(self) -> Optional[str]:
        return self.data.before


@dataclass(frozen=True)
class CommentData:
    """
    A comment, or a "more" placeholder for replies that were not sent.

    ``replies`` holds the nested reply tree exactly as received; the
    platform sends an empty string instead of a listing when there are no
    replies, which decodes to ``None``.
    """

    id: str
    name: Optional[str] = None
    author: Optional[str] = None
    author_fullname: Optional[str] = None
    body: Optional[str] = None
    body_html: Optional[str] = None
    subreddit: Optional[str] = None
    link_id: Optional[str] = None
    link_title: Optional[str] = None
    link_permalink: Optional[str] = None
    parent_id: Optional[str] = None
    permalink: Optional[str] = None
    distinguished: Optional[str] = None
    score: Optional[int] = None
    ups: Optional[int] = None
    downs: Optional[int] = None
    controversiality: Optional[int] = None
    depth: Optional[int] = None
    created: Optional[float] = None
    created_utc: Optional[float] = None
    edited: Any = None
    is_submitter: Optional[bool] = None
    score_hidden: Optional[bool] = None
    stickied: Optional[bool] = None
    # "more" placeholders only
    count: Optional[int] = None
    children: Tuple[str, ...] = ()
    replies: Optional[SubredditComments] = None

    @classmethod
    def from_dict(cls, data: Any) -> CommentData:
        data = dict(_mapping(data, "comment"))
        replies = data.pop("replies", None)
        data["replies"] = SubredditComments.from_dict(replies) if replies else None
        if "children" in data:
            data["children"] = _strings(data["children"], "comment children")
        return _build(cls, data, "comment")

    @property
    def article_id(self) -> Optional[str]:
        """Id of the submission this comment belongs to, without the ``t3_`` prefix."""
        if self.link_id is None:
            return None
        return self.link_id[3:] if self.link_id.startswith("t3_") else self.link_id


@dataclass(frozen=True)
class SubredditComments:
    """A page of comments, either subreddit-wide or under one submission."""

    kind: str
    data: Listing[CommentData]

    @classmethod
    def from_dict(cls, payload: Any) -> SubredditComments:
        kind, listing = _listing_thing(payload, CommentData.from_dict, "comments")
        return cls(kind=kind, data=listing)

    @property
    def comments(self) -> List[CommentData]:
        return [child.data for child in self.data.children]

    @property
    def after(self) -> Optional[str]:
        return self.data.after

    @property
    def before(self) -> Optional[str]:
        return self.data.before


@dataclass(frozen=True)
class ModeratorData:
    name: str
    id: Optional[str] = None
    rel_id: Optional[str] = None
    date: Optional[float] = None
    author_flair_text: Optional[str] = None
    author_flair_css_class: Optional[str] = None
    mod_permissions: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> ModeratorData:
        data = dict(_mapping(data, "moderator"))
        if "mod_permissions" in data:
            data["mod_permissions"] = _strings(data["mod_permissions"], "moderator permissions")
        return _build(cls, data, "moderator")


@dataclass(frozen=True)
class ModeratorList:
    children: Tuple[ModeratorData, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Moderators:
    """Moderators of a subreddit (``UserList``)."""

    kind: str
    data: ModeratorList

    @classmethod
    def from_dict(cls, payload: Any) -> Moderators:
        payload = _mapping(payload, "moderators")
        data = _mapping(payload.get("data"), "moderators data")
        children = data.get("children")
        if not isinstance(children, list):
            raise DecodeError("Missing children list in moderators")

        moderators = tuple(ModeratorData.from_dict(child) for child in children)
        return cls(kind=payload.get("kind", ""), data=ModeratorList(children=moderators))

    @property
    def names(self) -> List[str]:
        return [moderator.name for moderator in self.data.children]
