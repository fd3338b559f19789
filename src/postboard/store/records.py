"""Immutable records held by the data store."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserRecord:
    """A user who can author posts and comments."""

    id: int
    name: str
    email: str


@dataclass(frozen=True)
class PostRecord:
    """A post written by a user."""

    id: int
    title: str
    text: str
    author_id: int
    created_at: datetime
    image: str | None = None


@dataclass(frozen=True)
class CommentRecord:
    """A comment on a post."""

    id: int
    text: str
    author_id: int
    post_id: int
    created_at: datetime


def normalize_id(value: object) -> int | None:
    """Normalize an external id (GraphQL ``ID`` string or int) to the store id type.

    Returns None for values that cannot name a stored record, so callers can
    treat them as lookup misses.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        candidate = value.strip()
        if candidate.isdecimal():
            return int(candidate)
    return None
