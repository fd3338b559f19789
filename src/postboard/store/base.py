"""Core data store interface."""

import threading
from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import UTC, datetime

from .records import CommentRecord, PostRecord, UserRecord


class StoreException(Exception):
    """Base exception for data store operations."""

    pass


class SeedDataError(StoreException):
    """Seed data could not be loaded or validated."""

    pass


class IdSequence:
    """Monotonic id generator, independent of collection size.

    Safe to share between threads; every call to ``next`` returns a value
    strictly greater than any previously returned or observed id.
    """

    def __init__(self, start: int = 1):
        self._next = start
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
            return value

    def observe(self, value: int) -> None:
        """Make sure future ids are issued above an externally assigned id."""
        with self._lock:
            if value >= self._next:
                self._next = value + 1

    @classmethod
    def after(cls, ids: Iterable[int]) -> "IdSequence":
        return cls(start=max(ids, default=0) + 1)


class DataStore(ABC):
    """Abstract base class for the users/posts/comments store.

    Implementations own the three collections. Records are append-only; there
    are no update or delete operations. Lookups are linear scans over the
    listing operations.
    """

    @abstractmethod
    def list_users(self) -> list[UserRecord]:
        """Return all users in insertion order."""
        pass

    @abstractmethod
    def list_posts(self) -> list[PostRecord]:
        """Return all posts in insertion order."""
        pass

    @abstractmethod
    def list_comments(self) -> list[CommentRecord]:
        """Return all comments in insertion order."""
        pass

    @abstractmethod
    def append(self, record: PostRecord | CommentRecord) -> None:
        """Append a new post or comment.

        Raises:
            TypeError: If the record is neither a post nor a comment
            StoreException: If a record with the same id already exists
        """
        pass

    @abstractmethod
    def next_post_id(self) -> int:
        pass

    @abstractmethod
    def next_comment_id(self) -> int:
        pass

    def get_user(self, user_id: int) -> UserRecord | None:
        return next((u for u in self.list_users() if u.id == user_id), None)

    def get_post(self, post_id: int) -> PostRecord | None:
        return next((p for p in self.list_posts() if p.id == post_id), None)

    def comments_for_post(self, post_id: int) -> list[CommentRecord]:
        return [c for c in self.list_comments() if c.post_id == post_id]

    def create_post(
        self,
        *,
        title: str,
        text: str,
        author_id: int,
        image: str | None = None,
    ) -> PostRecord:
        """Create a post with the next id and the current UTC time, then append it."""
        record = PostRecord(
            id=self.next_post_id(),
            title=title,
            text=text,
            author_id=author_id,
            image=image,
            created_at=datetime.now(UTC),
        )
        self.append(record)
        return record

    def create_comment(self, *, text: str, author_id: int, post_id: int) -> CommentRecord:
        """Create a comment with the next id and the current UTC time, then append it."""
        record = CommentRecord(
            id=self.next_comment_id(),
            text=text,
            author_id=author_id,
            post_id=post_id,
            created_at=datetime.now(UTC),
        )
        self.append(record)
        return record
