"""In-memory data store implementation."""

import threading
from collections.abc import Iterable

from ..logging import get_logger
from .base import DataStore, IdSequence, StoreException
from .records import CommentRecord, PostRecord, UserRecord

logger = get_logger(__name__)


class InMemoryStore(DataStore):
    """Data store keeping all three collections in process memory."""

    def __init__(
        self,
        users: Iterable[UserRecord] = (),
        posts: Iterable[PostRecord] = (),
        comments: Iterable[CommentRecord] = (),
    ):
        self._users = list(users)
        self._posts = list(posts)
        self._comments = list(comments)
        self._lock = threading.Lock()

        for name, records in (
            ("user", self._users),
            ("post", self._posts),
            ("comment", self._comments),
        ):
            ids = [r.id for r in records]
            if len(ids) != len(set(ids)):
                raise StoreException(f"Duplicate {name} ids in initial data")

        self._post_ids = IdSequence.after(p.id for p in self._posts)
        self._comment_ids = IdSequence.after(c.id for c in self._comments)

        logger.debug(
            "In-memory store initialized",
            users=len(self._users),
            posts=len(self._posts),
            comments=len(self._comments),
        )

    def list_users(self) -> list[UserRecord]:
        return list(self._users)

    def list_posts(self) -> list[PostRecord]:
        return list(self._posts)

    def list_comments(self) -> list[CommentRecord]:
        return list(self._comments)

    def append(self, record: PostRecord | CommentRecord) -> None:
        if isinstance(record, PostRecord):
            collection, sequence = self._posts, self._post_ids
        elif isinstance(record, CommentRecord):
            collection, sequence = self._comments, self._comment_ids
        else:
            raise TypeError(f"Cannot append {type(record).__name__} to the store")

        with self._lock:
            if any(existing.id == record.id for existing in collection):
                raise StoreException(
                    f"{type(record).__name__} with id {record.id} already exists"
                )
            collection.append(record)
            sequence.observe(record.id)

        logger.debug("Record appended", record_type=type(record).__name__, id=record.id)

    def next_post_id(self) -> int:
        return self._post_ids.next()

    def next_comment_id(self) -> int:
        return self._comment_ids.next()
