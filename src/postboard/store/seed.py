"""
Seed data for the in-memory store.

The built-in sample data is used unless a JSON seed file is configured. A seed
file has ``users``, ``posts`` and ``comments`` arrays using the same camelCase
field names as the GraphQL API, e.g.::

    {
      "users": [{"id": 1, "name": "Ada", "email": "ada@example.com"}],
      "posts": [{"id": 1, "title": "Hi", "text": "...", "authorId": 1,
                 "createdAt": "2024-01-01T00:00:00Z"}],
      "comments": []
    }
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..logging import get_logger
from .base import SeedDataError
from .memory import InMemoryStore
from .records import CommentRecord, PostRecord, UserRecord

logger = get_logger(__name__)


class _SeedModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class _TimestampedSeed(_SeedModel):
    created_at: datetime = Field(alias="createdAt")

    @field_validator("created_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value


class UserSeed(_SeedModel):
    id: int
    name: str
    email: str


class PostSeed(_TimestampedSeed):
    id: int
    title: str
    text: str
    author_id: int = Field(alias="authorId")
    image: str | None = None


class CommentSeed(_TimestampedSeed):
    id: int
    text: str
    author_id: int = Field(alias="authorId")
    post_id: int = Field(alias="postId")


class SeedData(_SeedModel):
    users: list[UserSeed] = []
    posts: list[PostSeed] = []
    comments: list[CommentSeed] = []

    def to_records(
        self,
    ) -> tuple[list[UserRecord], list[PostRecord], list[CommentRecord]]:
        users = [UserRecord(**u.model_dump()) for u in self.users]
        posts = [PostRecord(**p.model_dump()) for p in self.posts]
        comments = [CommentRecord(**c.model_dump()) for c in self.comments]
        return users, posts, comments


SAMPLE_DATA = SeedData(
    users=[
        UserSeed(id=1, name="Ada Lovelace", email="ada@example.com"),
        UserSeed(id=2, name="Alan Turing", email="alan@example.com"),
        UserSeed(id=3, name="Grace Hopper", email="grace@example.com"),
    ],
    posts=[
        PostSeed(
            id=1,
            title="Notes on the Analytical Engine",
            text="The engine weaves algebraic patterns just as the loom weaves flowers.",
            author_id=1,
            created_at=datetime(2024, 3, 1, 9, 30, tzinfo=UTC),
        ),
        PostSeed(
            id=2,
            title="Can machines think?",
            text="I propose to consider the question of whether machines can think.",
            author_id=2,
            image="https://picsum.photos/id/20/600/400",
            created_at=datetime(2024, 3, 2, 14, 0, tzinfo=UTC),
        ),
        PostSeed(
            id=3,
            title="Found a bug",
            text="First actual case of a bug being found, taped into the logbook.",
            author_id=3,
            created_at=datetime(2024, 3, 3, 18, 45, tzinfo=UTC),
        ),
    ],
    comments=[
        CommentSeed(
            id=1,
            text="Beautifully put.",
            author_id=2,
            post_id=1,
            created_at=datetime(2024, 3, 1, 10, 0, tzinfo=UTC),
        ),
        CommentSeed(
            id=2,
            text="Define 'think' first.",
            author_id=3,
            post_id=2,
            created_at=datetime(2024, 3, 2, 15, 10, tzinfo=UTC),
        ),
        CommentSeed(
            id=3,
            text="The imitation game settles it.",
            author_id=1,
            post_id=2,
            created_at=datetime(2024, 3, 2, 16, 25, tzinfo=UTC),
        ),
    ],
)


def load_seed_data(path: str | Path) -> SeedData:
    """Load and validate a JSON seed file.

    Raises:
        SeedDataError: If the file is missing, not JSON or fails validation
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise SeedDataError(f"Cannot read seed data file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise SeedDataError(f"Seed data file {path} is not valid JSON: {e}") from e

    try:
        return SeedData.model_validate(raw)
    except ValidationError as e:
        raise SeedDataError(f"Seed data file {path} is invalid: {e}") from e


def create_seeded_store(seed_data_path: str | Path | None = None) -> InMemoryStore:
    """Create an in-memory store from a seed file, or from the built-in sample data."""
    if seed_data_path:
        data = load_seed_data(seed_data_path)
        source = str(seed_data_path)
    else:
        data = SAMPLE_DATA
        source = "builtin"

    users, posts, comments = data.to_records()
    store = InMemoryStore(users=users, posts=posts, comments=comments)

    logger.info(
        "Data store seeded",
        source=source,
        users=len(users),
        posts=len(posts),
        comments=len(comments),
    )
    return store
