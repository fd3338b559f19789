"""
Comment GraphQL type definitions
"""

from datetime import datetime
from typing import TYPE_CHECKING, Annotated

import strawberry

from ...store.records import CommentRecord
from .common import TextWithCreatedAt

if TYPE_CHECKING:
    from .post import Post
    from .user import User


@strawberry.type
class Comment(TextWithCreatedAt):
    """Comment type for GraphQL API."""

    id: strawberry.ID
    text: str
    created_at: datetime
    author_id: strawberry.Private[int]
    post_id: strawberry.Private[int]

    @strawberry.field
    async def author(
        self, info: strawberry.Info
    ) -> Annotated["User", strawberry.lazy(".user")] | None:
        """Get the author of this comment."""
        from ..resolvers.comment import resolve_comment_author

        return await resolve_comment_author(self, info)

    @strawberry.field
    async def post(self, info: strawberry.Info) -> Annotated["Post", strawberry.lazy(".post")]:
        """Get the post this comment belongs to."""
        from ..resolvers.comment import resolve_comment_post

        return await resolve_comment_post(self, info)

    @classmethod
    def from_record(cls, record: CommentRecord) -> "Comment":
        return cls(
            id=strawberry.ID(str(record.id)),
            text=record.text,
            created_at=record.created_at,
            author_id=record.author_id,
            post_id=record.post_id,
        )
