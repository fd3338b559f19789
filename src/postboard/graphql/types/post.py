"""
Post GraphQL type definitions
"""

from datetime import datetime
from typing import TYPE_CHECKING, Annotated

import strawberry

from ...store.records import PostRecord
from .common import TextWithCreatedAt

if TYPE_CHECKING:
    from .comment import Comment
    from .user import User


@strawberry.type
class Post(TextWithCreatedAt):
    """Post type for GraphQL API."""

    id: strawberry.ID
    title: str
    text: str
    created_at: datetime
    author_id: strawberry.Private[int]
    stored_image: strawberry.Private[str | None]

    @strawberry.field
    def image(self, info: strawberry.Info) -> str | None:
        """Image URL, falling back to a placeholder when the post has none."""
        from ..resolvers.post import resolve_post_image

        return resolve_post_image(self, info)

    @strawberry.field
    async def author(
        self, info: strawberry.Info
    ) -> Annotated["User", strawberry.lazy(".user")] | None:
        """Get the author of this post."""
        from ..resolvers.post import resolve_post_author

        return await resolve_post_author(self, info)

    @strawberry.field
    async def comments(
        self, info: strawberry.Info
    ) -> list[Annotated["Comment", strawberry.lazy(".comment")] | None]:
        """Get comments on this post."""
        from ..resolvers.post import resolve_post_comments

        return await resolve_post_comments(self, info)

    @classmethod
    def from_record(cls, record: PostRecord) -> "Post":
        return cls(
            id=strawberry.ID(str(record.id)),
            title=record.title,
            text=record.text,
            created_at=record.created_at,
            author_id=record.author_id,
            stored_image=record.image,
        )
