"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.comment import Comment
from ..types.post import Post


@strawberry.input
class CommentInput:
    """Input for adding a comment to a post."""

    author_id: strawberry.ID
    post_id: strawberry.ID
    text: str


@strawberry.input
class PostInput:
    """Input for adding a post."""

    author_id: strawberry.ID
    title: str
    text: str
    image: str | None = None


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="addComment")
    async def add_comment(self, info: strawberry.Info, comment: CommentInput) -> Comment | None:
        """Add a comment to a post."""
        from ..resolvers.comment import create_comment

        return await create_comment(info, comment)

    @strawberry.mutation(name="addPost")
    async def add_post(self, info: strawberry.Info, post: PostInput) -> Post | None:
        """Add a post and broadcast it to websocket clients."""
        from ..resolvers.post import create_post

        return await create_post(info, post)
