from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...store.records import normalize_id
from ..context import get_settings, get_store
from ..types.comment import Comment

if TYPE_CHECKING:
    from ..mutations.root import CommentInput
    from ..types.post import Post
    from ..types.user import User

logger = get_logger(__name__)


async def resolve_comments(info: strawberry.Info, post_id: str | int) -> list[Comment]:
    normalized = normalize_id(post_id)
    if normalized is None:
        return []

    return [Comment.from_record(r) for r in get_store(info).comments_for_post(normalized)]


async def resolve_comment_post(comment: Comment, info: strawberry.Info) -> Post | None:
    from .post import resolve_post_by_id

    post = await resolve_post_by_id(info, comment.post_id)
    if post is None:
        logger.warning(
            "Comment refers to a missing post", comment_id=comment.id, post_id=comment.post_id
        )
    return post


async def resolve_comment_author(comment: Comment, info: strawberry.Info) -> User | None:
    """Resolve the comment's author.

    With ``comment_author_from_post`` enabled the author is inherited from the
    parent post instead of the comment's own author id.
    """
    from .user import resolve_user_by_id

    if get_settings(info).comment_author_from_post:
        post = get_store(info).get_post(comment.post_id)
        if post is None:
            return None
        return await resolve_user_by_id(info, post.author_id)

    return await resolve_user_by_id(info, comment.author_id)


async def create_comment(info: strawberry.Info, input: CommentInput) -> Comment | None:
    """Append a new comment and return it resolved like any other comment."""
    author_id = normalize_id(input.author_id)
    if author_id is None:
        raise ValueError(f"Invalid authorId: {input.author_id!r}")
    post_id = normalize_id(input.post_id)
    if post_id is None:
        raise ValueError(f"Invalid postId: {input.post_id!r}")

    record = get_store(info).create_comment(text=input.text, author_id=author_id, post_id=post_id)
    logger.info("Comment created", comment_id=record.id, post_id=post_id, author_id=author_id)

    comments = await resolve_comments(info, post_id)
    return next((c for c in comments if c.id == str(record.id)), None)
