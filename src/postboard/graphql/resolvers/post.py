from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...realtime.events import ADD_POST, make_event, post_payload
from ...realtime.events import resolve_post_image as default_post_image
from ...store.records import normalize_id
from ..context import get_broadcaster, get_settings, get_store
from ..types.post import Post

if TYPE_CHECKING:
    from ..mutations.root import PostInput
    from ..types.comment import Comment
    from ..types.user import User

logger = get_logger(__name__)


async def resolve_post_by_id(info: strawberry.Info, id: str | int) -> Post | None:
    post_id = normalize_id(id)
    if post_id is None:
        logger.debug("Non-numeric post id requested", id=id)
        return None

    record = get_store(info).get_post(post_id)
    if record is None:
        return None
    return Post.from_record(record)


async def resolve_posts(info: strawberry.Info) -> list[Post]:
    return [Post.from_record(record) for record in get_store(info).list_posts()]


def resolve_post_image(post: Post, info: strawberry.Info) -> str:
    return default_post_image(post.stored_image, get_settings(info))


async def resolve_post_author(post: Post, info: strawberry.Info) -> User | None:
    from .user import resolve_user_by_id

    return await resolve_user_by_id(info, post.author_id)


async def resolve_post_comments(post: Post, info: strawberry.Info) -> list[Comment]:
    from .comment import resolve_comments

    return await resolve_comments(info, post.id)


async def create_post(info: strawberry.Info, input: PostInput) -> Post:
    """Append a new post and notify websocket clients."""
    author_id = normalize_id(input.author_id)
    if author_id is None:
        raise ValueError(f"Invalid authorId: {input.author_id!r}")

    settings = get_settings(info)
    record = get_store(info).create_post(
        title=input.title,
        text=input.text,
        author_id=author_id,
        image=input.image,
    )
    logger.info("Post created", post_id=record.id, author_id=author_id)

    broadcaster = get_broadcaster(info)
    if broadcaster is not None:
        await broadcaster.broadcast(make_event(ADD_POST, {"newPost": post_payload(record, settings)}))

    return Post.from_record(record)
