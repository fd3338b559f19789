from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...store.records import normalize_id
from ..context import get_settings, get_store
from ..types.user import User

if TYPE_CHECKING:
    from ..types.user import AvatarSize

logger = get_logger(__name__)


async def resolve_user_by_id(info: strawberry.Info, id: str | int) -> User | None:
    user_id = normalize_id(id)
    if user_id is None:
        logger.debug("Non-numeric user id requested", id=id)
        return None

    record = get_store(info).get_user(user_id)
    if record is None:
        return None
    return User.from_record(record)


async def resolve_users(info: strawberry.Info) -> list[User]:
    return [User.from_record(record) for record in get_store(info).list_users()]


def resolve_user_avatar(user: User, info: strawberry.Info, size: AvatarSize) -> str:
    base_url = get_settings(info).avatar_base_url.rstrip("/")
    return f"{base_url}/{size.pixels}"
