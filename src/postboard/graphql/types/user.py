"""
User GraphQL type definitions
"""

from enum import Enum

import strawberry

from ...store.records import UserRecord


@strawberry.enum(name="AvatarSizes")
class AvatarSize(Enum):
    """Avatar image sizes in pixels."""

    S_32 = strawberry.enum_value(32, deprecation_reason="Too small. Use S_64 instead")
    S_64 = 64
    S_128 = 128
    S_512 = 512

    @property
    def pixels(self) -> int:
        return int(self.name.removeprefix("S_"))


@strawberry.type(description="User can be the author of a post or comment")
class User:
    """User type for GraphQL API."""

    id: strawberry.ID
    name: str
    email: str

    @strawberry.field(description="Support avatar size selection")
    def avatar(
        self, info: strawberry.Info, size: AvatarSize | None = AvatarSize.S_128
    ) -> str | None:
        from ..resolvers.user import resolve_user_avatar

        return resolve_user_avatar(self, info, size or AvatarSize.S_128)

    @classmethod
    def from_record(cls, record: UserRecord) -> "User":
        return cls(id=strawberry.ID(str(record.id)), name=record.name, email=record.email)
