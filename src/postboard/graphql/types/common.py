"""
Shared GraphQL interfaces
"""

from datetime import datetime

import strawberry


@strawberry.interface
class TextWithCreatedAt:
    """Anything carrying user-written text and a creation time."""

    text: str
    created_at: datetime
