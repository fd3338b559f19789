"""
Postboard
GraphQL API for users, posts and comments with a websocket posts feed
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
