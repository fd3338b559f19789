"""
Realtime websocket channel: event envelopes and client fan-out
"""

from .broadcaster import Broadcaster
from .events import (
    ADD_POST,
    ERROR,
    GET_POSTS,
    UPDATE_POSTS,
    MalformedMessageError,
    make_error,
    make_event,
    parse_client_message,
    post_payload,
    resolve_post_image,
)

__all__ = [
    "Broadcaster",
    "ADD_POST",
    "ERROR",
    "GET_POSTS",
    "UPDATE_POSTS",
    "MalformedMessageError",
    "make_error",
    "make_event",
    "parse_client_message",
    "post_payload",
    "resolve_post_image",
]
