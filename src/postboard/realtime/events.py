"""Websocket event envelope: ``{"event": <name>, "data": {...}}``."""

import json
from typing import Any

from ..config import Settings
from ..store.records import PostRecord

GET_POSTS = "getPosts"
UPDATE_POSTS = "updatePosts"
ADD_POST = "addPost"
ERROR = "error"


class MalformedMessageError(ValueError):
    """A client message could not be decoded into an event."""

    pass


def make_event(event: str, data: dict[str, Any] | None = None) -> str:
    return json.dumps({"event": event, "data": data or {}})


def make_error(message: str) -> str:
    return make_event(ERROR, {"message": message})


def parse_client_message(text: str) -> dict[str, Any]:
    """Decode a client message.

    Raises:
        MalformedMessageError: If the text is not a JSON object with a string ``event``
    """
    try:
        message = json.loads(text)
    except (json.JSONDecodeError, TypeError) as e:
        raise MalformedMessageError(f"Message is not valid JSON: {e}") from e

    if not isinstance(message, dict):
        raise MalformedMessageError("Message must be a JSON object")

    event = message.get("event")
    if not isinstance(event, str) or not event:
        raise MalformedMessageError("Message is missing an 'event' name")

    return message


def resolve_post_image(image: str | None, settings: Settings) -> str:
    """Stored image URL, or the configured placeholder when the post has none."""
    return image or settings.default_post_image_url


def post_payload(record: PostRecord, settings: Settings) -> dict[str, Any]:
    """JSON-ready representation of a post for websocket clients."""
    return {
        "id": str(record.id),
        "title": record.title,
        "text": record.text,
        "authorId": str(record.author_id),
        "image": resolve_post_image(record.image, settings),
        "createdAt": record.created_at.isoformat(),
    }
