"""
Websocket endpoint for the posts feed.

Clients send ``{"event": "getPosts"}`` to receive a snapshot of all posts and
receive an ``addPost`` event whenever a post is created through GraphQL.
"""

from __future__ import annotations

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from ...config import Settings
from ...logging import clear_request_context, get_logger, set_connection_context
from ...realtime.broadcaster import Broadcaster
from ...realtime.events import (
    GET_POSTS,
    UPDATE_POSTS,
    MalformedMessageError,
    make_error,
    make_event,
    parse_client_message,
    post_payload,
)
from ...store.base import DataStore

logger = get_logger(__name__)


def posts_snapshot(store: DataStore, settings: Settings) -> str:
    posts = [post_payload(record, settings) for record in store.list_posts()]
    return make_event(UPDATE_POSTS, {"posts": posts})


async def handle_message(
    websocket: WebSocket, text: str, store: DataStore, settings: Settings
) -> None:
    """Answer a single client message. Bad messages get an error reply."""
    try:
        message = parse_client_message(text)
    except MalformedMessageError as e:
        logger.warning("Malformed websocket message", error=str(e))
        await websocket.send_text(make_error(str(e)))
        return

    event = message["event"]
    if event == GET_POSTS:
        await websocket.send_text(posts_snapshot(store, settings))
        logger.debug("Sent posts snapshot")
    else:
        logger.warning("Unknown websocket event", ws_event=event)
        await websocket.send_text(make_error(f"Unknown event: {event}"))


def create_websocket_router(
    store: DataStore, settings: Settings, broadcaster: Broadcaster
) -> APIRouter:
    router = APIRouter()

    @router.websocket("/ws")
    async def posts_feed(websocket: WebSocket):  # pyright: ignore [reportUnusedFunction]
        await websocket.accept()
        connection_id = set_connection_context()
        broadcaster.connect(websocket, connection_id)
        logger.info(
            "Websocket client connected",
            remote_addr=websocket.client.host if websocket.client else None,
        )

        try:
            while True:
                message = await websocket.receive()
                if message["type"] == "websocket.disconnect":
                    raise WebSocketDisconnect(message.get("code", 1000))

                text = message.get("text")
                if text is None:
                    # Binary frames carry the same JSON envelope
                    text = (message.get("bytes") or b"").decode("utf-8", errors="replace")
                await handle_message(websocket, text, store, settings)
        except WebSocketDisconnect as e:
            logger.info("Websocket client disconnected", code=e.code)
        except Exception as e:
            logger.error("Websocket handler failed", error=str(e))
        finally:
            broadcaster.disconnect(connection_id)
            clear_request_context()

    return router
