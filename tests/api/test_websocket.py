"""
Integration tests for the websocket posts feed
"""

import pytest
from fastapi.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

from postboard.api.app import create_app

pytestmark = pytest.mark.integration

ADD_POST = {
    "query": "mutation ($post: PostInput!) { addPost(post: $post) { id } }",
    "variables": {"post": {"authorId": "2", "title": "Broadcast me", "text": "hello"}},
}


def test_get_posts_returns_snapshot(client, store):
    with client.websocket_connect("/ws") as ws:
        ws.send_json({"event": "getPosts"})
        message = ws.receive_json()

    assert message["event"] == "updatePosts"
    posts = message["data"]["posts"]
    assert len(posts) == len(store.list_posts())
    assert posts[0]["id"] == "1"
    assert posts[0]["image"] == "https://picsum.photos/600/400"


def test_malformed_message_gets_error_reply_and_connection_survives(client):
    with client.websocket_connect("/ws") as ws:
        ws.send_text("this is not json")
        error = ws.receive_json()

        ws.send_json({"event": "getPosts"})
        reply = ws.receive_json()

    assert error["event"] == "error"
    assert "JSON" in error["data"]["message"]
    assert reply["event"] == "updatePosts"


def test_unknown_event_gets_error_reply(client):
    with client.websocket_connect("/ws") as ws:
        ws.send_json({"event": "deletePosts"})
        error = ws.receive_json()

    assert error == {"event": "error", "data": {"message": "Unknown event: deletePosts"}}


def test_add_post_is_broadcast_to_all_clients(client):
    with client.websocket_connect("/ws") as first, client.websocket_connect("/ws") as second:
        # Round-trip once so both connections are registered before the mutation
        for ws in (first, second):
            ws.send_json({"event": "getPosts"})
            ws.receive_json()

        response = client.post("/graphql", json=ADD_POST)
        new_id = response.json()["data"]["addPost"]["id"]

        for ws in (first, second):
            message = ws.receive_json()
            assert message["event"] == "addPost"
            assert message["data"]["newPost"]["id"] == new_id
            assert message["data"]["newPost"]["title"] == "Broadcast me"


def test_snapshot_includes_new_posts(client):
    client.post("/graphql", json=ADD_POST)

    with client.websocket_connect("/ws") as ws:
        ws.send_json({"event": "getPosts"})
        message = ws.receive_json()

    assert len(message["data"]["posts"]) == 4


def test_disconnected_client_is_unregistered(client):
    with client.websocket_connect("/ws") as ws:
        ws.send_json({"event": "getPosts"})
        ws.receive_json()
        assert client.app.state.broadcaster.client_count == 1

    # The mutation still succeeds once the client is gone
    response = client.post("/graphql", json=ADD_POST)
    assert "errors" not in response.json()


def test_websocket_can_be_disabled(test_settings, store):
    settings = test_settings.model_copy(update={"websocket_enabled": False})
    app = create_app(settings, store)

    with TestClient(app) as client:
        with pytest.raises(WebSocketDisconnect):
            with client.websocket_connect("/ws"):
                pass

        # GraphQL keeps working without the websocket channel
        response = client.post("/graphql", json=ADD_POST)
        assert response.json()["data"]["addPost"]["id"] == "4"
