"""
Shared pytest fixtures and configuration for all tests.
"""

from collections.abc import Generator
from datetime import UTC, datetime
from typing import Any

import pytest
from fastapi.testclient import TestClient

from postboard.api.app import create_app
from postboard.config import Settings
from postboard.graphql.schema import schema
from postboard.realtime.broadcaster import Broadcaster
from postboard.store import InMemoryStore, PostRecord, UserRecord, create_seeded_store


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from any local .env file."""
    return Settings(_env_file=None, environment="test", debug=True)  # type: ignore[call-arg]


@pytest.fixture
def store() -> InMemoryStore:
    """Store seeded with the built-in sample data (3 users, 3 posts, 3 comments)."""
    return create_seeded_store()


@pytest.fixture
def scenario_store() -> InMemoryStore:
    """One user, one post by that user, no comments."""
    return InMemoryStore(
        users=[UserRecord(id=1, name="Ada", email="ada@example.com")],
        posts=[
            PostRecord(
                id=1,
                title="Hello",
                text="First post",
                author_id=1,
                created_at=datetime(2024, 1, 1, tzinfo=UTC),
            )
        ],
        comments=[],
    )


@pytest.fixture
def broadcaster() -> Broadcaster:
    return Broadcaster()


@pytest.fixture
def graphql_context(
    store: InMemoryStore, test_settings: Settings, broadcaster: Broadcaster
) -> dict[str, Any]:
    return {
        "request": None,
        "store": store,
        "settings": test_settings,
        "broadcaster": broadcaster,
    }


@pytest.fixture
def execute():
    """Execute a GraphQL document against the schema with a given context."""

    async def _execute(
        query: str, context: dict[str, Any], variables: dict[str, Any] | None = None
    ):
        return await schema.execute(query, variable_values=variables, context_value=context)

    return _execute


@pytest.fixture
def client(test_settings: Settings, store: InMemoryStore) -> Generator[TestClient, None, None]:
    """HTTP/websocket test client sharing one event loop for the app's lifetime."""
    app = create_app(test_settings, store)
    with TestClient(app) as test_client:
        yield test_client


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
