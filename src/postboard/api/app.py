"""
Main FastAPI application for the Postboard API
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import Settings, settings as default_settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..realtime.broadcaster import Broadcaster
from ..store.base import DataStore
from ..store.seed import create_seeded_store

logger = get_logger(__name__)


def create_app(settings: Settings | None = None, store: DataStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use (defaults to the environment-loaded settings)
        store: Data store to serve (defaults to a store seeded per settings)
    """
    settings = settings or default_settings
    if store is None:
        store = create_seeded_store(settings.seed_data_path)
    broadcaster = Broadcaster()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info(
            "Starting Postboard API...",
            environment=settings.environment,
            websocket_enabled=settings.websocket_enabled,
        )
        yield
        logger.info("Shutting down Postboard API...", websocket_clients=broadcaster.client_count)

    app = FastAPI(
        title="Postboard API",
        description="GraphQL API for users, posts and comments",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.settings = settings
    app.state.store = store
    app.state.broadcaster = broadcaster

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        # Fail fast on unresolved type references
        logger.info("Validating GraphQL schema...")
        validate_schema()

        graphql_router = create_graphql_router(store, settings, broadcaster)
        app.include_router(graphql_router, prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    if settings.websocket_enabled:
        from .endpoints.websocket import create_websocket_router

        app.include_router(create_websocket_router(store, settings, broadcaster))
        logger.info("Websocket endpoint initialized", endpoint="/ws")

    return app


def create_default_app() -> FastAPI:
    """App factory for uvicorn (``--factory``), configuring logging first.

    Settings are re-read from the environment so CLI overrides apply.
    """
    settings = Settings()
    configure_logging(debug=settings.debug, log_level=settings.log_level)
    return create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "postboard.api.app:create_default_app",
        factory=True,
        host=default_settings.api_host,
        port=default_settings.api_port,
        reload=default_settings.api_reload,
        log_level=default_settings.log_level.lower(),
    )
