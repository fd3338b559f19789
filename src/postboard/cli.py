#!/usr/bin/env python3
"""
Main CLI entry point for the Postboard server.
"""

import os
import sys

import click
import uvicorn

from postboard import __version__
from postboard.config import settings
from postboard.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="postboard")
def cli() -> None:
    """Postboard CLI - run the API server and inspect the schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    show_default=True,
    help="Host to bind to",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    show_default=True,
    help="Port to bind to",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the Postboard API server."""

    configure_logging(debug=(log_level == "debug"), log_level=log_level)

    logger.info("Starting Postboard API server", host=host, port=port, reload=reload)

    # The app factory reads settings from the environment in the server process
    if log_level == "debug":
        os.environ["POSTBOARD_DEBUG"] = "true"
    else:
        os.environ.setdefault("POSTBOARD_DEBUG", "false")
    os.environ["POSTBOARD_LOG_LEVEL"] = log_level

    try:
        uvicorn.run(
            "postboard.api.app:create_default_app",
            factory=True,
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("export-schema")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the SDL to this file instead of stdout",
)
def export_schema(output: str | None) -> None:
    """Print the GraphQL schema in SDL form."""
    from postboard.graphql.schema import schema

    sdl = schema.as_str()
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(sdl + "\n")
        click.echo(f"✓ Schema written to {output}")
    else:
        click.echo(sdl)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
