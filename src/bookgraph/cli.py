#!/usr/bin/env python3
"""
Main CLI entry point for the bookgraph service.
"""

import os
import sys
from typing import Any

import click
import uvicorn

from bookgraph import __version__
from bookgraph.catalog.repository import build_catalog
from bookgraph.catalog.sources import BookSourceError
from bookgraph.config import Settings
from bookgraph.logging import configure_logging, get_logger

logger = get_logger(__name__)


def _load_catalog(data_file: str | None):
    overrides = {"data_file": data_file} if data_file else {}
    try:
        return build_catalog(Settings(**overrides))
    except (BookSourceError, ValueError) as e:
        logger.error("Failed to load book catalog", error=str(e))
        click.echo(f"✗ Error loading books: {e}", err=True)
        sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="bookgraph")
def cli() -> None:
    """bookgraph CLI - serve and inspect the book catalog."""
    pass


@cli.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
@click.option("--port", default=8080, type=int, help="Port to bind to (default: 8080)")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
@click.option(
    "--data-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON file of books to serve instead of the built-in seed",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, data_file: str | None, log_level: str) -> None:
    """Start the bookgraph API server."""
    # Importing the app module configures logging from the environment; reconfigure after
    from bookgraph.api.app import create_app

    debug = log_level == "debug"
    configure_logging(debug=debug, log_level=log_level)

    logger.info(
        "Starting bookgraph API server",
        host=host,
        port=port,
        reload=reload,
        data_file=data_file,
        log_level=log_level,
    )

    try:
        if reload:
            # The reloader imports the app in a fresh process that reads the environment
            os.environ["BOOKGRAPH_DEBUG"] = "true" if debug else "false"
            os.environ["BOOKGRAPH_LOG_LEVEL"] = log_level
            if data_file:
                os.environ["BOOKGRAPH_DATA_FILE"] = data_file
            uvicorn.run(
                "bookgraph.api.app:app",
                host=host,
                port=port,
                reload=True,
                log_level=log_level,
                access_log=True,
            )
        else:
            overrides: dict[str, Any] = {"debug": debug, "log_level": log_level}
            if data_file:
                overrides["data_file"] = data_file

            uvicorn.run(
                create_app(Settings(**overrides)),
                host=host,
                port=port,
                log_level=log_level,
                access_log=True,
            )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        click.echo(f"✗ Server startup failed: {e}", err=True)
        sys.exit(1)


@cli.command("schema")
def print_schema() -> None:
    """Print the GraphQL schema in SDL form."""
    from bookgraph.graphql.schema import schema

    click.echo(schema.as_str())


@cli.command("book")
@click.argument("book_id")
@click.option(
    "--data-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON file of books to search instead of the built-in seed",
)
def show_book(book_id: str, data_file: str | None) -> None:
    """Print the book with BOOK_ID as JSON."""
    # Keep stdout to the record itself
    configure_logging(log_level="warning")

    catalog = _load_catalog(data_file)

    book = catalog.get_book_by_id(book_id)
    if book is None:
        click.echo(f"✗ Book not found: {book_id}", err=True)
        sys.exit(1)

    click.echo(book.model_dump_json())


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
