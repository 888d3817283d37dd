"""
Main FastAPI application for the bookgraph service
"""

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..catalog.repository import BookCatalog, build_catalog
from ..catalog.sources import BookSourceError
from ..config import Settings, settings as default_settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

configure_logging(debug=default_settings.debug, log_level=default_settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting bookgraph API...", books=len(app.state.catalog))
    yield
    logger.info("Shutting down bookgraph API...")


def create_app(settings: Settings | None = None, catalog: BookCatalog | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use; the process-wide settings when omitted
        catalog: Prebuilt catalog; built from the configured data source when omitted
    """
    settings = settings or default_settings

    if catalog is None:
        try:
            catalog = build_catalog(settings)
        except (BookSourceError, ValueError) as e:
            logger.error("Failed to load book catalog", error=str(e), data_file=settings.data_file)
            raise

    app = FastAPI(
        title="bookgraph API",
        description="GraphQL access to a fixed catalog of books",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.catalog = catalog

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

    # GraphQL endpoint (allow disabling for tests)
    if not os.getenv("BOOKGRAPH_DISABLE_GRAPHQL"):
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        app.include_router(create_graphql_router(catalog, graphiql=settings.graphiql), prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")

    from .endpoints import books

    app.include_router(books.router, prefix="/books", tags=["Books"])

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookgraph.api.app:app",
        host=default_settings.api_host,
        port=default_settings.api_port,
        reload=default_settings.api_reload,
        log_level=default_settings.log_level.lower(),
    )
