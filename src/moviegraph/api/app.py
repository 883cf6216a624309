"""
Main FastAPI application for the moviegraph server
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store import RecordStore, load_seed

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    store: RecordStore = app.state.store
    logger.info(
        "Starting moviegraph API",
        environment=settings.environment,
        actors=store.actor_count,
        movies=store.movie_count,
    )

    yield

    logger.info("Shutting down moviegraph API", movies=store.movie_count)


def create_app(store: RecordStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Record store to serve. Defaults to a store built from the
            configured seed file, or the built-in seed.
    """
    if store is None:
        store = RecordStore.from_seed(load_seed(settings.seed_data_path))

    app = FastAPI(
        title="moviegraph API",
        description="GraphQL API for movies and actors",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.store = store

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

    from ..graphql.schema import create_graphql_router, validate_schema

    # Fail fast: the server should not start with a broken schema
    logger.info("Validating GraphQL schema...")
    validate_schema()

    app.include_router(create_graphql_router(store), prefix="")
    logger.info("GraphQL endpoint initialized successfully", endpoint=settings.graphql_path)

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "moviegraph.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
