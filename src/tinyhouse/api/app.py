"""
Main FastAPI application for TinyHouse backend
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import settings
from ..database.connection import (
    check_database_connection,
    close_database,
    get_database,
    init_database,
)
from ..database.seed_data import seed_listings
from ..errors import ErrorResponse, TinyHouseError
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting TinyHouse API...")
    db = init_database()

    ok, error = await check_database_connection()
    if not ok:
        logger.error("Document store is not reachable", backend=db.backend, error=error)
        if settings.environment.lower() in ("production", "prod"):
            raise RuntimeError(error)

    if settings.seed_on_startup:
        inserted = await seed_listings(db)
        logger.info("Startup seeding finished", inserted=inserted)

    yield

    logger.info("Shutting down TinyHouse API...")
    await close_database()


async def tinyhouse_error_handler(request: Request, exc: TinyHouseError) -> JSONResponse:
    """Render listing/booking failures from the REST routes as an ErrorResponse."""
    logger.warning(
        "Request rejected",
        path=request.url.path,
        kind=exc.kind,
        error=exc.message,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse.from_exception(exc).model_dump(),
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="TinyHouse API",
        description="Listings and bookings over GraphQL",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(TinyHouseError, tinyhouse_error_handler)  # type: ignore[arg-type]

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        ok, error = await check_database_connection()
        return {
            "status": "healthy" if ok else "degraded",
            "version": __version__,
            "store_backend": get_database().backend,
            "store_error": error,
        }

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        app.include_router(create_graphql_router(), prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint=settings.graphql_path)
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    if settings.rest_api_enabled:
        from .endpoints import legacy

        app.include_router(legacy.router, tags=["Legacy REST"])

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "tinyhouse.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
