"""
Configuration management for TinyHouse backend
"""

from typing import Any

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Document store
    store_backend: str = "memory"  # 'memory', 'mongo'
    mongo_url: str = "mongodb://localhost:27017"
    mongo_database: str = "main"
    listings_collection: str = "test_listings"
    bookings_collection: str = "bookings"
    seed_on_startup: bool = False

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 9000
    api_reload: bool = False
    graphql_path: str = "/api"
    graphiql: bool = True
    rest_api_enabled: bool = True
    cors_origins: list[str] = ["http://localhost:3000"]

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "TINYHOUSE_"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = Settings()

# Debug: Log settings initialization (only in debug mode)
if settings.debug:
    from .logging import get_logger

    _logger = get_logger(__name__)
    _logger.debug(
        "Settings initialized",
        store_backend=settings.store_backend,
        environment=settings.environment,
    )


def get_store_config() -> dict[str, Any]:
    """Collect the connection options handed to the document store factory."""
    return {
        "url": settings.mongo_url,
        "database": settings.mongo_database,
        "listings_collection": settings.listings_collection,
        "bookings_collection": settings.bookings_collection,
    }
