"""Factory for creating document store databases."""

from typing import Any

from ..logging import get_logger
from .base import Database, Document
from .implementations.memory import create_memory_database

logger = get_logger(__name__)

STORE_BACKENDS = ("memory", "mongo")


def create_database(
    backend: str,
    config: dict[str, Any] | None = None,
    listings: list[Document] | None = None,
) -> Database:
    """Create a Database for the given backend.

    Args:
        backend: Store backend ('memory', 'mongo')
        config: Backend options (url, database, collection names)
        listings: Initial listings, only honoured by the in-memory backend

    Returns:
        Database instance

    Raises:
        ValueError: If the backend is unknown or its configuration is invalid
    """
    config = config or {}

    if backend == "memory":
        return create_memory_database(listings=listings, config=config)
    elif backend == "mongo":
        from .implementations.mongo import create_mongo_database

        if listings:
            logger.warning("Initial listings are ignored by the mongo backend; use seeding")
        return create_mongo_database(config)
    else:
        raise ValueError(
            f"Unknown store backend: {backend} (expected one of: {', '.join(STORE_BACKENDS)})"
        )
