"""
Shared document store connection management
"""

import threading

from ..config import get_store_config, settings
from ..logging import get_logger
from .base import Database
from .factory import create_database

logger = get_logger(__name__)

# One store connection per process, shared across requests
_database: Database | None = None
_init_lock = threading.Lock()


def init_database(
    database: Database | None = None,
    backend: str | None = None,
    force_reinit: bool = False,
) -> Database:
    """Initialize the shared database.

    Args:
        database: Use this database instead of building one (tests)
        backend: Override ``settings.store_backend``
        force_reinit: Replace an already initialized database
    """
    global _database

    if _database is not None and not force_reinit and database is None:
        return _database

    with _init_lock:
        if _database is not None and not force_reinit and database is None:
            return _database

        _database = database or create_database(
            backend or settings.store_backend, get_store_config()
        )
        logger.info("Database initialized", backend=_database.backend)
        return _database


def get_database() -> Database:
    """Get the shared database, initializing it on first use."""
    if _database is None:
        return init_database()
    return _database


def reset_database() -> None:
    """Forget the shared database (for tests)."""
    global _database
    _database = None


async def close_database() -> None:
    """Close the shared database connection."""
    global _database
    if _database is not None:
        await _database.close()
        _database = None


async def check_database_connection() -> tuple[bool, str | None]:
    """
    Test the store connection.

    Returns:
        tuple: (success: bool, error_message: str | None)
    """
    if _database is None:
        return False, "Database not initialized"

    try:
        await _database.ping()
        return True, None
    except Exception as e:
        return False, f"Database connection error ({type(e).__name__}): {e}"
