"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any

import pytest

from tinyhouse.database.base import Database
from tinyhouse.database.connection import init_database, reset_database
from tinyhouse.database.implementations.memory import create_memory_database


def make_listing(listing_id: str, **overrides: Any) -> dict[str, Any]:
    """Build a listing document with sensible defaults."""
    listing = {
        "_id": listing_id,
        "title": f"Listing {listing_id}",
        "image": f"https://example.com/{listing_id}.jpg",
        "address": f"{listing_id} Main St, Toronto, ON, CA",
        "price": 10000,
        "numOfGuests": 2,
        "numOfBeds": 1,
        "numOfBaths": 1,
        "rating": 4.5,
        "favorite": False,
        "bookings": [],
    }
    listing.update(overrides)
    return listing


@pytest.fixture
def listing_factory():
    """Expose ``make_listing`` to tests."""
    return make_listing


@pytest.fixture
def memory_db() -> Database:
    """An in-memory database holding listings "001" and "002"."""
    return create_memory_database(listings=[make_listing("001"), make_listing("002")])


@pytest.fixture
def shared_db(memory_db: Database) -> Generator[Database, None, None]:
    """Install ``memory_db`` as the process-wide database."""
    reset_database()
    init_database(database=memory_db, force_reinit=True)
    yield memory_db
    reset_database()


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
