"""
Fixture listings and the function that seeds them into a database.
"""

from __future__ import annotations

import copy
from typing import Any

from ..logging import get_logger
from .base import Database

logger = get_logger(__name__)

LISTINGS: list[dict[str, Any]] = [
    {
        "title": "Clean and fully furnished apartment. 5 min away from CN Tower",
        "image": "https://res.cloudinary.com/tiny-house/image/upload/v1560641352/mock/Toronto/toronto-listing-1_exv0tf.jpg",  # noqa: E501
        "address": "3210 Scotchmere Dr W, Toronto, ON, CA",
        "price": 10000,
        "numOfGuests": 2,
        "numOfBeds": 1,
        "numOfBaths": 2,
        "rating": 5,
        "favorite": False,
        "bookings": [],
    },
    {
        "title": "Luxurious home with private pool",
        "image": "https://res.cloudinary.com/tiny-house/image/upload/v1560645376/mock/Los%20Angeles/los-angeles-listing-1_aikhx7.jpg",  # noqa: E501
        "address": "100 Hollywood Hills Dr, Los Angeles, California",
        "price": 15000,
        "numOfGuests": 2,
        "numOfBeds": 1,
        "numOfBaths": 1,
        "rating": 4,
        "favorite": False,
        "bookings": [],
    },
    {
        "title": "Single bedroom located in the heart of downtown San Fransisco",
        "image": "https://res.cloudinary.com/tiny-house/image/upload/v1560646219/mock/San%20Fransisco/san-fransisco-listing-1_qzntl4.jpg",  # noqa: E501
        "address": "200 Sunnyside Rd, San Fransisco, California",
        "price": 25000,
        "numOfGuests": 3,
        "numOfBeds": 2,
        "numOfBaths": 2,
        "rating": 3,
        "favorite": False,
        "bookings": [],
    },
]


def fixture_listings() -> list[dict[str, Any]]:
    """Return a fresh copy of the fixture listings."""
    return copy.deepcopy(LISTINGS)


async def seed_listings(db: Database, listings: list[dict[str, Any]] | None = None) -> int:
    """
    Insert fixture listings when the listings collection is empty.

    Args:
        db: Database to seed
        listings: Listings to insert (defaults to the fixtures)

    Returns:
        Number of listings inserted (0 if the collection already had data)
    """
    existing = await db.listings.find()
    if existing:
        logger.info("Listings already present, skipping seed", count=len(existing))
        return 0

    inserted = 0
    for listing in listings if listings is not None else fixture_listings():
        if await db.listings.insert_one(listing) is not None:
            inserted += 1

    logger.info("Seeded listings", count=inserted, backend=db.backend)
    return inserted
