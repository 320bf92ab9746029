"""Repository helpers for listings and bookings.

Both the GraphQL resolvers and the legacy REST endpoints call these functions,
so the two surfaces share one set of reads and writes against the store.
"""

from __future__ import annotations

from typing import Any

from ..database.base import Database, Document
from ..database.models import booking_from_listing
from ..errors import ListingNotFoundError, OperationFailedError
from ..logging import get_logger

logger = get_logger(__name__)


async def get_listings(db: Database) -> list[Document]:
    return await db.listings.find()


async def get_bookings(db: Database) -> list[Document]:
    return await db.bookings.find()


async def create_booking(db: Database, listing_id: str, timestamp: str) -> Document:
    """Book a listing.

    Inserts a booking copying the listing's title, image and address, then
    pushes the booking id onto the listing's ``bookings`` array. The two
    writes are separate: if the second one fails the booking exists without
    being referenced by the listing.

    Raises:
        ListingNotFoundError: No listing has this id; nothing is written
        OperationFailedError: The store did not return the inserted booking
    """
    listing = await db.listings.find_one(listing_id)
    if not listing:
        logger.info("Listing not found for booking", listing_id=listing_id)
        raise ListingNotFoundError(listing_id, "listing can't be found")

    booking = await db.bookings.insert_one(dict(booking_from_listing(listing, timestamp)))
    if not booking:
        logger.error("Booking insert returned no document", listing_id=listing_id)
        raise OperationFailedError("failed to create booking")

    patched = await db.listings.find_one_and_update(
        listing["_id"], {"$push": {"bookings": booking["_id"]}}
    )
    if patched is None:
        logger.warning(
            "Booking created but listing was not updated",
            listing_id=listing_id,
            booking_id=str(booking["_id"]),
        )

    logger.info("Booking created", listing_id=listing_id, booking_id=str(booking["_id"]))
    return booking


async def favorite_listing(db: Database, listing_id: str) -> Document:
    """Flip a listing's ``favorite`` flag and return the updated listing.

    Read-then-write with no concurrency check; two concurrent toggles reading
    the same value both write its negation.

    Raises:
        ListingNotFoundError: No listing has this id; nothing is written
        OperationFailedError: The store returned no updated document
    """
    listing = await db.listings.find_one(listing_id)
    if not listing:
        logger.info("Listing not found for favorite", listing_id=listing_id)
        raise ListingNotFoundError(listing_id, "failed to favorite listing")

    updated = await db.listings.find_one_and_update(
        listing["_id"],
        {"$set": {"favorite": not listing.get("favorite", False)}},
        return_updated=True,
    )
    if not updated:
        logger.error("Favorite update returned no document", listing_id=listing_id)
        raise OperationFailedError("failed to favorite listing")

    return updated


async def delete_listing(db: Database, listing_id: str) -> Document:
    """Delete a listing and return it. Bookings that referenced it are kept."""
    deleted = await db.listings.find_one_and_delete(listing_id)
    if not deleted:
        logger.info("Listing not found for delete", listing_id=listing_id)
        raise ListingNotFoundError(listing_id, "failed to delete listing")

    logger.info("Listing deleted", listing_id=listing_id)
    return deleted


def count_bookings(listing: dict[str, Any]) -> int:
    """Number of bookings referenced by a listing document."""
    return len(listing.get("bookings") or [])
