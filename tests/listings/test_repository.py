"""
Unit tests for the listing and booking repository functions
"""

from unittest.mock import AsyncMock, patch

import pytest

from tinyhouse.errors import ListingNotFoundError, OperationFailedError
from tinyhouse.listings import repository

TIMESTAMP = "01/01/2020, 9:00:00 AM"


class TestGetListings:
    @pytest.mark.asyncio
    async def test_listings_without_bookings_count_zero(self, memory_db):
        listings = await repository.get_listings(memory_db)

        assert len(listings) == 2
        assert all(repository.count_bookings(listing) == 0 for listing in listings)

    def test_count_bookings_tolerates_missing_field(self):
        assert repository.count_bookings({"_id": "x"}) == 0
        assert repository.count_bookings({"_id": "x", "bookings": None}) == 0
        assert repository.count_bookings({"_id": "x", "bookings": ["a", "b"]}) == 2


class TestCreateBooking:
    @pytest.mark.asyncio
    async def test_create_booking_copies_listing_fields(self, memory_db):
        listing = await memory_db.listings.find_one("001")

        booking = await repository.create_booking(memory_db, "001", TIMESTAMP)

        assert booking["_id"] is not None
        assert booking["title"] == listing["title"]
        assert booking["image"] == listing["image"]
        assert booking["address"] == listing["address"]
        assert booking["timestamp"] == TIMESTAMP

    @pytest.mark.asyncio
    async def test_create_booking_increments_count_by_one(self, memory_db):
        await repository.create_booking(memory_db, "001", TIMESTAMP)
        booking = await repository.create_booking(memory_db, "001", TIMESTAMP)

        listing = await memory_db.listings.find_one("001")
        assert repository.count_bookings(listing) == 2
        assert listing["bookings"][-1] == booking["_id"]

        other = await memory_db.listings.find_one("002")
        assert repository.count_bookings(other) == 0

    @pytest.mark.asyncio
    async def test_booking_keeps_fields_after_listing_changes(self, memory_db):
        booking = await repository.create_booking(memory_db, "001", TIMESTAMP)

        await memory_db.listings.find_one_and_update("001", {"$set": {"title": "Renamed"}})

        stored = await memory_db.bookings.find_one(booking["_id"])
        assert stored["title"] == "Listing 001"

    @pytest.mark.asyncio
    async def test_create_booking_unknown_listing(self, memory_db):
        with pytest.raises(ListingNotFoundError, match="listing can't be found") as exc_info:
            await repository.create_booking(memory_db, "999", TIMESTAMP)

        assert exc_info.value.kind == "not_found"
        assert await memory_db.bookings.find() == []
        assert all(l["bookings"] == [] for l in await memory_db.listings.find())

    @pytest.mark.asyncio
    async def test_create_booking_insert_failure(self, memory_db):
        with patch.object(memory_db.bookings, "insert_one", AsyncMock(return_value=None)):
            with pytest.raises(OperationFailedError, match="failed to create booking"):
                await repository.create_booking(memory_db, "001", TIMESTAMP)

        listing = await memory_db.listings.find_one("001")
        assert listing["bookings"] == []

    @pytest.mark.asyncio
    async def test_listing_patch_failure_still_returns_booking(self, memory_db):
        with patch.object(
            memory_db.listings, "find_one_and_update", AsyncMock(return_value=None)
        ):
            booking = await repository.create_booking(memory_db, "001", TIMESTAMP)

        # The booking exists without being referenced by the listing
        assert await memory_db.bookings.find_one(booking["_id"]) is not None
        listing = await memory_db.listings.find_one("001")
        assert listing["bookings"] == []


class TestFavoriteListing:
    @pytest.mark.asyncio
    async def test_favorite_toggles_and_is_self_inverse(self, memory_db):
        first = await repository.favorite_listing(memory_db, "001")
        assert first["_id"] == "001"
        assert first["favorite"] is True

        second = await repository.favorite_listing(memory_db, "001")
        assert second["favorite"] is False

    @pytest.mark.asyncio
    async def test_favorite_missing_flag_defaults_to_false(self, memory_db, listing_factory):
        listing = listing_factory("003")
        del listing["favorite"]
        await memory_db.listings.insert_one(listing)

        updated = await repository.favorite_listing(memory_db, "003")

        assert updated["favorite"] is True

    @pytest.mark.asyncio
    async def test_favorite_unknown_listing(self, memory_db):
        with patch.object(
            memory_db.listings, "find_one_and_update", AsyncMock()
        ) as mock_update:
            with pytest.raises(ListingNotFoundError, match="failed to favorite listing"):
                await repository.favorite_listing(memory_db, "999")

        mock_update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_favorite_update_failure(self, memory_db):
        with patch.object(
            memory_db.listings, "find_one_and_update", AsyncMock(return_value=None)
        ):
            with pytest.raises(OperationFailedError) as exc_info:
                await repository.favorite_listing(memory_db, "001")

        assert exc_info.value.kind == "operation_failed"


class TestDeleteListing:
    @pytest.mark.asyncio
    async def test_delete_listing(self, memory_db):
        deleted = await repository.delete_listing(memory_db, "002")

        assert deleted["_id"] == "002"
        assert [l["_id"] for l in await memory_db.listings.find()] == ["001"]

    @pytest.mark.asyncio
    async def test_delete_keeps_bookings(self, memory_db):
        booking = await repository.create_booking(memory_db, "001", TIMESTAMP)

        await repository.delete_listing(memory_db, "001")

        assert await memory_db.bookings.find_one(booking["_id"]) is not None

    @pytest.mark.asyncio
    async def test_delete_unknown_listing(self, memory_db):
        with pytest.raises(ListingNotFoundError, match="failed to delete listing"):
            await repository.delete_listing(memory_db, "999")
