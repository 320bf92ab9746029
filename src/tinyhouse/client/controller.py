"""Listings page state driven by the GraphQL client.

Mutations are followed by a refetch of the listings and bookings queries so
the held state always reflects the store. Failures of any kind collapse into
one generic message.
"""

from __future__ import annotations

from datetime import datetime

from ..logging import get_logger
from .client import ClientRequestError, TinyHouseClient
from .operations import BookingData, ListingData

logger = get_logger(__name__)

GENERIC_ERROR_MESSAGE = "Uh oh! Something went wrong :(. Please try again later."


def format_timestamp(moment: datetime | None = None) -> str:
    """Format a moment like ``01/01/2020, 9:00:00 AM``."""
    moment = moment or datetime.now()
    hour = moment.hour % 12 or 12
    return f"{moment:%m/%d/%Y}, {hour}:{moment:%M:%S} {moment:%p}"


class ListingsController:
    def __init__(self, client: TinyHouseClient):
        self.client = client
        self.listings: list[ListingData] | None = None
        self.bookings: list[BookingData] | None = None
        self.loading = False
        self.error: str | None = None

    async def load(self) -> None:
        """Fetch listings and bookings."""
        await self._run(self._refetch)

    async def create_booking(self, listing_id: str, timestamp: str | None = None) -> None:
        async def action() -> None:
            await self.client.create_booking(listing_id, timestamp or format_timestamp())
            await self._refetch()

        await self._run(action)

    async def favorite_listing(self, listing_id: str) -> None:
        async def action() -> None:
            await self.client.favorite_listing(listing_id)
            await self._refetch()

        await self._run(action)

    async def _refetch(self) -> None:
        self.listings = await self.client.listings()
        self.bookings = await self.client.bookings()

    async def _run(self, action) -> None:
        self.loading = True
        self.error = None
        try:
            await action()
        except ClientRequestError as e:
            logger.info("Listings action failed", error=str(e))
            self.error = GENERIC_ERROR_MESSAGE
        finally:
            self.loading = False
