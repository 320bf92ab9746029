"""
Root GraphQL query definitions
"""

import strawberry

from ..types.booking import Booking
from ..types.listing import Listing


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def listings(self, info: strawberry.Info) -> list[Listing]:
        """Get all listings."""
        from ..resolvers.listing import resolve_listings

        return await resolve_listings(info)

    @strawberry.field
    async def bookings(self, info: strawberry.Info) -> list[Booking]:
        """Get all bookings."""
        from ..resolvers.booking import resolve_bookings

        return await resolve_bookings(info)
