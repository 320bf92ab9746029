"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.booking import Booking
from ..types.listing import Listing


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # Booking mutations
    @strawberry.mutation(name="createBooking")
    async def create_booking(
        self, info: strawberry.Info, id: strawberry.ID, timestamp: str
    ) -> Booking:
        """Book a listing at the given timestamp."""
        from ..resolvers.booking import create_booking

        return await create_booking(info, str(id), timestamp)

    # Listing mutations
    @strawberry.mutation(name="favoriteListing")
    async def favorite_listing(self, info: strawberry.Info, id: strawberry.ID) -> Listing:
        """Toggle the favorite flag of a listing."""
        from ..resolvers.listing import favorite_listing

        return await favorite_listing(info, str(id))

    @strawberry.mutation(name="deleteListing")
    async def delete_listing(self, info: strawberry.Info, id: strawberry.ID) -> Listing:
        """Delete a listing."""
        from ..resolvers.listing import delete_listing

        return await delete_listing(info, str(id))
