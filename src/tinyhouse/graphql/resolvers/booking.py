from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...listings import repository
from ..context import get_db_from_info

if TYPE_CHECKING:
    from ..types.booking import Booking


async def resolve_bookings(info: strawberry.Info) -> list[Booking]:
    """Resolve every booking in the store."""
    from ..types.booking import Booking as BookingType

    db = get_db_from_info(info)
    documents = await repository.get_bookings(db)
    return [BookingType.from_document(document) for document in documents]


async def create_booking(info: strawberry.Info, id: str, timestamp: str) -> Booking:
    """
    Book the listing with the given id at the given timestamp.

    Raises ListingNotFoundError or OperationFailedError, which Strawberry
    reports as request-level GraphQL errors. An empty timestamp is rejected
    before the store is touched, as the REST route does.
    """
    from ..types.booking import Booking as BookingType

    if not timestamp:
        raise ValueError("timestamp must not be empty")

    db = get_db_from_info(info)
    document = await repository.create_booking(db, id, timestamp)
    return BookingType.from_document(document)
