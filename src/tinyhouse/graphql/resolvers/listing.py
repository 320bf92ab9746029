from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...listings import repository
from ...logging import get_logger
from ..context import get_db_from_info

if TYPE_CHECKING:
    from ..types.listing import Listing

logger = get_logger(__name__)


# Query resolvers
async def resolve_listings(info: strawberry.Info) -> list[Listing]:
    """
    Resolve every listing in the store.

    No filtering, pagination or sorting: each call is a full scan.
    """
    from ..types.listing import Listing as ListingType

    db = get_db_from_info(info)
    documents = await repository.get_listings(db)
    return [ListingType.from_document(document) for document in documents]


# Mutation resolvers
async def favorite_listing(info: strawberry.Info, id: str) -> Listing:
    """Toggle the favorite flag of a listing."""
    from ..types.listing import Listing as ListingType

    db = get_db_from_info(info)
    document = await repository.favorite_listing(db, id)
    logger.info("Listing favorite toggled", listing_id=id, favorite=document.get("favorite"))
    return ListingType.from_document(document)


async def delete_listing(info: strawberry.Info, id: str) -> Listing:
    """Delete a listing and return it."""
    from ..types.listing import Listing as ListingType

    db = get_db_from_info(info)
    document = await repository.delete_listing(db, id)
    return ListingType.from_document(document)
