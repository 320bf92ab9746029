"""
Listing GraphQL type definitions
"""

from typing import Any

import strawberry


@strawberry.type
class Listing:
    """Listing type for GraphQL API."""

    id: strawberry.ID
    title: str
    image: str
    address: str
    price: int
    num_of_guests: int
    num_of_beds: int
    num_of_baths: int
    rating: float
    favorite: bool
    booking_ids: strawberry.Private[list[str]]

    @strawberry.field
    def num_of_bookings(self) -> int:
        """Number of bookings made against this listing."""
        return len(self.booking_ids)

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Listing":
        return cls(
            id=strawberry.ID(str(document["_id"])),
            title=document["title"],
            image=document["image"],
            address=document["address"],
            price=document["price"],
            num_of_guests=document["numOfGuests"],
            num_of_beds=document["numOfBeds"],
            num_of_baths=document["numOfBaths"],
            rating=document["rating"],
            favorite=bool(document.get("favorite", False)),
            booking_ids=[str(b) for b in document.get("bookings") or []],
        )
