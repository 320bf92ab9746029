"""
Booking GraphQL type definitions
"""

from typing import Any

import strawberry


@strawberry.type
class Booking:
    """Booking type for GraphQL API."""

    id: strawberry.ID
    title: str
    image: str
    address: str
    timestamp: str

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Booking":
        return cls(
            id=strawberry.ID(str(document["_id"])),
            title=document["title"],
            image=document["image"],
            address=document["address"],
            timestamp=document["timestamp"],
        )
