"""
Shapes of the documents stored in the listings and bookings collections
"""

from typing import Any, NotRequired, TypedDict


class ListingDocument(TypedDict):
    _id: Any
    title: str
    image: str
    address: str
    price: int
    numOfGuests: int
    numOfBeds: int
    numOfBaths: int
    rating: float
    favorite: NotRequired[bool]
    bookings: NotRequired[list[Any]]


class BookingDocument(TypedDict):
    _id: NotRequired[Any]
    title: str
    image: str
    address: str
    timestamp: str


def booking_from_listing(listing: ListingDocument, timestamp: str) -> BookingDocument:
    """Build a new booking document, copying the listing's display fields."""
    return {
        "title": listing["title"],
        "image": listing["image"],
        "address": listing["address"],
        "timestamp": timestamp,
    }
