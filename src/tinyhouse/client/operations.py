"""Named GraphQL operations issued by the client and their typed results."""

from pydantic import BaseModel, ConfigDict, Field

LISTINGS = """
query Listings {
  listings {
    id
    title
    image
    address
    price
    numOfGuests
    numOfBeds
    numOfBaths
    rating
    favorite
    numOfBookings
  }
}
"""

BOOKINGS = """
query Bookings {
  bookings {
    id
    title
    image
    address
    timestamp
  }
}
"""

CREATE_BOOKING = """
mutation CreateBooking($id: ID!, $timestamp: String!) {
  createBooking(id: $id, timestamp: $timestamp) {
    id
    title
    image
    address
    timestamp
  }
}
"""

FAVORITE_LISTING = """
mutation FavoriteListing($id: ID!) {
  favoriteListing(id: $id) {
    id
    favorite
  }
}
"""

DELETE_LISTING = """
mutation DeleteListing($id: ID!) {
  deleteListing(id: $id) {
    id
  }
}
"""


class ListingData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    image: str
    address: str
    price: int
    num_of_guests: int = Field(alias="numOfGuests")
    num_of_beds: int = Field(alias="numOfBeds")
    num_of_baths: int = Field(alias="numOfBaths")
    rating: float
    favorite: bool
    num_of_bookings: int = Field(alias="numOfBookings")


class BookingData(BaseModel):
    id: str
    title: str
    image: str
    address: str
    timestamp: str


class FavoriteListingData(BaseModel):
    id: str
    favorite: bool


class DeleteListingData(BaseModel):
    id: str
