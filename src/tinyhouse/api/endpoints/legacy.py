"""Legacy REST endpoints for listings and bookings.

The routes mirror the GraphQL operations and call the same repository
functions. Failures are reported through the ``TinyHouseError`` exception
handler registered on the app, which returns an ``ErrorResponse`` body.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from ...database.base import Database
from ...database.connection import get_database
from ...errors import ErrorResponse
from ...listings import repository
from ...logging import get_logger

logger = get_logger(__name__)

router = APIRouter()

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    404: {"model": ErrorResponse, "description": "Listing not found"},
    500: {"model": ErrorResponse, "description": "Store did not return a document"},
}


class ListingResponse(BaseModel):
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
    favorite: bool = False
    bookings: list[str] = Field(default_factory=list)
    num_of_bookings: int = Field(alias="numOfBookings")

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> ListingResponse:
        bookings = [str(b) for b in document.get("bookings") or []]
        return cls(
            id=str(document["_id"]),
            title=document["title"],
            image=document["image"],
            address=document["address"],
            price=document["price"],
            numOfGuests=document["numOfGuests"],
            numOfBeds=document["numOfBeds"],
            numOfBaths=document["numOfBaths"],
            rating=document["rating"],
            favorite=bool(document.get("favorite", False)),
            bookings=bookings,
            numOfBookings=repository.count_bookings(document),
        )


class BookingResponse(BaseModel):
    id: str
    title: str
    image: str
    address: str
    timestamp: str

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> BookingResponse:
        return cls(
            id=str(document["_id"]),
            title=document["title"],
            image=document["image"],
            address=document["address"],
            timestamp=document["timestamp"],
        )


class ListingIdRequest(BaseModel):
    id: str = Field(..., min_length=1)


class CreateBookingRequest(BaseModel):
    id: str = Field(..., min_length=1)
    timestamp: str = Field(..., min_length=1)


@router.get("/listings", response_model=list[ListingResponse], response_model_by_alias=True)
async def list_listings(db: Database = Depends(get_database)) -> list[ListingResponse]:
    documents = await repository.get_listings(db)
    return [ListingResponse.from_document(document) for document in documents]


@router.get("/bookings", response_model=list[BookingResponse])
async def list_bookings(db: Database = Depends(get_database)) -> list[BookingResponse]:
    documents = await repository.get_bookings(db)
    return [BookingResponse.from_document(document) for document in documents]


@router.post("/create-booking", response_model=BookingResponse, responses=ERROR_RESPONSES)
async def create_booking(
    body: CreateBookingRequest, db: Database = Depends(get_database)
) -> BookingResponse:
    """Book a listing. Same semantics as the ``createBooking`` mutation."""
    document = await repository.create_booking(db, body.id, body.timestamp)
    return BookingResponse.from_document(document)


@router.post(
    "/favorite-listing",
    response_model=ListingResponse,
    response_model_by_alias=True,
    responses=ERROR_RESPONSES,
)
async def favorite_listing(
    body: ListingIdRequest, db: Database = Depends(get_database)
) -> ListingResponse:
    document = await repository.favorite_listing(db, body.id)
    return ListingResponse.from_document(document)


@router.post(
    "/delete-listing",
    response_model=ListingResponse,
    response_model_by_alias=True,
    responses=ERROR_RESPONSES,
)
async def delete_listing(
    body: ListingIdRequest, db: Database = Depends(get_database)
) -> ListingResponse:
    document = await repository.delete_listing(db, body.id)
    return ListingResponse.from_document(document)
