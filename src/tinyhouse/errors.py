"""
Error taxonomy shared by the GraphQL resolvers and the REST endpoints.

Two kinds exist: the referenced listing does not exist, or the store did not
hand back the document an insert/update was expected to produce.
"""

from typing import Literal

from pydantic import BaseModel

ErrorKind = Literal["not_found", "operation_failed"]


class TinyHouseError(Exception):
    """Base exception for listing and booking operations."""

    kind: ErrorKind = "operation_failed"
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ListingNotFoundError(TinyHouseError):
    """The referenced listing does not exist."""

    kind: ErrorKind = "not_found"
    status_code = 404

    def __init__(self, listing_id: str, message: str = "listing can't be found"):
        super().__init__(message)
        self.listing_id = listing_id


class OperationFailedError(TinyHouseError):
    """The store reported no document after an insert or update."""

    kind: ErrorKind = "operation_failed"
    status_code = 500


class ErrorDetail(BaseModel):
    kind: ErrorKind
    message: str


class ErrorResponse(BaseModel):
    """Body returned by the REST endpoints for any TinyHouseError."""

    error: ErrorDetail

    @classmethod
    def from_exception(cls, exc: TinyHouseError) -> "ErrorResponse":
        return cls(error=ErrorDetail(kind=exc.kind, message=exc.message))
