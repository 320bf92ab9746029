"""Async GraphQL client for the TinyHouse API."""

from __future__ import annotations

from types import TracebackType
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ..logging import get_logger
from . import operations
from .operations import BookingData, DeleteListingData, FavoriteListingData, ListingData

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ClientRequestError(Exception):
    """The API could not be reached or answered with errors or an unusable body."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []


class TinyHouseClient:
    """Issues named operations with typed variables and returns typed results."""

    def __init__(
        self,
        base_url: str = "http://localhost:9000",
        path: str = "/api",
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ):
        self.path = path
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> TinyHouseClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def execute(
        self,
        query: str,
        operation_name: str,
        variables: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """POST a GraphQL request and return its ``data`` object.

        Raises:
            ClientRequestError: On transport failure, non-2xx status, GraphQL errors
                or a body that is not a GraphQL response
        """
        payload = {"query": query, "operationName": operation_name, "variables": variables or {}}

        try:
            response = await self._http.post(self.path, json=payload)
        except httpx.HTTPError as e:
            logger.error("GraphQL request failed", operation=operation_name, error=str(e))
            raise ClientRequestError(f"{operation_name} request failed: {e}") from e

        if response.status_code >= 400 and not _has_graphql_body(response):
            raise ClientRequestError(
                f"{operation_name} failed with status {response.status_code}: {response.text}"
            )

        try:
            body = response.json()
        except ValueError as e:
            raise ClientRequestError(f"{operation_name} returned a non-JSON body") from e
        if not isinstance(body, dict):
            raise ClientRequestError(f"{operation_name} returned an unexpected body")

        errors = body.get("errors")
        if errors:
            logger.info("GraphQL operation returned errors", operation=operation_name, errors=errors)
            first = errors[0] if isinstance(errors, list) else None
            message = first.get("message") if isinstance(first, dict) else None
            raise ClientRequestError(
                message or f"{operation_name} request failed",
                errors if isinstance(errors, list) else None,
            )

        data = body.get("data")
        if not isinstance(data, dict):
            raise ClientRequestError(f"{operation_name} returned no data")
        return data

    async def listings(self) -> list[ListingData]:
        data = await self.execute(operations.LISTINGS, "Listings")
        return _parse_list(ListingData, data, "listings")

    async def bookings(self) -> list[BookingData]:
        data = await self.execute(operations.BOOKINGS, "Bookings")
        return _parse_list(BookingData, data, "bookings")

    async def create_booking(self, id: str, timestamp: str) -> BookingData:
        data = await self.execute(
            operations.CREATE_BOOKING, "CreateBooking", {"id": id, "timestamp": timestamp}
        )
        return _parse(BookingData, data, "createBooking")

    async def favorite_listing(self, id: str) -> FavoriteListingData:
        data = await self.execute(operations.FAVORITE_LISTING, "FavoriteListing", {"id": id})
        return _parse(FavoriteListingData, data, "favoriteListing")

    async def delete_listing(self, id: str) -> DeleteListingData:
        data = await self.execute(operations.DELETE_LISTING, "DeleteListing", {"id": id})
        return _parse(DeleteListingData, data, "deleteListing")


def _has_graphql_body(response: httpx.Response) -> bool:
    try:
        body = response.json()
    except ValueError:
        return False
    return isinstance(body, dict) and ("errors" in body or "data" in body)


def _parse(model: type[ModelT], data: dict[str, Any], field: str) -> ModelT:
    try:
        return model.model_validate(data[field])
    except (KeyError, ValidationError) as e:
        raise ClientRequestError(f"Malformed {field} result: {e}") from e


def _parse_list(model: type[ModelT], data: dict[str, Any], field: str) -> list[ModelT]:
    items = data.get(field)
    if not isinstance(items, list):
        raise ClientRequestError(f"Malformed {field} result: expected a list")
    try:
        return [model.model_validate(item) for item in items]
    except ValidationError as e:
        raise ClientRequestError(f"Malformed {field} result: {e}") from e
