"""Client for the TinyHouse GraphQL API."""

from .client import ClientRequestError, TinyHouseClient
from .controller import GENERIC_ERROR_MESSAGE, ListingsController, format_timestamp

__all__ = [
    "ClientRequestError",
    "TinyHouseClient",
    "ListingsController",
    "GENERIC_ERROR_MESSAGE",
    "format_timestamp",
]
