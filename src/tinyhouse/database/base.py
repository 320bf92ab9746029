"""Core document store interfaces."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

Document = dict[str, Any]
Update = dict[str, dict[str, Any]]

SUPPORTED_OPERATORS = frozenset({"$set", "$push"})


class StoreException(Exception):
    """Base exception for document store operations."""

    pass


class StoreConnectionError(StoreException):
    """The document store could not be reached."""

    pass


class UnsupportedUpdateError(StoreException):
    """An update used an operator the store layer does not implement."""

    pass


def validate_update(update: Update) -> None:
    """Reject empty updates and operators outside ``SUPPORTED_OPERATORS``."""
    if not update:
        raise UnsupportedUpdateError("Update document is empty")

    unknown = set(update) - SUPPORTED_OPERATORS
    if unknown:
        raise UnsupportedUpdateError(f"Unsupported update operators: {sorted(unknown)}")


class Collection(ABC):
    """Abstract base class for a collection of documents addressed by identifier.

    Identifiers arrive as strings from the API layer. Each implementation maps
    them to its native identifier type; an identifier that cannot be mapped
    behaves exactly like one that matches no document.
    """

    name: str

    @abstractmethod
    async def find_one(self, id: Any) -> Document | None:
        """Return the document with this identifier, or None."""
        pass

    @abstractmethod
    async def find(self) -> list[Document]:
        """Return every document in the collection, in insertion order."""
        pass

    @abstractmethod
    async def insert_one(self, document: Document) -> Document | None:
        """Insert a document.

        Args:
            document: Document to store. An ``_id`` is assigned when absent.

        Returns:
            The stored document including its ``_id``, or None when the store
            did not acknowledge the insert.
        """
        pass

    @abstractmethod
    async def find_one_and_update(
        self, id: Any, update: Update, return_updated: bool = True
    ) -> Document | None:
        """Apply a partial update to a single document.

        Args:
            id: Identifier of the document to update
            update: MongoDB-style update; ``$set`` and ``$push`` are supported
            return_updated: Return the post-update document instead of the original

        Returns:
            The matched document, or None when nothing matched

        Raises:
            UnsupportedUpdateError: If the update uses another operator
        """
        pass

    @abstractmethod
    async def find_one_and_delete(self, id: Any) -> Document | None:
        """Delete a single document and return it, or None when nothing matched."""
        pass


@dataclass
class Database:
    """The collections the application works with."""

    listings: Collection
    bookings: Collection
    backend: str = "memory"

    async def ping(self) -> None:
        """Raise StoreConnectionError if the store cannot be reached."""
        return None

    async def close(self) -> None:
        """Release any connection held by this database."""
        return None
