"""In-process document store for tests, development and the teaching walkthrough."""

import copy
import itertools
from typing import Any

from ...logging import get_logger
from ..base import Collection, Database, Document, StoreException, Update, validate_update

logger = get_logger(__name__)


class InMemoryCollection(Collection):
    """A list of documents held in process memory.

    Lookups are a linear scan comparing ``str(_id)`` with ``str(id)``, and new
    identifiers come from an incrementing counter rendered as a string.
    Nothing survives a restart. Every returned document is a copy.
    """

    def __init__(self, name: str, documents: list[Document] | None = None):
        self.name = name
        self._documents: list[Document] = []
        self._counter = itertools.count(1)
        for document in documents or []:
            self._store(document)

    def _next_id(self) -> str:
        existing = {str(doc["_id"]) for doc in self._documents}
        while True:
            candidate = str(next(self._counter))
            if candidate not in existing:
                return candidate

    def _store(self, document: Document) -> Document:
        stored = copy.deepcopy(document)
        if stored.get("_id") is None:
            stored["_id"] = self._next_id()
        elif self._index_of(stored["_id"]) is not None:
            raise StoreException(f"Duplicate _id in collection {self.name}: {stored['_id']}")
        self._documents.append(stored)
        return stored

    def _index_of(self, id: Any) -> int | None:
        key = str(id)
        for i, document in enumerate(self._documents):
            if str(document["_id"]) == key:
                return i
        return None

    async def find_one(self, id: Any) -> Document | None:
        index = self._index_of(id)
        if index is None:
            return None
        return copy.deepcopy(self._documents[index])

    async def find(self) -> list[Document]:
        return copy.deepcopy(self._documents)

    async def insert_one(self, document: Document) -> Document | None:
        stored = self._store(document)
        logger.debug("Inserted document", collection=self.name, document_id=str(stored["_id"]))
        return copy.deepcopy(stored)

    async def find_one_and_update(
        self, id: Any, update: Update, return_updated: bool = True
    ) -> Document | None:
        validate_update(update)

        index = self._index_of(id)
        if index is None:
            return None

        original = self._documents[index]
        document = copy.deepcopy(original)

        for field, value in update.get("$set", {}).items():
            document[field] = copy.deepcopy(value)

        for field, value in update.get("$push", {}).items():
            current = document.setdefault(field, [])
            if not isinstance(current, list):
                raise StoreException(f"Cannot $push to non-array field '{field}'")
            current.append(copy.deepcopy(value))

        # Stored only once every operator applied
        self._documents[index] = document
        return copy.deepcopy(document if return_updated else original)

    async def find_one_and_delete(self, id: Any) -> Document | None:
        index = self._index_of(id)
        if index is None:
            return None
        return self._documents.pop(index)


def create_memory_database(
    listings: list[Document] | None = None,
    bookings: list[Document] | None = None,
    config: dict[str, Any] | None = None,
) -> Database:
    """Build a Database backed by two in-memory collections."""
    config = config or {}
    return Database(
        listings=InMemoryCollection(config.get("listings_collection", "listings"), listings),
        bookings=InMemoryCollection(config.get("bookings_collection", "bookings"), bookings),
        backend="memory",
    )
