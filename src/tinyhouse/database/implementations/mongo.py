"""MongoDB document store backed by the pymongo async client."""

from typing import Any

from bson import ObjectId
from pymongo import AsyncMongoClient, ReturnDocument
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from ...logging import get_logger
from ..base import Collection, Database, Document, StoreConnectionError, Update, validate_update

logger = get_logger(__name__)


def to_object_id(id: Any) -> Any:
    """Map an API identifier to the value stored in ``_id``.

    Valid 24-character hex strings become ObjectIds; anything else (fixture ids
    like ``"001"``) is queried as-is and simply matches nothing if absent.
    """
    if isinstance(id, ObjectId):
        return id
    if isinstance(id, str) and ObjectId.is_valid(id):
        return ObjectId(id)
    return id


class MongoCollection(Collection):
    """Collection wrapper translating the store interface to pymongo calls."""

    def __init__(self, collection: AsyncCollection):
        self._collection = collection
        self.name = collection.name

    async def find_one(self, id: Any) -> Document | None:
        return await self._collection.find_one({"_id": to_object_id(id)})

    async def find(self) -> list[Document]:
        return await self._collection.find({}).to_list(length=None)

    async def insert_one(self, document: Document) -> Document | None:
        document = dict(document)
        if document.get("_id") is None:
            document["_id"] = ObjectId()

        result = await self._collection.insert_one(document)
        if not result.acknowledged:
            logger.warning("Insert not acknowledged", collection=self.name)
            return None

        document["_id"] = result.inserted_id
        return document

    async def find_one_and_update(
        self, id: Any, update: Update, return_updated: bool = True
    ) -> Document | None:
        validate_update(update)
        return await self._collection.find_one_and_update(
            {"_id": to_object_id(id)},
            update,
            return_document=ReturnDocument.AFTER if return_updated else ReturnDocument.BEFORE,
        )

    async def find_one_and_delete(self, id: Any) -> Document | None:
        return await self._collection.find_one_and_delete({"_id": to_object_id(id)})


class MongoDatabase(Database):
    """Database holding a shared AsyncMongoClient for the process lifetime."""

    def __init__(
        self,
        client: AsyncMongoClient,
        database: str,
        listings_collection: str,
        bookings_collection: str,
    ):
        db = client[database]
        super().__init__(
            listings=MongoCollection(db[listings_collection]),
            bookings=MongoCollection(db[bookings_collection]),
            backend="mongo",
        )
        self.client = client

    async def ping(self) -> None:
        try:
            await self.client.admin.command("ping")
        except PyMongoError as e:
            raise StoreConnectionError(f"Cannot reach MongoDB: {e}") from e

    async def close(self) -> None:
        await self.client.close()
        logger.info("MongoDB client closed")


def create_mongo_database(config: dict[str, Any]) -> MongoDatabase:
    """Create a MongoDB-backed Database from connection options."""
    url = config.get("url")
    if not url:
        raise ValueError("MongoDB store requires 'url' in configuration")

    client: AsyncMongoClient = AsyncMongoClient(url)
    return MongoDatabase(
        client,
        database=config.get("database", "main"),
        listings_collection=config.get("listings_collection", "test_listings"),
        bookings_collection=config.get("bookings_collection", "bookings"),
    )
