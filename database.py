"""
MongoDB store handle and document helpers.

The application opens one `Store` at startup and closes it at shutdown;
services receive it explicitly instead of reaching for a module global.
"""
import logging
from datetime import datetime, timezone
from typing import Callable, Optional, Union

from pydantic import BaseModel
from pymongo import ASCENDING, DESCENDING, MongoClient, ReturnDocument
from pymongo.errors import PyMongoError

from config import Settings

logger = logging.getLogger(__name__)

PRODUCTS = "products"
ORDERS = "orders"
WAITLIST = "waitlist"
COUNTERS = "counters"

# Optional fields added after the first release; older documents lack them
BACKFILL_FIELDS = [
    (PRODUCTS, "fabrics"),
    (PRODUCTS, "additional_images"),
    (ORDERS, "customer_phone"),
    (ORDERS, "customer_address"),
]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Store:
    def __init__(self, client, database_name: str):
        self.client = client
        self.db = client[database_name]

    @classmethod
    def open(cls, settings: Settings, client_factory: Callable = MongoClient) -> "Store":
        client = client_factory(settings.database_url, serverSelectionTimeoutMS=5000)
        logger.info("Opened MongoDB store %s", settings.database_name)
        return cls(client, settings.database_name)

    def close(self) -> None:
        self.client.close()
        logger.info("Closed MongoDB store %s", self.db.name)

    def __getitem__(self, collection_name: str):
        return self.db[collection_name]

    def next_id(self, sequence: str) -> int:
        """Allocate the next integer id of a sequence. Ids are never reused."""
        counter = self.db[COUNTERS].find_one_and_update(
            {"_id": sequence},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return counter["seq"]

    def create_document(self, collection_name: str, data: Union[BaseModel, dict]) -> int:
        """Insert a document with a fresh integer _id and timestamps, returning the id."""
        if isinstance(data, BaseModel):
            data_dict = data.model_dump()
        else:
            data_dict = dict(data)
        now = utcnow()
        data_dict["created_at"] = now
        data_dict["updated_at"] = now
        data_dict["_id"] = self.next_id(collection_name)
        self.db[collection_name].insert_one(data_dict)
        return data_dict["_id"]

    def get_documents(self, collection_name: str, filter_dict: Optional[dict] = None,
                      limit: Optional[int] = None, sort=None) -> list:
        cursor = self.db[collection_name].find(filter_dict or {})
        if sort:
            cursor = cursor.sort(sort)
        if limit:
            cursor = cursor.limit(limit)
        return list(cursor)


def to_public(doc: Optional[dict]) -> Optional[dict]:
    """Expose a stored document's _id as id."""
    if not doc:
        return doc
    d = dict(doc)
    if "_id" in d:
        d["id"] = d.pop("_id")
    return d


def backfill_fields(store: Store) -> int:
    """Give older documents the optional fields added since they were written."""
    total = 0
    for collection_name, field in BACKFILL_FIELDS:
        try:
            result = store[collection_name].update_many(
                {field: {"$exists": False}}, {"$set": {field: None}}
            )
        except PyMongoError as e:
            logger.warning("Backfill of %s.%s skipped: %s", collection_name, field, e)
            continue
        if result.modified_count:
            logger.info("Backfilled %s.%s on %d documents", collection_name, field, result.modified_count)
        total += result.modified_count
    return total


def init_store(store: Store) -> None:
    store[WAITLIST].create_index([("email", ASCENDING)], unique=True)
    store[ORDERS].create_index([("created_at", DESCENDING)])
    logger.info("Indexes ensured on %s and %s", WAITLIST, ORDERS)
    backfill_fields(store)
