"""
Content store access.

A single MongoClient is created at import time when DATABASE_URL is set.
Helpers take a collection name and plain dicts or pydantic models; ids go
in and out as strings and are converted to ObjectId here.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

from bson import ObjectId
from pydantic import BaseModel
from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from config import DATABASE_NAME, DATABASE_URL
from schemas import ADMIN_CREDENTIAL, REVOKED_TOKEN

logger = logging.getLogger(__name__)

client: Optional[MongoClient] = None
db: Optional[Database] = None

NEWEST_FIRST = [("created_at", DESCENDING), ("_id", DESCENDING)]


def ensure_indexes(mongo_db: Database) -> None:
    # revoked tokens drop out once their own expiry has passed
    mongo_db[REVOKED_TOKEN].create_index([("expires_at", ASCENDING)], expireAfterSeconds=0)
    mongo_db[REVOKED_TOKEN].create_index([("jti", ASCENDING)])
    mongo_db[ADMIN_CREDENTIAL].create_index([("username", ASCENDING)], unique=True)


if DATABASE_URL:
    client = MongoClient(DATABASE_URL)
    db = client[DATABASE_NAME]
    try:
        ensure_indexes(db)
    except PyMongoError:
        logger.exception("Could not create indexes")


class DatabaseUnavailable(RuntimeError):
    pass


def get_db() -> Database:
    if db is None:
        raise DatabaseUnavailable("Database not available")
    return db


def _as_dict(data: Union[BaseModel, Dict[str, Any]]) -> Dict[str, Any]:
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json")
    return dict(data)


def normalize(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Swap Mongo's ``_id`` for a string ``id``."""
    if doc is None:
        return None
    doc = dict(doc)
    doc["id"] = str(doc.pop("_id"))
    return doc


def create_document(collection_name: str, data: Union[BaseModel, Dict[str, Any]]) -> str:
    data_dict = _as_dict(data)
    now = datetime.now(timezone.utc)
    data_dict["created_at"] = now
    data_dict["updated_at"] = now
    result = get_db()[collection_name].insert_one(data_dict)
    logger.debug("Inserted %s into %s", result.inserted_id, collection_name)
    return str(result.inserted_id)


def get_documents(collection_name: str, filter_dict: Optional[Dict[str, Any]] = None, limit: Optional[int] = None) -> List[Dict[str, Any]]:
    """Newest first, by ``created_at``."""
    cursor = get_db()[collection_name].find(filter_dict or {}).sort(NEWEST_FIRST)
    if limit:
        cursor = cursor.limit(limit)
    return [normalize(doc) for doc in cursor]


def get_document(collection_name: str, doc_id: str) -> Optional[Dict[str, Any]]:
    return normalize(get_db()[collection_name].find_one({"_id": ObjectId(doc_id)}))


def update_document(collection_name: str, doc_id: str, data: Union[BaseModel, Dict[str, Any]]) -> bool:
    data_dict = _as_dict(data)
    data_dict["updated_at"] = datetime.now(timezone.utc)
    res = get_db()[collection_name].update_one({"_id": ObjectId(doc_id)}, {"$set": data_dict})
    return res.matched_count > 0


def delete_document(collection_name: str, doc_id: str) -> bool:
    res = get_db()[collection_name].delete_one({"_id": ObjectId(doc_id)})
    return res.deleted_count > 0


def get_singleton(collection_name: str) -> Optional[Dict[str, Any]]:
    return normalize(get_db()[collection_name].find_one({}, sort=NEWEST_FIRST))


def upsert_singleton(collection_name: str, data: Union[BaseModel, Dict[str, Any]]) -> str:
    """Update the existing row if there is one, else insert it."""
    existing = get_db()[collection_name].find_one({}, {"_id": 1}, sort=NEWEST_FIRST)
    if existing:
        update_document(collection_name, str(existing["_id"]), data)
        return str(existing["_id"])
    return create_document(collection_name, data)
