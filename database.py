"""
Document store connection

Builds the MongoDB client from DATABASE_URL / DATABASE_NAME. `db` stays None
when the environment is not configured so importing this module never fails.
"""
import os
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel
from pymongo import MongoClient

DATABASE_URL = os.getenv("DATABASE_URL")
DATABASE_NAME = os.getenv("DATABASE_NAME")

db = None
if DATABASE_URL and DATABASE_NAME:
    client = MongoClient(DATABASE_URL)
    db = client[DATABASE_NAME]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def create_document(collection_name: str, data: Union[BaseModel, dict], database=None, doc_id: Optional[str] = None) -> str:
    """Insert a document, stamping created_at/updated_at. Returns its id as a string."""
    target = database if database is not None else db
    if target is None:
        raise RuntimeError("Database not available. Set DATABASE_URL and DATABASE_NAME.")

    if isinstance(data, BaseModel):
        payload = data.model_dump()
    else:
        payload = dict(data)
    now = utcnow()
    payload.setdefault("created_at", now)
    payload["updated_at"] = now
    if doc_id is not None:
        payload["_id"] = doc_id

    result = target[collection_name].insert_one(payload)
    return str(result.inserted_id)


def get_documents(collection_name: str, filter_dict: Optional[Dict[str, Any]] = None, limit: Optional[int] = None, database=None) -> List[dict]:
    target = database if database is not None else db
    if target is None:
        raise RuntimeError("Database not available. Set DATABASE_URL and DATABASE_NAME.")

    cursor = target[collection_name].find(filter_dict or {})
    if limit:
        cursor = cursor.limit(limit)
    return list(cursor)


def require_db():
    if db is None:
        raise RuntimeError("Database not available. Set DATABASE_URL and DATABASE_NAME.")
    return db
