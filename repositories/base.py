from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from bson.errors import InvalidDocument
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError


logger = logging.getLogger(__name__)

# Driver errors plus documents the BSON encoder refuses
_STORE_ERRORS = (PyMongoError, InvalidDocument)


class StoreFailure(Exception):
    """Raised when the document store rejects or fails an operation."""

    def __init__(self, collection: str, operation: str) -> None:
        super().__init__(f"{operation} on '{collection}' failed")
        self.collection = collection
        self.operation = operation


class ResourceRepository:
    """Single-document operations over one named collection."""

    def __init__(self, db: AsyncIOMotorDatabase, collection: str) -> None:
        self.db = db
        self.collection = collection

    def _fail(self, operation: str, exc: Exception, **context: Any) -> StoreFailure:
        logger.error(
            f"store.{operation}_failed",
            exc_info=exc,
            extra={"collection": self.collection, **{k: str(v) for k, v in context.items()}},
        )
        return StoreFailure(self.collection, operation)

    async def insert(self, doc: Dict[str, Any]) -> ObjectId:
        # Special-case: never persist a null _id; MongoDB will auto-generate one
        if doc.get("_id", "__absent__") is None:
            doc = {k: v for k, v in doc.items() if k != "_id"}
        try:
            result = await self.db[self.collection].insert_one(doc)
        except _STORE_ERRORS as exc:
            raise self._fail("insert", exc) from exc
        return result.inserted_id

    async def find_all(self) -> List[Dict[str, Any]]:
        try:
            cursor = self.db[self.collection].find({})
            return [doc async for doc in cursor]
        except _STORE_ERRORS as exc:
            raise self._fail("find_all", exc) from exc

    async def find_one(self, object_id: ObjectId) -> Optional[Dict[str, Any]]:
        try:
            return await self.db[self.collection].find_one({"_id": object_id})
        except _STORE_ERRORS as exc:
            raise self._fail("find_one", exc, id=object_id) from exc

    async def update_merge(self, object_id: ObjectId, partial: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        # _id is immutable; drop it even if the caller sent one
        changes = {k: v for k, v in partial.items() if k != "_id"}
        if not changes:
            return await self.find_one(object_id)
        try:
            return await self.db[self.collection].find_one_and_update(
                {"_id": object_id},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        except _STORE_ERRORS as exc:
            raise self._fail("update_merge", exc, id=object_id) from exc

    async def update_field(self, object_id: ObjectId, key: str, value: Any) -> int:
        try:
            result = await self.db[self.collection].update_one({"_id": object_id}, {"$set": {key: value}})
        except _STORE_ERRORS as exc:
            raise self._fail("update_field", exc, id=object_id, field=key) from exc
        return result.matched_count

    async def delete(self, object_id: ObjectId) -> int:
        try:
            result = await self.db[self.collection].delete_one({"_id": object_id})
        except _STORE_ERRORS as exc:
            raise self._fail("delete", exc, id=object_id) from exc
        return result.deleted_count
