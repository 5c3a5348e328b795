"""
Generic MongoDB repository.

Documents are returned as plain dicts with the ``_id`` ObjectId
replaced by a string ``id``.  Every driver error is converted into a
:class:`StorageError` so that services never see raw ``pymongo``
exceptions.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence, Tuple

from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from ..core.db import parse_object_id
from ..core.errors import StorageError


logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    """Current time as a naive UTC datetime, the form MongoDB returns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def skip_for_page(page: int, limit: int) -> int:
    """Number of documents to skip for a 1‑based ``page`` of size ``limit``."""
    return (max(page, 1) - 1) * limit


class MongoRepository:
    """CRUD operations over a single collection.

    Subclasses set ``collection_name``.  When ``timestamps`` is true,
    ``created_at`` and ``updated_at`` are written on insert and
    ``updated_at`` is refreshed on every update.
    """

    collection_name: str = ""
    timestamps: bool = False

    def __init__(self, db) -> None:
        self.collection = db[self.collection_name]

    @staticmethod
    def _to_record(document: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        if document is None:
            return None
        record = dict(document)
        record["id"] = str(record.pop("_id"))
        return record

    def _failure(self, action: str, exc: PyMongoError) -> StorageError:
        logger.error("MongoDB %s on '%s' failed: %s", action, self.collection_name, exc)
        return StorageError(f"Error {action} {self.collection_name}", detail=str(exc))

    async def insert(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        document = dict(fields)
        if self.timestamps:
            now = utcnow()
            document["created_at"] = now
            document["updated_at"] = now
        try:
            result = await self.collection.insert_one(document)
        except PyMongoError as exc:
            raise self._failure("saving", exc) from exc
        document["_id"] = result.inserted_id
        return self._to_record(document)

    async def find_all(
        self,
        filters: Optional[Dict[str, Any]] = None,
        skip: int = 0,
        limit: int = 0,
        sort: Optional[Sequence[Tuple[str, int]]] = None,
    ) -> List[Dict[str, Any]]:
        """Return documents matching ``filters``.

        ``limit`` of 0 means no limit.  Without an explicit ``sort`` the
        documents come back in ``_id`` order, i.e. insertion order.
        """
        try:
            cursor = self.collection.find(filters or {})
            cursor = cursor.sort(list(sort) if sort else [("_id", 1)])
            if skip:
                cursor = cursor.skip(skip)
            if limit:
                cursor = cursor.limit(limit)
            documents = await cursor.to_list(length=None)
        except PyMongoError as exc:
            raise self._failure("fetching", exc) from exc
        return [self._to_record(doc) for doc in documents]

    async def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        try:
            return await self.collection.count_documents(filters or {})
        except PyMongoError as exc:
            raise self._failure("counting", exc) from exc

    async def find_by_id(self, record_id: str) -> Optional[Dict[str, Any]]:
        oid = parse_object_id(record_id)
        if oid is None:
            return None
        try:
            document = await self.collection.find_one({"_id": oid})
        except PyMongoError as exc:
            raise self._failure("fetching", exc) from exc
        return self._to_record(document)

    async def update_by_id(self, record_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Set ``fields`` on the record and return the updated record.

        Returns ``None`` when no record has this id.
        """
        oid = parse_object_id(record_id)
        if oid is None:
            return None
        changes = dict(fields)
        if self.timestamps:
            changes["updated_at"] = utcnow()
        if not changes:
            return await self.find_by_id(record_id)
        try:
            document = await self.collection.find_one_and_update(
                {"_id": oid},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as exc:
            raise self._failure("updating", exc) from exc
        return self._to_record(document)

    async def delete_by_id(self, record_id: str) -> bool:
        oid = parse_object_id(record_id)
        if oid is None:
            return False
        try:
            result = await self.collection.delete_one({"_id": oid})
        except PyMongoError as exc:
            raise self._failure("deleting", exc) from exc
        return result.deleted_count > 0
