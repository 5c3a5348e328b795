"""
MongoDB integration.

This module creates the motor client from ``Settings`` and prepares
the collections used by the API.  Records live in three collections:
``registrations``, ``posts`` and ``events``.  ``init_db`` is called on
application startup to create the indexes the list queries rely on.

Ids are MongoDB ``ObjectId`` values; :func:`parse_object_id` converts
the string form used in URLs and returns ``None`` for anything that is
not a valid id.
"""

import logging
from typing import Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING
from pymongo.errors import PyMongoError

from .config import Settings


logger = logging.getLogger(__name__)

REGISTRATIONS = "registrations"
POSTS = "posts"
EVENTS = "events"


def create_client(settings: Settings) -> AsyncIOMotorClient:
    """Create a motor client for ``settings.mongodb_uri``.

    A server selection timeout keeps requests from hanging forever
    when the database is down.
    """
    return AsyncIOMotorClient(
        settings.mongodb_uri,
        serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
    )


def get_database(client: AsyncIOMotorClient, settings: Settings) -> AsyncIOMotorDatabase:
    return client[settings.database_name]


async def init_db(db) -> None:
    """Create indexes used by event and post listings.

    Index creation is idempotent, so this runs on every startup.
    Failures are logged rather than raised so the API can still start
    (and report an unhealthy database) when MongoDB is unreachable.
    """
    try:
        await db[EVENTS].create_index([("date", ASCENDING)])
        await db[POSTS].create_index([("title", ASCENDING)])
    except PyMongoError as exc:
        logger.error("Could not create MongoDB indexes: %s", exc)
        return
    logger.info("MongoDB indexes ensured")


def parse_object_id(value: str) -> Optional[ObjectId]:
    if not value or not ObjectId.is_valid(value):
        return None
    return ObjectId(value)
