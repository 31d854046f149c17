from __future__ import annotations

from functools import lru_cache
import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from core.config import settings


logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_motor_client() -> AsyncIOMotorClient:
    return AsyncIOMotorClient(
        settings.resolved_mongo_uri,
        serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
        connectTimeoutMS=settings.mongo_connect_timeout_ms,
        socketTimeoutMS=settings.mongo_socket_timeout_ms,
        appname="service-booking-api",
    )


async def get_database() -> AsyncIOMotorDatabase:
    client = get_motor_client()
    return client[settings.database_name]


async def connect_database() -> None:
    """Acquire the shared client and check the server answers a ping.

    A failed ping is logged, not raised: the app keeps serving and store
    calls surface as server errors until the database is reachable.
    """
    client = get_motor_client()
    try:
        await client.admin.command("ping")
    except PyMongoError:
        logger.exception("store.connect_failed", extra={"database": settings.database_name})
        return
    logger.info("store.connected", extra={"database": settings.database_name})


async def close_database() -> None:
    client = get_motor_client()
    client.close()
    get_motor_client.cache_clear()
