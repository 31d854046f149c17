from __future__ import annotations

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from core.config import settings
from db.database import get_database
from repositories.base import ResourceRepository


async def get_services_repository(db: AsyncIOMotorDatabase = Depends(get_database)) -> ResourceRepository:
    return ResourceRepository(db, settings.services_collection)


async def get_bookings_repository(db: AsyncIOMotorDatabase = Depends(get_database)) -> ResourceRepository:
    return ResourceRepository(db, settings.bookings_collection)
