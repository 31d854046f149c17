from __future__ import annotations

from typing import Any, Dict, List

from bson import ObjectId
import logging
from fastapi import APIRouter, Depends, HTTPException, status

from repositories.base import ResourceRepository
from repositories.resources import get_bookings_repository
from schemas.booking import BookingCreate, BookingStatusUpdate
from schemas.common import serialize_document, serialize_documents
from services.identifiers import object_id_from_path
from services.security import get_current_claims


logger = logging.getLogger(__name__)
router = APIRouter(prefix="/bookings", tags=["bookings"])


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found")


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_booking(
    payload: BookingCreate,
    repo: ResourceRepository = Depends(get_bookings_repository),
) -> Dict[str, Any]:
    # serviceId is stored as given; it is not checked against services
    doc = payload.to_document()
    inserted_id = await repo.insert(doc)
    doc["_id"] = inserted_id
    logger.info("bookings.created", extra={"id": str(inserted_id), "service_id": doc["serviceId"]})
    return {"insertedId": str(inserted_id), "booking": serialize_document(doc)}


@router.get("", dependencies=[Depends(get_current_claims)])
async def list_bookings(repo: ResourceRepository = Depends(get_bookings_repository)) -> List[Dict[str, Any]]:
    return serialize_documents(await repo.find_all())


@router.get("/{id}")
async def get_booking(
    object_id: ObjectId = Depends(object_id_from_path),
    repo: ResourceRepository = Depends(get_bookings_repository),
) -> Dict[str, Any]:
    doc = await repo.find_one(object_id)
    if doc is None:
        raise _not_found()
    return serialize_document(doc)


@router.put("/{id}")
async def update_booking_status(
    payload: BookingStatusUpdate,
    object_id: ObjectId = Depends(object_id_from_path),
    repo: ResourceRepository = Depends(get_bookings_repository),
) -> Dict[str, Any]:
    matched = await repo.update_field(object_id, "status", payload.status)
    if not matched:
        raise _not_found()
    logger.info("bookings.status_updated", extra={"id": str(object_id), "status": payload.status})
    return {"message": "Booking status updated", "matchedCount": matched}


@router.delete("/{id}")
async def delete_booking(
    object_id: ObjectId = Depends(object_id_from_path),
    repo: ResourceRepository = Depends(get_bookings_repository),
) -> Dict[str, Any]:
    deleted = await repo.delete(object_id)
    if not deleted:
        raise _not_found()
    logger.info("bookings.deleted", extra={"id": str(object_id)})
    return {"message": "Booking deleted", "deletedCount": deleted}
