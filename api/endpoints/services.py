from __future__ import annotations

from typing import Any, Dict, List

from bson import ObjectId
import logging
from fastapi import APIRouter, Depends, HTTPException, status

from repositories.base import ResourceRepository
from repositories.resources import get_services_repository
from schemas.common import serialize_document, serialize_documents
from schemas.service import ServiceCreate, ServiceUpdate
from services.identifiers import object_id_from_path
from services.security import get_current_claims


logger = logging.getLogger(__name__)
router = APIRouter(prefix="/services", tags=["services"])


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Service not found")


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_service(
    payload: ServiceCreate,
    repo: ResourceRepository = Depends(get_services_repository),
) -> Dict[str, Any]:
    doc = payload.to_document()
    inserted_id = await repo.insert(doc)
    doc["_id"] = inserted_id
    logger.info("services.created", extra={"id": str(inserted_id)})
    return {"insertedId": str(inserted_id), "service": serialize_document(doc)}


@router.get("", dependencies=[Depends(get_current_claims)])
async def list_services(repo: ResourceRepository = Depends(get_services_repository)) -> List[Dict[str, Any]]:
    return serialize_documents(await repo.find_all())


@router.get("/{id}")
async def get_service(
    object_id: ObjectId = Depends(object_id_from_path),
    repo: ResourceRepository = Depends(get_services_repository),
) -> Dict[str, Any]:
    doc = await repo.find_one(object_id)
    if doc is None:
        raise _not_found()
    return serialize_document(doc)


@router.patch("/{id}")
async def update_service(
    payload: ServiceUpdate,
    object_id: ObjectId = Depends(object_id_from_path),
    repo: ResourceRepository = Depends(get_services_repository),
) -> Dict[str, Any]:
    changes = payload.root
    doc = await repo.update_merge(object_id, changes)
    if doc is None:
        raise _not_found()
    logger.info("services.updated", extra={"id": str(object_id), "fields": ",".join(sorted(changes))})
    return serialize_document(doc)


@router.delete("/{id}")
async def delete_service(
    object_id: ObjectId = Depends(object_id_from_path),
    repo: ResourceRepository = Depends(get_services_repository),
) -> Dict[str, Any]:
    deleted = await repo.delete(object_id)
    if not deleted:
        raise _not_found()
    logger.info("services.deleted", extra={"id": str(object_id)})
    return {"message": "Service deleted", "deletedCount": deleted}
