from __future__ import annotations

import re

from bson import ObjectId
from fastapi import HTTPException, status


_OBJECT_ID_PATTERN = re.compile(r"[0-9a-fA-F]{24}")


class InvalidIdentifier(ValueError):
    """Raised when a client-supplied id is not a MongoDB ObjectId."""


def decode_object_id(raw: str) -> ObjectId:
    # Exactly 24 hex chars; no trimming or padding
    if not isinstance(raw, str) or not _OBJECT_ID_PATTERN.fullmatch(raw):
        raise InvalidIdentifier(raw)
    return ObjectId(raw)


async def object_id_from_path(id: str) -> ObjectId:
    try:
        return decode_object_id(id)
    except InvalidIdentifier:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid id")
