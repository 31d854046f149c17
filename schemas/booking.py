from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from schemas.common import check_field_names, require_present


class BookingCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    serviceId: str
    userName: str
    userEmail: str
    message: Optional[Any] = None
    status: Optional[str] = "pending"

    @model_validator(mode="before")
    @classmethod
    def _plain_field_names(cls, data: Any) -> Any:
        if isinstance(data, dict):
            check_field_names(data)
        return data

    @field_validator("serviceId", "userName", "userEmail")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        return require_present(value)

    def to_document(self) -> dict[str, Any]:
        doc = self.model_dump(exclude_none=True)
        doc.pop("_id", None)
        doc.setdefault("status", "pending")
        doc["createdAt"] = datetime.now(timezone.utc).isoformat()
        return doc


class BookingStatusUpdate(BaseModel):
    status: str

    @field_validator("status")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        return require_present(value)
