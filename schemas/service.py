from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, RootModel, field_validator, model_validator

from schemas.common import check_field_names, require_present


class ServiceCreate(BaseModel):
    """Payload for a new service.

    Every listed field must be present and non-empty. Anything else the
    client sends is stored as-is. Legacy aliases (``title``, ``projectType``)
    are not mapped onto ``name``/``type``.
    """

    model_config = ConfigDict(extra="allow")

    name: Any
    category: Any
    type: Any
    description: Any
    duration: Any
    budget: Any
    level: Any
    price: Any
    date: Any

    @model_validator(mode="before")
    @classmethod
    def _plain_field_names(cls, data: Any) -> Any:
        if isinstance(data, dict):
            check_field_names(data)
        return data

    @field_validator("*")
    @classmethod
    def _not_blank(cls, value: Any) -> Any:
        return require_present(value)

    def to_document(self) -> dict[str, Any]:
        doc = self.model_dump()
        # _id is always assigned by the store
        doc.pop("_id", None)
        return doc


class ServiceUpdate(RootModel[Dict[str, Any]]):
    """Partial service document for a shallow merge; no required fields."""

    @model_validator(mode="after")
    def _plain_field_names(self) -> "ServiceUpdate":
        check_field_names(self.root)
        return self
