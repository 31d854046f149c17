from __future__ import annotations

from typing import Any, Dict, List

from bson import ObjectId
from fastapi.encoders import jsonable_encoder


def is_blank(value: Any) -> bool:
    """True for values that count as missing: None, blank strings, empty containers.

    Zero and False are real values and are not blank.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, dict, tuple, set)):
        return len(value) == 0
    return False


def require_present(value: Any) -> Any:
    if is_blank(value):
        raise ValueError("field is required and must not be empty")
    return value


def check_field_names(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Reject keys MongoDB would read as operators or paths.

    A leading ``$`` or an embedded ``.`` is refused at any depth so stored
    keys are always plain, top-level field names.
    """
    for key, value in doc.items():
        if not isinstance(key, str) or key.startswith("$") or "." in key:
            raise ValueError(f"invalid field name: {key!r}")
        if isinstance(value, dict):
            check_field_names(value)
        elif isinstance(value, list):
            for item in value:
                if isinstance(item, dict):
                    check_field_names(item)
    return doc


def serialize_document(doc: Dict[str, Any]) -> Dict[str, Any]:
    return jsonable_encoder(doc, custom_encoder={ObjectId: str})


def serialize_documents(docs: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [serialize_document(d) for d in docs]
