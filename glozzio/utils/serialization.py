# glozzio/utils/serialization.py
from datetime import datetime
from typing import Any

from bson import ObjectId

from glozzio.errors import InvalidIdError


def to_object_id(value: Any, key: str = "error") -> ObjectId:
    """Parse a path parameter into an ObjectId or raise InvalidIdError."""
    if isinstance(value, ObjectId):
        return value
    if not ObjectId.is_valid(value):
        raise InvalidIdError(value, key=key)
    return ObjectId(value)


def serialize(value: Any) -> Any:
    """Render BSON types found in stored documents as JSON-friendly values."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: serialize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize(v) for v in value]
    return value


def insert_result(result) -> dict:
    return {"acknowledged": result.acknowledged, "insertedId": str(result.inserted_id)}
