# glozzio/models/review.py
from datetime import datetime, timezone
from typing import Union

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field


class Review(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    review_id: ObjectId = Field(default_factory=ObjectId)
    user: str
    rating: Union[int, float]
    comment: str
    date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def to_document(self) -> dict:
        return self.model_dump()
