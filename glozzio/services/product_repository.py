# glozzio/services/product_repository.py
import logging
import math
from typing import Any, Dict, List

from bson import ObjectId

from glozzio.errors import NotFoundError, ValidationError
from glozzio.models.review import Review
from glozzio.utils.serialization import to_object_id

logger = logging.getLogger("glozzio.product_repository")


def coerce_rating(rating: Any):
    """Turn a submitted rating (number or numeric string) into an int or float."""
    if isinstance(rating, bool):
        raise ValidationError("Rating must be a number")
    try:
        value = float(rating)
    except (TypeError, ValueError):
        raise ValidationError("Rating must be a number")
    if not math.isfinite(value):
        raise ValidationError("Rating must be a number")
    return int(value) if value.is_integer() else value


class ProductRepository:
    """CRUD over the ``products`` collection plus the embedded ``reviews`` array."""

    def __init__(self, collection):
        self.collection = collection

    async def list(self) -> List[dict]:
        return await self.collection.find({}).to_list(length=None)

    async def create(self, payload: Dict[str, Any]):
        # Stored verbatim; copy so the caller's dict does not gain an _id.
        return await self.collection.insert_one(dict(payload))

    async def delete_by_id(self, product_id: str) -> bool:
        result = await self.collection.delete_one({"_id": to_object_id(product_id)})
        if result.deleted_count == 0:
            raise NotFoundError("Product not found")
        return True

    async def add_review(self, product_id: str, user: Any, rating: Any, comment: Any) -> ObjectId:
        """Append a review to a product and return its generated id."""
        if not user or not rating or not comment:
            raise ValidationError("Missing required fields")
        oid = to_object_id(product_id)
        review = Review(user=str(user), rating=coerce_rating(rating), comment=str(comment))
        # $push keeps the append atomic on the server side.
        result = await self.collection.update_one(
            {"_id": oid},
            {"$push": {"reviews": review.to_document()}},
        )
        if result.matched_count == 0:
            raise NotFoundError("Product not found")
        logger.info(f"Review {review.review_id} added to product {product_id}")
        return review.review_id

    async def list_reviews(self, product_id: str) -> List[dict]:
        product = await self.collection.find_one({"_id": to_object_id(product_id)}, {"reviews": 1})
        if not product:
            raise NotFoundError("Product not found")
        return product.get("reviews") or []
