# glozzio/routers/products.py
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Response, status

from glozzio.deps import get_product_repository
from glozzio.services.product_repository import ProductRepository
from glozzio.utils.serialization import insert_result, serialize

router = APIRouter(prefix="/products", tags=["products"])

logger = logging.getLogger("glozzio.products")


@router.get("")
async def list_products(products: ProductRepository = Depends(get_product_repository)):
    logger.info("GET /products")
    return serialize(await products.list())


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_product(
    payload: Dict[str, Any] = Body(...),
    products: ProductRepository = Depends(get_product_repository),
):
    logger.info("POST /products")
    result = await products.create(payload)
    logger.info(f"Product created: {result.inserted_id}")
    return {"message": "Product created successfully", "result": insert_result(result)}


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: str, products: ProductRepository = Depends(get_product_repository)):
    logger.info(f"DELETE /products/{product_id}")
    await products.delete_by_id(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{product_id}/reviews", status_code=status.HTTP_201_CREATED)
async def add_review(
    product_id: str,
    payload: Optional[Dict[str, Any]] = Body(None),
    products: ProductRepository = Depends(get_product_repository),
):
    logger.info(f"POST /products/{product_id}/reviews")
    payload = payload or {}
    review_id = await products.add_review(
        product_id,
        user=payload.get("user"),
        rating=payload.get("rating"),
        comment=payload.get("comment"),
    )
    return {"message": "Review added successfully", "reviewId": str(review_id)}


@router.get("/{product_id}/reviews")
async def list_reviews(product_id: str, products: ProductRepository = Depends(get_product_repository)):
    logger.info(f"GET /products/{product_id}/reviews")
    return serialize(await products.list_reviews(product_id))
