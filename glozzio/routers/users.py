# glozzio/routers/users.py
import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, status
from pydantic import BaseModel

from glozzio.deps import get_user_store
from glozzio.errors import ValidationError
from glozzio.services.auth_service import hash_password
from glozzio.services.user_store import UserStore
from glozzio.utils.serialization import serialize

router = APIRouter(prefix="/users", tags=["users"])

logger = logging.getLogger("glozzio.users")


class UserIn(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


@router.get("")
async def list_users(users: UserStore = Depends(get_user_store)):
    logger.info("GET /users")
    return serialize(await users.list_all())


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: Optional[UserIn] = Body(None),
    users: UserStore = Depends(get_user_store),
):
    payload = payload or UserIn()
    logger.info(f"POST /users received for email: {payload.email}")
    if not payload.email or not payload.password:
        raise ValidationError("Email and password are required", key="message")

    user = await users.create(payload.email, hash_password(payload.password))
    logger.info(f"User registered successfully: {user.email}")
    return {
        "message": "New user account created successfully",
        "result": {"acknowledged": True, "insertedId": user.id},
    }
