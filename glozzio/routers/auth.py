from fastapi import APIRouter, Body, Depends
from pydantic import BaseModel
from typing import Optional
import logging

from glozzio.deps import get_current_user, get_token_secret, get_user_store
from glozzio.errors import AuthenticationError, NotFoundError, ValidationError
from glozzio.services.auth_service import create_access_token, verify_password
from glozzio.services.user_store import UserStore

router = APIRouter(tags=["auth"])

logger = logging.getLogger("glozzio.auth")


# ---------------------- MODELS ----------------------
class LoginIn(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


# ---------------------- ROUTES ----------------------
@router.post("/login")
async def login(
    payload: Optional[LoginIn] = Body(None),
    users: UserStore = Depends(get_user_store),
    secret: str = Depends(get_token_secret),
):
    payload = payload or LoginIn()
    logger.info(f"POST /login received for email: {payload.email}")

    if not payload.email or not payload.password:
        raise ValidationError("Email and password are required", key="message")

    user = await users.find_by_email(payload.email)
    if not user:
        raise NotFoundError("User not found", key="message")

    if not verify_password(payload.password, user.password_hash):
        raise AuthenticationError("Invalid password", key="message")

    token = create_access_token(user.id, user.email, secret=secret)
    logger.info(f"User logged in successfully: {payload.email}")
    return {"accessToken": token}


@router.get("/profile")
async def profile(current_user: dict = Depends(get_current_user)):
    return {
        "success": True,
        "message": "This is a protected route",
        "user": current_user,
    }
