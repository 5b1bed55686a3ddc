# glozzio/deps.py
import logging

from fastapi import Depends, Header, Request

from glozzio.errors import ForbiddenError
from glozzio.services.auth_service import InvalidTokenError, decode_access_token
from glozzio.services.product_repository import ProductRepository
from glozzio.services.user_store import UserStore
from glozzio.utils.database import Database

logger = logging.getLogger("glozzio.deps")


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_user_store(db: Database = Depends(get_database)) -> UserStore:
    return UserStore(db.users)


def get_product_repository(db: Database = Depends(get_database)) -> ProductRepository:
    return ProductRepository(db.products)


def get_token_secret(request: Request) -> str:
    return request.app.state.token_secret


async def get_current_user(authorization: str = Header(None), secret: str = Depends(get_token_secret)) -> dict:
    """
    Expect Authorization: Bearer <token>
    Returns the token claims or raises 403.
    Missing, malformed and invalid tokens all get the same response.
    """
    if not authorization:
        logger.info("Forbidden: missing authorization header")
        raise ForbiddenError()
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        logger.info("Forbidden: authorization header is not a bearer token")
        raise ForbiddenError()
    try:
        return decode_access_token(parts[1], secret=secret)
    except InvalidTokenError:
        raise ForbiddenError()
