import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt

from glozzio import config

logger = logging.getLogger("glozzio.auth_service")


class InvalidTokenError(Exception):
    """Raised for any token that must not be trusted.

    Expired, tampered and malformed tokens all end up here; the reason is
    only kept in the server log.
    """


# ---------------- PASSWORD HASHING ----------------

BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    # bcrypt only looks at the first 72 bytes; newer releases refuse longer input.
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = config.BCRYPT_ROUNDS) -> str:
    """Hash a password using bcrypt."""
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password hash."""
    try:
        return bcrypt.checkpw(_password_bytes(plain_password), hashed_password.encode("utf-8"))
    except (ValueError, TypeError, AttributeError):
        return False


# ---------------- JWT TOKENS ----------------

def create_access_token(
    user_id: str,
    email: str,
    secret: str = config.TOKEN_SECRET,
    algorithm: str = config.JWT_ALGORITHM,
    expires_minutes: int = config.JWT_EXPIRE_MINUTES,
    now: Optional[datetime] = None,
) -> str:
    """Generate a JWT carrying the user's id and email, valid for ``expires_minutes``."""
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        "user_id": str(user_id),
        "email": email,
        "iat": issued_at,
        "exp": issued_at + timedelta(minutes=expires_minutes),
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_access_token(
    token: str,
    secret: str = config.TOKEN_SECRET,
    algorithm: str = config.JWT_ALGORITHM,
) -> dict:
    """Return the claims of a valid token, raise InvalidTokenError otherwise."""
    try:
        return jwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            options={"require": ["exp", "iat", "user_id"]},
        )
    except jwt.ExpiredSignatureError as e:
        logger.info(f"Rejected token: expired ({e})")
        raise InvalidTokenError() from e
    except jwt.InvalidSignatureError as e:
        logger.info(f"Rejected token: bad signature ({e})")
        raise InvalidTokenError() from e
    except jwt.PyJWTError as e:
        logger.info(f"Rejected token: malformed ({e})")
        raise InvalidTokenError() from e
