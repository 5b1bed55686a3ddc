# glozzio/errors.py
import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger("glozzio.errors")


class APIError(Exception):
    """Base for errors that map onto an HTTP status and a JSON body."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, key: str = "error"):
        super().__init__(message)
        self.message = message
        self.key = key

    def to_body(self) -> dict:
        return {self.key: self.message}


class ValidationError(APIError):
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidIdError(ValidationError):
    def __init__(self, value, key: str = "error"):
        super().__init__("Invalid id", key=key)
        self.value = value


class ConflictError(APIError):
    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(APIError):
    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(APIError):
    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self):
        super().__init__("Forbidden", key="detail")


class NotFoundError(APIError):
    status_code = status.HTTP_404_NOT_FOUND


class InternalError(APIError):
    def __init__(self, message: str = "Internal server error"):
        super().__init__(message, key="error")


# ---------------------- HANDLERS ----------------------
async def api_error_handler(request: Request, exc: APIError):
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def unhandled_error_handler(request: Request, exc: Exception):
    # Never leak internals to the caller.
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=InternalError().to_body(),
    )


def register_error_handlers(app):
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
