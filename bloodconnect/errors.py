"""
API Errors
Error kinds raised by handlers and the exception handlers that render them as
``{"message": ...}`` JSON bodies.
"""
import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

MISSING_FIELDS = "All fields are required"
INVALID_BLOOD = "Blood must be an array of {type, units}"


class APIError(HTTPException):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Bad request"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None,
                 error: Optional[str] = None):
        super().__init__(status_code=status_code or self.status_code, detail=message or self.message)
        self.error = error


class InvalidInput(APIError):
    message = MISSING_FIELDS


class Conflict(APIError):
    message = "Record already exists"


class NotFound(APIError):
    # 400 at login; dashboard reads raise it with 404
    message = "Not found"


class InvalidCredentials(APIError):
    message = "Invalid credentials"


class Unauthenticated(APIError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid token"


class Forbidden(APIError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Access denied"


class Internal(APIError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Server error"


def validation_message(errors) -> str:
    """Collapse pydantic validation errors into one client-facing message."""
    for err in errors:
        loc = err.get("loc", ())
        if err.get("type") == "json_invalid":
            return "Invalid request body"
        if err.get("type") in ("missing", "string_too_short") and len(loc) <= 2:
            return MISSING_FIELDS
    for err in errors:
        loc = err.get("loc", ())
        if len(loc) > 1 and loc[1] == "blood":
            return INVALID_BLOOD
    for err in errors:
        loc = err.get("loc", ())
        if len(loc) > 1:
            return f"Invalid {loc[1]}"
    return MISSING_FIELDS


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    content = {"message": exc.detail}
    error = getattr(exc, "error", None)
    if error:
        content["error"] = error
    return JSONResponse(status_code=exc.status_code, content=content,
                        headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": validation_message(exc.errors())},
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Server error", "error": str(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
