"""
Domain errors and their HTTP translation
"""
import logging
from typing import Any, List, Optional
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class LaborConnectError(Exception):
    """Base class for errors surfaced to API clients"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None, errors: Optional[List[Any]] = None):
        self.message = message or self.message
        self.errors = errors
        super().__init__(self.message)


class ValidationError(LaborConnectError):
    """Malformed or missing fields, or references to unknown records"""
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Validation failed"


class DuplicateEmailError(LaborConnectError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "User already exists"


class AuthenticationError(LaborConnectError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid credentials"


class NotFoundError(LaborConnectError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


def _error_body(message: str, errors: Optional[List[Any]] = None) -> dict:
    body = {"detail": message}
    if errors:
        body["errors"] = errors
    return body


async def laborconnect_error_handler(request: Request, exc: LaborConnectError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message, exc.errors))


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Report schema failures as 400 with a trimmed error list
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(ValidationError.message, errors),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(LaborConnectError.message),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Convert domain errors to JSON bodies at the request boundary"""
    app.add_exception_handler(LaborConnectError, laborconnect_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
