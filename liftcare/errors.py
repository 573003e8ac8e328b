"""Application error taxonomy and its mapping onto JSON responses.

Handlers raise these; ``register_error_handlers`` turns every failure into a
``{"message": ..., "error": ...}`` body so no traceback or driver detail ever
reaches a client.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def error(self) -> str:
        return type(self).__name__


class ValidationError(AppError):
    status_code = 400
    default_message = "Invalid request"


class AuthenticationError(AppError):
    status_code = 401
    default_message = "Not authenticated"


class MissingToken(AuthenticationError):
    default_message = "Missing token"


class InvalidOrExpiredToken(AuthenticationError):
    default_message = "Invalid or expired token"


class InvalidCredentials(AuthenticationError):
    default_message = "Invalid credentials"


class AuthorizationError(AppError):
    status_code = 403
    default_message = "Forbidden"


class Forbidden(AuthorizationError):
    default_message = "Forbidden: insufficient role"


class NotFoundError(AppError):
    status_code = 404
    default_message = "Not found"


class ConflictError(AppError):
    status_code = 409
    default_message = "Conflict"


class DuplicateEmail(ConflictError):
    default_message = "Email already in use"


class DuplicatePendingRequest(ConflictError):
    default_message = "You already have a pending request. Please wait for admin approval."


class InternalError(AppError):
    status_code = 500


_STATUS_ERRORS = {
    400: "ValidationError",
    401: "AuthenticationError",
    403: "AuthorizationError",
    404: "NotFoundError",
    405: "MethodNotAllowed",
    409: "ConflictError",
}


def _body(message: str, error: str) -> dict:
    return {"message": message, "error": error}


def _first_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    # loc looks like ("body", "name") or ("path", "id")
    field = ".".join(str(part) for part in first.get("loc", ())[1:])
    if first.get("type") == "missing":
        return f"{field} is required" if field else "Missing request body"
    return f"{field}: {first.get('msg')}" if field else str(first.get("msg"))


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        elif exc.status_code in (401, 403):
            logger.warning("HTTP %s at %s - %s", exc.status_code, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content=_body(exc.message, exc.error))

    @app.exception_handler(RequestValidationError)
    async def handle_validation(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content=_body(_first_validation_message(exc), "ValidationError"),
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=_body(str(exc.detail), _STATUS_ERRORS.get(exc.status_code, "HTTPError")),
        )

    @app.exception_handler(IntegrityError)
    async def handle_constraint(request: Request, exc: IntegrityError):
        # Typically a delete of a row that other records still reference
        logger.warning("Constraint violation at %s %s: %s", request.method, request.url.path, exc.orig)
        return JSONResponse(
            status_code=409,
            content=_body("Record is still referenced by other data", "ConflictError"),
        )

    @app.exception_handler(SQLAlchemyError)
    async def handle_store_error(request: Request, exc: SQLAlchemyError):
        logger.error("Store failure at %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content=_body("Internal server error", "InternalError"))

    @app.exception_handler(Exception)
    async def handle_unhandled(request: Request, exc: Exception):
        logger.error("Unhandled error at %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content=_body("Internal server error", "InternalError"))
