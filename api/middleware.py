"""
Global middleware and exception handlers.

Error bodies:
  • validation failures → 422 ``{"errors": [{"field": ..., "message": ...}]}``
  • ``HTTPException``   → ``{"status": ..., "message": ..., "statusCode": ...}``
"""

from __future__ import annotations

import logging
import time
from http import HTTPStatus
from typing import Iterable, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from utils.schemas import FieldError

logger = logging.getLogger(__name__)

_REQUIRED_MESSAGES = {
    "firstName": "First name is required",
    "lastName": "Last name is required",
    "email": "Email is required",
    "password": "Password is required",
}

# pydantic error types that mean "not supplied"
_EMPTY_ERROR_TYPES = {"missing", "string_too_short"}


class FieldValidationError(Exception):
    """Field-level failure raised from a handler; rendered as a 422."""

    def __init__(self, errors: Iterable[FieldError]):
        self.errors = list(errors)
        super().__init__(", ".join(f"{e.field}: {e.message}" for e in self.errors))


def _field_errors(exc: RequestValidationError) -> List[FieldError]:
    errors: List[FieldError] = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        field = ".".join(loc) or "body"
        if err.get("type") in _EMPTY_ERROR_TYPES and field in _REQUIRED_MESSAGES:
            message = _REQUIRED_MESSAGES[field]
        else:
            message = err.get("msg", "Invalid value")
        errors.append(FieldError(field=field, message=message))
    return errors


def _errors_response(errors: List[FieldError]) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"errors": [e.model_dump() for e in errors]},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error shapes used by every route."""

    @app.exception_handler(RequestValidationError)
    async def on_validation_error(request: Request, exc: RequestValidationError):
        errors = _field_errors(exc)
        logger.debug("%s %s — validation failed: %s", request.method, request.url.path, errors)
        return _errors_response(errors)

    @app.exception_handler(FieldValidationError)
    async def on_field_validation_error(request: Request, exc: FieldValidationError):
        return _errors_response(exc.errors)

    @app.exception_handler(StarletteHTTPException)
    async def on_http_exception(request: Request, exc: StarletteHTTPException):
        try:
            phrase = HTTPStatus(exc.status_code).phrase
        except ValueError:
            phrase = "Error"
        if exc.status_code == status.HTTP_401_UNAUTHORIZED:
            phrase = "Bad request"
        return JSONResponse(
            status_code=exc.status_code,
            content={"status": phrase, "message": exc.detail, "statusCode": exc.status_code},
            headers=getattr(exc, "headers", None),
        )


def register_middleware(app: FastAPI) -> None:
    """Attach any app-level middleware."""

    @app.middleware("http")
    async def request_timer(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        logger.debug("%s %s — %.3fs", request.method, request.url.path, elapsed)
        return response
