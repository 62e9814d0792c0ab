"""
Domain error taxonomy and global exception handlers.

Every failure leaves the process as a JSON body of the shape
``{"detail": ..., "error": <kind>, "success": false}``; stack traces and
store error text stay in the logs.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException

logger = logging.getLogger(__name__)


class HomekeepError(Exception):
    status_code: int = 500
    error: str = "internal_failure"
    default_detail: str = "Internal server error"

    def __init__(
        self,
        detail: str | None = None,
        *,
        status_code: int | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.detail = detail or self.default_detail
        if status_code is not None:
            self.status_code = status_code
        self.headers = headers
        super().__init__(self.detail)


class AuthMissing(HomekeepError):
    status_code = 401
    error = "auth_missing"
    default_detail = "No token provided"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail, headers={"WWW-Authenticate": "Bearer"})


class AuthInvalid(HomekeepError):
    status_code = 403
    error = "auth_invalid"
    default_detail = "Invalid token"


class ValidationFailed(HomekeepError):
    status_code = 400
    error = "validation_failed"
    default_detail = "Missing or invalid fields"


class Conflict(HomekeepError):
    status_code = 409
    error = "conflict"
    default_detail = "Resource already exists"


class NotFound(HomekeepError):
    status_code = 404
    error = "not_found"
    default_detail = "Not found"


class InvalidCredential(HomekeepError):
    status_code = 401
    error = "invalid_credential"
    default_detail = "Invalid password"


class NotFoundOrForbidden(HomekeepError):
    status_code = 404
    error = "not_found_or_forbidden"
    default_detail = "Resource not found or not authorized"


class InternalFailure(HomekeepError):
    pass


def _body(detail: Any, error: str) -> dict[str, Any]:
    return {"detail": detail, "error": error, "success": False}


async def _homekeep_error_handler(_request: Request, exc: HomekeepError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=_body(exc.detail, exc.error),
        headers=exc.headers,
    )


async def _http_exception_handler(_request: Request, exc: HTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=_body(exc.detail, "http_error"),
        headers=getattr(exc, "headers", None),
    )


async def _validation_error_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content=_body(jsonable_encoder(errors), ValidationFailed.error),
    )


async def _integrity_error_handler(_request: Request, exc: IntegrityError) -> JSONResponse:
    logger.error("Database integrity error: %s", exc, exc_info=True)
    return JSONResponse(
        status_code=409,
        content=_body("Database constraint violation", Conflict.error),
    )


async def _sqlalchemy_error_handler(_request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Database error: %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content=_body("Internal database error", InternalFailure.error),
    )


async def _generic_exception_handler(_request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception: %s", exc)
    return JSONResponse(
        status_code=500,
        content=_body("Internal server error", InternalFailure.error),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all exception handlers to the FastAPI app."""
    app.add_exception_handler(HomekeepError, _homekeep_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(HTTPException, _http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(IntegrityError, _integrity_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(SQLAlchemyError, _sqlalchemy_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _generic_exception_handler)
