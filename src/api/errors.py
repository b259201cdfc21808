# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Structured API errors and their exception handlers."""

import logging
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.config import settings
from src.exceptions import DataUnavailableError

logger = logging.getLogger(__name__)


class ErrorCode(str, Enum):
    """Stable machine-readable error codes."""

    # Authentication
    AUTH_SESSION_MISSING = "AUTH_SESSION_MISSING"
    AUTH_SESSION_INVALID = "AUTH_SESSION_INVALID"
    AUTH_USER_INACTIVE = "AUTH_USER_INACTIVE"

    # Authorization
    FORBIDDEN_NO_PERMISSION = "FORBIDDEN_NO_PERMISSION"
    FORBIDDEN_NO_RESTAURANT_ACCESS = "FORBIDDEN_NO_RESTAURANT_ACCESS"

    # Validation and lookups
    VALIDATION_FAILED = "VALIDATION_FAILED"
    RESTAURANT_NOT_FOUND = "RESTAURANT_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    POSITION_NOT_FOUND = "POSITION_NOT_FOUND"
    PERMISSION_NOT_FOUND = "PERMISSION_NOT_FOUND"

    # Internal
    DATA_UNAVAILABLE = "DATA_UNAVAILABLE"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ApiError(HTTPException):
    """HTTP error carrying a stable code alongside the message."""

    def __init__(
        self,
        status_code: int,
        code: ErrorCode,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(status_code=status_code, detail=message)
        self.code = code
        self.message = message
        self.details = details

    @classmethod
    def bad_request(
        cls, code: ErrorCode, message: str, details: dict[str, Any] | None = None
    ) -> "ApiError":
        return cls(status.HTTP_400_BAD_REQUEST, code, message, details)

    @classmethod
    def unauthorized(cls, code: ErrorCode, message: str) -> "ApiError":
        return cls(status.HTTP_401_UNAUTHORIZED, code, message)

    @classmethod
    def forbidden(
        cls, code: ErrorCode, message: str, details: dict[str, Any] | None = None
    ) -> "ApiError":
        return cls(status.HTTP_403_FORBIDDEN, code, message, details)

    @classmethod
    def not_found(cls, code: ErrorCode, message: str) -> "ApiError":
        return cls(status.HTTP_404_NOT_FOUND, code, message)


def build_error_response(
    status_code: int,
    code: ErrorCode,
    message: str,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    """Render the error body shared by every failure response."""
    body: dict[str, Any] = {
        "status": status_code,
        "code": code.value,
        "message": message,
        "timestamp": datetime.now(UTC).isoformat(),
    }
    if details:
        body["details"] = details
    return JSONResponse(status_code=status_code, content=body)


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code} {exc.code.value}")
    return build_error_response(exc.status_code, exc.code, exc.message, exc.details)


async def data_unavailable_handler(
    request: Request, exc: DataUnavailableError
) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path}: data unavailable: {exc}")
    message = "Data temporarily unavailable" if settings.is_production else str(exc)
    return build_error_response(
        status.HTTP_503_SERVICE_UNAVAILABLE, ErrorCode.DATA_UNAVAILABLE, message
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return build_error_response(
        422,
        ErrorCode.VALIDATION_FAILED,
        "Request validation failed",
        {"errors": jsonable_errors(exc)},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"{request.method} {request.url.path}: unhandled error")
    message = "Internal server error" if settings.is_production else str(exc)
    return build_error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorCode.INTERNAL_ERROR, message
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Reduce pydantic error entries to JSON-safe fields."""
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the structured error handlers to an application."""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(DataUnavailableError, data_unavailable_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
