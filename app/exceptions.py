# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error leaves the API in the same envelope:
#   {"success": false, "error": "<message>"}
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class PreDeliveryException(Exception):
    """
    Base exception for the PreDelivery API.

    All custom exceptions inherit from this class. `code` is for logs and
    callers inside the app; only `message` reaches the client.
    """

    def __init__(
        self,
        message: str,
        code: str = "PREDELIVERY_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        return {
            "success": False,
            "error": self.message,
        }


# =============================================================================
# Request Exceptions
# =============================================================================

class MissingParameterError(PreDeliveryException):
    """Raised when a required query parameter is absent or empty."""

    def __init__(self, parameter: str, message: str):
        super().__init__(
            message=message,
            code="MISSING_PARAMETER",
            status_code=400,
            details={"parameter": parameter},
        )


# =============================================================================
# User Lookup Exceptions
# =============================================================================

class UserLookupError(PreDeliveryException):
    """Raised when the user store cannot answer an existence check."""

    def __init__(self, message: str, lookup: str):
        super().__init__(
            message=message,
            code="USER_LOOKUP_FAILED",
            status_code=500,
            details={"lookup": lookup},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def predelivery_exception_handler(
    request: Request,
    exc: PreDeliveryException
) -> JSONResponse:
    """Convert PreDeliveryException to JSON response."""
    if exc.status_code >= 500:
        logger.error(f"{exc.code} on {request.url.path}: {exc.message} {exc.details}")
    else:
        logger.info(f"{exc.code} on {request.url.path}: {exc.message} {exc.details}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation errors in the standard envelope."""
    return JSONResponse(
        status_code=422,
        content={
            "success": False,
            "error": "Validation error",
            "errors": jsonable_errors(exc),
        }
    )


async def unexpected_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "An unexpected error occurred",
        }
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Reduce validation errors to their location and message."""
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]
