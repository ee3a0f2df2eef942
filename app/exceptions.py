# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the server.
# Each failure domain has its own exception with a short public message.
# The underlying cause is logged server-side and never sent to the client.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)


class ShowcaseException(Exception):
    """
    Base exception for the showcase server.

    `message` is what the client sees. `details` is for logs only.
    """

    def __init__(
        self,
        message: str,
        code: str = "SHOWCASE_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


# =============================================================================
# Request Exceptions
# =============================================================================

class DatabaseError(ShowcaseException):
    """Raised when the products query fails (connectivity, credentials, missing table)."""

    def __init__(self, error: str):
        super().__init__(
            message="Database error",
            code="DATABASE_ERROR",
            status_code=500,
            details={"error": error}
        )


class AssetLinkError(ShowcaseException):
    """Raised when a presigned URL for the banner object cannot be created."""

    def __init__(self, key: str, error: str):
        super().__init__(
            message="S3 error",
            code="ASSET_LINK_ERROR",
            status_code=500,
            details={"key": key, "error": error}
        )


# =============================================================================
# Startup Exceptions
# =============================================================================

class ConfigurationError(ShowcaseException):
    """Raised at startup when required environment variables are missing."""

    def __init__(self, missing_groups: list[str], missing_fields: list[str]):
        if missing_groups:
            message = (
                "Missing required environment variables for "
                f"{' and '.join(missing_groups)} connection: {', '.join(missing_fields)}"
            )
        else:
            message = f"Invalid configuration values: {', '.join(missing_fields)}"
        super().__init__(
            message=message,
            code="CONFIGURATION_ERROR",
            status_code=500,
            details={"groups": missing_groups, "fields": missing_fields}
        )
        self.missing_groups = missing_groups
        self.missing_fields = missing_fields


# =============================================================================
# Exception Handlers
# =============================================================================

async def showcase_exception_handler(
    request: Request,
    exc: ShowcaseException
) -> PlainTextResponse:
    """
    Convert ShowcaseException to a plain-text response.

    Only the short public message is returned.
    """
    logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.details}")
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def unexpected_exception_handler(
    request: Request,
    exc: Exception
) -> PlainTextResponse:
    """Handle anything no domain exception covers."""
    logger.exception(f"Unexpected error: {exc}")
    return PlainTextResponse("Internal server error", status_code=500)
