"""Error Handlers: global exception handler for the coins API.

Invariants:
    - Every route is total, so only an unexpected exception reaches here
    - Exception (catch-all) → 500 envelope, never leaks internal details
    - Unmatched routes keep FastAPI's own 404 response
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from coins_api.core.errors import ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register the catch-all handler on the FastAPI app."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "error_code": "INTERNAL_ERROR"},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": ErrorCategory.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )
