"""Error Handlers — global exception handlers for the cafe API.

Invariants:
    - CafeError → plain-text body with the error message, status from the error
    - Exception (catch-all) → 500 plain text, never leaks internal details

Design Decisions:
    - Two-layer handler: domain (CafeError), catch-all (Exception)
    - Plain text over JSON envelope: the /cafe contract is a bare message body
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from cafe_api.core.errors import CafeError, ErrorSeverity

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "internal error"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_cafe_error_handler(app)
    _register_generic_error_handler(app)


def _register_cafe_error_handler(app: FastAPI) -> None:
    """Register cafe domain/infrastructure error handler."""

    @app.exception_handler(CafeError)
    async def cafe_error_handler(request: Request, exc: CafeError):
        """Handle all cafe domain/infrastructure errors."""
        level = (
            logging.WARNING if exc.severity in (
                ErrorSeverity.INFO, ErrorSeverity.WARNING,
            ) else logging.ERROR
        )
        logger.log(
            level,
            f"CafeError: {exc.message}",
            extra={**exc.to_log_extra(), "path": request.url.path},
        )
        return PlainTextResponse(exc.message, status_code=exc.http_status)


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return PlainTextResponse(
            INTERNAL_ERROR_MESSAGE,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
