"""Mapping of domain errors to JSON error responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from checkin_tracker.domain.errors import CheckinTrackerError, NotFoundError

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the ``{"error": message}`` body used by every endpoint."""
    return JSONResponse(status_code=status_code, content={"error": message})


def status_for(exc: CheckinTrackerError) -> int:
    """Default HTTP status for a domain error."""
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_400_BAD_REQUEST


def register_error_handlers(app: FastAPI) -> None:
    """Install handlers that turn failures into 4xx JSON errors."""

    @app.exception_handler(CheckinTrackerError)
    async def handle_domain_error(
        request: Request, exc: CheckinTrackerError
    ) -> JSONResponse:
        logger.info(
            "Request rejected: %s",
            exc.message,
            extra={"path": request.url.path},
        )
        return error_response(status_for(exc), exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = exc.errors()
        if errors:
            first = errors[0]
            location = ".".join(str(part) for part in first.get("loc", ()))
            message = f"Invalid request: {location}: {first.get('msg', 'invalid')}"
        else:
            message = "Invalid request"
        return error_response(status.HTTP_400_BAD_REQUEST, message)
