"""
Application exceptions and the FastAPI handlers that turn them into responses.

Every error the user can see carries a static, user-facing ``message``. Anything
more specific (the underlying exception, the offending sheet) goes into
``details`` and the logs, never into the response body.
"""
from typing import Optional

from fastapi import Request
from fastapi.responses import JSONResponse

from interview_prep.utils.logger import logger


class AppError(Exception):
    """Base exception for all application errors."""
    status_code = 500

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class UploadError(AppError):
    """Raised when an uploaded spreadsheet is missing, invalid or unreadable."""
    status_code = 400


class NoFileError(UploadError):
    pass


class InvalidFileTypeError(UploadError):
    pass


class FileTooLargeError(UploadError):
    pass


class EmptyWorkbookError(UploadError):
    pass


class MissingColumnError(UploadError):
    pass


class SpreadsheetParseError(UploadError):
    pass


class FlowError(AppError):
    """Raised when the model service is unavailable or returns malformed output."""
    status_code = 502


class ConfigurationError(AppError):
    """Raised when configuration is invalid or missing."""
    pass


class InvalidTransitionError(AppError):
    """Raised when a session action is not available from the current view."""
    status_code = 409


# --- FastAPI Exception Handlers ---

async def app_error_handler(request: Request, exc: AppError):
    logger.warning(f"{type(exc).__name__} on {request.url.path}: {exc.message} {exc.details or ''}".rstrip())
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
    )


async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal Server Error"},
    )
