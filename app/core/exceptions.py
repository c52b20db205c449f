"""
Custom exception classes and the JSON error envelope returned by the API.
"""
from typing import Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import BaseModel, ConfigDict

from app.core.constants import ErrorMessages


class ErrorResponse(BaseModel):
    """Failure envelope: `{"success": false, "error": "..."}`."""
    success: bool = False
    error: str

    model_config = ConfigDict(frozen=True)


class AppException(Exception):
    """Base application exception."""

    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(detail)


class InvalidUrlError(AppException):
    """The submitted URL is missing or is not a YouTube video URL."""

    def __init__(self, detail: str = ErrorMessages.INVALID_URL):
        super().__init__(status_code=400, detail=detail)


class VideoNotFoundError(AppException):
    """The video information provider has no such video."""

    def __init__(self, video_id: str):
        self.video_id = video_id
        super().__init__(status_code=500, detail=ErrorMessages.VIDEO_NOT_FOUND)


class NoTranscriptError(AppException):
    """Captions are disabled or empty for the video."""

    def __init__(self, video_id: str):
        self.video_id = video_id
        super().__init__(status_code=400, detail=ErrorMessages.NO_TRANSCRIPT)


class ContextTooLongError(AppException):
    """The transcript does not fit the language model's context window."""

    def __init__(self, detail: str = ErrorMessages.VIDEO_TOO_LONG):
        super().__init__(status_code=400, detail=detail)


class UpstreamServiceError(AppException):
    """A third-party provider (YouTube, captions, LLM) failed."""

    def __init__(self, detail: str, status_code: Optional[int] = None):
        super().__init__(status_code=status_code or 500, detail=detail)


class MalformedResponseError(UpstreamServiceError):
    """The language model returned something other than a JSON object."""

    def __init__(self, detail: str = "The language model returned an invalid summary."):
        super().__init__(detail=detail)


def create_error_response(status_code: int, detail: Optional[str]) -> JSONResponse:
    """Create the `{success: false, error}` JSON response."""
    error = ErrorResponse(error=detail or ErrorMessages.UNEXPECTED)
    return JSONResponse(status_code=status_code, content=error.model_dump())


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle AppException and return the error envelope."""
    return create_error_response(exc.status_code, exc.detail)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies as 400 with the first validation problem."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        detail = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        detail = "Invalid request body."
    logger.warning(f"Rejected request to {request.url.path}: {detail}")
    return create_error_response(400, detail)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler: the error's own status code if it has one, else 500."""
    logger.exception(f"Unhandled error in {request.url.path}: {exc}")
    status_code = getattr(exc, "status_code", None)
    if not isinstance(status_code, int) or not 400 <= status_code < 600:
        status_code = 500
    return create_error_response(status_code, str(exc))
