"""
Error taxonomy for the classify-waste API and the FastAPI handlers that
render it as JSON.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from wastewise.core.config import settings
from wastewise.core.logger import logs

GENERIC_PROCESSING_DETAILS = "An internal error occurred while processing the image"


class WasteWiseError(Exception):
    """Base class for errors that map onto an HTTP error response."""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error: str = "Something went wrong!"

    def __init__(self, details: Optional[str] = None, error: Optional[str] = None):
        self.details = details
        if error:
            self.error = error
        super().__init__(details or self.error)

    def to_payload(self) -> dict:
        payload = {"error": self.error}
        if self.details:
            payload["details"] = self.details
        return payload


# --- Client faults ---
class ValidationError(WasteWiseError):
    status_code = status.HTTP_400_BAD_REQUEST
    error = "Invalid request"


class InvalidImageError(ValidationError):
    error = "No image data provided"


class InvalidLocationError(ValidationError):
    error = "User location (lat, lng) is required"


class PayloadTooLargeError(ValidationError):
    # Literal: the named 413 constant differs across Starlette releases
    status_code = 413
    error = "Request body too large"


# --- Internal faults ---
class ProcessingError(WasteWiseError):
    error = "Failed to classify image"

    def to_payload(self) -> dict:
        details = self.details
        if settings.is_production:
            details = GENERIC_PROCESSING_DETAILS
        return {
            "error": self.error,
            "details": details,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }


class ServiceUnavailableError(ProcessingError):
    error = "Label detection service unavailable"


class RouteNotFoundError(WasteWiseError):
    status_code = status.HTTP_404_NOT_FOUND
    error = "Route not found"


# --- Handlers ---
async def wastewise_exception_handler(request: Request, exc: WasteWiseError) -> JSONResponse:
    level = logging.WARNING if exc.status_code < 500 else logging.ERROR
    logs.log(level, f"{request.method} {request.url.path} -> {exc.status_code} {exc.error}", extra={"details": exc.details})
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Re-expresses FastAPI body validation failures in the 400 taxonomy.
    The image check runs first, so a body without a usable image is always
    reported as an image error even when the location is malformed too.
    """
    body = exc.body if isinstance(exc.body, dict) else {}
    image = body.get("imageBase64")
    first = exc.errors()[0] if exc.errors() else {}
    message = first.get("msg", "Malformed request body")

    if not isinstance(image, str) or not image.strip():
        error = InvalidImageError("imageBase64 must be a non-empty base64 string")
    else:
        error = InvalidLocationError(f"userLocation must include numeric lat and lng ({message})")
    return await wastewise_exception_handler(request, error)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Unknown paths and unsupported methods both read as a missing route
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return await wastewise_exception_handler(request, RouteNotFoundError())
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logs.log(logging.ERROR, f"Unhandled error on {request.method} {request.url.path}: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Something went wrong!"},
    )
