"""Error handlers for the API.

All API errors use a consistent response format:
{
    "error": "Human-readable summary",
    "details": "Optional diagnostic text"
}
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException
from ytmproxy.exceptions import ProxyError

logger = logging.getLogger(__name__)


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str
    details: str | None = None


def error_response(
    status_code: int,
    error: str,
    details: str | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build an error envelope, omitting ``details`` when there are none."""
    content = ErrorResponse(error=error, details=details).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "query"]
        message = str(error.get("msg", "invalid value"))
        parts.append(f"{'.'.join(loc)}: {message}" if loc else message)
    return "; ".join(parts)


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers on the FastAPI app."""

    @app.exception_handler(ProxyError)
    async def proxy_error_handler(request: Request, exc: ProxyError) -> JSONResponse:
        """Generic handler for all ProxyError subclasses."""
        if exc.status_code >= 500:
            logger.error(
                "%s %s failed: %s (%s)",
                request.method,
                request.url.path,
                exc.message,
                exc.details,
            )
        return error_response(exc.status_code, exc.message, exc.details)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            "Invalid request parameters",
            _describe_validation_errors(exc),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return error_response(exc.status_code, str(exc.detail), headers=exc.headers)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        """Render any unhandled error as a 500 envelope.

        Runs outside the CORS middleware, so the header is added here.
        """
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal server error",
            str(exc) or type(exc).__name__,
            headers={"Access-Control-Allow-Origin": "*"},
        )
