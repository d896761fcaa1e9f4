"""Error handlers for the FastAPI application.

Every error leaves the API as `{"error": {"message", "status_code", ...}}`.
Calculator input errors are expected and returned verbatim; anything else
is logged with its traceback and reported as a generic 500.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from core.exceptions import AppException, ValidationError
from core.logger import get_logger
from typing import Optional

logger = get_logger("core.error_handlers")


def create_error_response(
    message: str,
    status_code: int = 500,
    details: Optional[dict] = None,
) -> JSONResponse:
    """Create a standardized error response.

    Args:
        message: Error message shown to the client.
        status_code: HTTP status code.
        details: Optional error details dictionary.

    Returns:
        JSONResponse with error details.
    """
    error_body = {
        "error": {
            "message": message,
            "status_code": status_code,
        }
    }
    if details:
        error_body["error"]["details"] = details
    return JSONResponse(status_code=status_code, content=error_body)


async def calculation_input_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Return a rejected calculator input as a form error."""
    logger.info(
        "Rejected input on %s %s: %s",
        request.method,
        request.url.path,
        exc.message,
    )
    return create_error_response(
        message=exc.message,
        status_code=exc.status_code,
        details=exc.details,
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle the remaining application exceptions (e.g. unknown catalog ids)."""
    logger.warning(
        "Application error: %s [%s %s]",
        exc.message,
        request.method,
        request.url.path,
    )
    return create_error_response(
        message=exc.message,
        status_code=exc.status_code,
        details=exc.details,
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle malformed payloads rejected by pydantic before reaching a calculator."""
    errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]
    logger.warning(
        "Malformed payload on %s %s: %s",
        request.method,
        request.url.path,
        errors,
    )
    return create_error_response(
        message="Invalid request payload",
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        details={"validation_errors": errors},
    )


async def unexpected_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log an unexpected failure and hide its internals from the client."""
    logger.error(
        "Unhandled exception on %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    return create_error_response(
        message="An internal server error occurred",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        details={"type": "internal_error"},
    )


def register_exception_handlers(app):
    """Register all exception handlers with the FastAPI app.

    Args:
        app: FastAPI application instance.
    """
    app.add_exception_handler(ValidationError, calculation_input_handler)
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unexpected_exception_handler)

    logger.info("Exception handlers registered")
