"""
FastAPI exception handlers for structured error responses.

Every error leaves the service in the same envelope:
``{"is_success": false, "message": ..., "errors": [...]}``.
"""

import structlog
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from bfhl_api.api.models import ErrorResponse
from bfhl_api.api.responses import AsciiJSONResponse
from bfhl_api.api.validation import to_input_validation_error
from bfhl_api.exceptions import InputValidationError
from bfhl_api.monitoring.metrics import bfhl_requests_total

logger = structlog.get_logger(__name__)


def _error_response(status_code: int, body: ErrorResponse, headers=None) -> AsciiJSONResponse:
    return AsciiJSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


async def input_validation_error_handler(
    request: Request, exc: InputValidationError
) -> AsciiJSONResponse:
    """
    Handle rejected request bodies.
    
    Maps to 400 Bad Request (client error).
    
    Args:
        request: FastAPI request
        exc: InputValidationError instance
    
    Returns:
        JSON error response listing every validation message
    """
    logger.warning("Invalid request body", errors=exc.errors)
    bfhl_requests_total.labels(status="validation_error").inc()
    
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        ErrorResponse(message=exc.message, errors=exc.errors),
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> AsciiJSONResponse:
    """
    Handle FastAPI request validation errors.
    
    FastAPI would answer 422; the /bfhl contract answers 400 with readable
    messages, so the error is converted and handled as InputValidationError.
    """
    return await input_validation_error_handler(request, to_input_validation_error(exc))


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> AsciiJSONResponse:
    """
    Handle HTTP errors raised by routing (404, 405) or by handlers.
    
    Keeps the original status code and headers (e.g. Allow on 405).
    """
    logger.info("HTTP error", status_code=exc.status_code, detail=exc.detail)
    
    return _error_response(
        exc.status_code,
        ErrorResponse(message=str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def generic_error_handler(request: Request, exc: Exception) -> AsciiJSONResponse:
    """
    Handle unexpected errors.
    
    Maps to 500 Internal Server Error. Details are logged, never returned.
    """
    logger.error(
        "Unexpected error",
        error_type=type(exc).__name__,
        exc_info=exc,
    )
    bfhl_requests_total.labels(status="error").inc()
    
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorResponse(message="Internal server error"),
    )


# Exception handler mapping for FastAPI app.add_exception_handler()
EXCEPTION_HANDLERS = {
    InputValidationError: input_validation_error_handler,
    RequestValidationError: request_validation_error_handler,
    StarletteHTTPException: http_exception_handler,
    Exception: generic_error_handler,
}
