"""FastAPI middleware for request tracing, logging and security headers."""

import time
import uuid
from typing import Callable

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from bfhl_api.api.error_handlers import generic_error_handler

logger = structlog.get_logger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Cache-Control": "no-store",
    "Cross-Origin-Resource-Policy": "same-origin",
}


class RequestTracingMiddleware(BaseHTTPMiddleware):
    """Middleware to add request ID tracing to all requests.
    
    Features:
    - Generates unique request_id (UUID4) for each request
    - Binds request_id to structlog context (appears in all logs)
    - Adds X-Request-ID response header for client correlation
    - Logs request start/end with duration
    - Turns unexpected exceptions into the generic 500 envelope
    """
    
    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Response]
    ) -> Response:
        """Process request with tracing context."""
        request_id = str(uuid.uuid4())
        
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            client_host=request.client.host if request.client else None,
        )
        
        logger.info("Request started")
        
        start_time = time.perf_counter()
        try:
            response = await call_next(request)
            duration_ms = (time.perf_counter() - start_time) * 1000
            
            logger.info(
                "Request completed",
                status_code=response.status_code,
                duration_ms=round(duration_ms, 2),
            )
            
            response.headers["X-Request-ID"] = request_id
            return response
            
        except Exception as exc:
            # Answer here, while request_id is still bound, so the 500 keeps
            # X-Request-ID and passes back through the security headers
            response = await generic_error_handler(request, exc)
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                "Request failed",
                status_code=response.status_code,
                duration_ms=round(duration_ms, 2),
            )
            
            response.headers["X-Request-ID"] = request_id
            return response
        
        finally:
            # Prevent context leaking into the next request on this worker
            structlog.contextvars.clear_contextvars()


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware adding conservative security headers to every response.
    
    Headers already set by a handler are left untouched.
    """
    
    def __init__(self, app, headers: dict[str, str] | None = None):
        super().__init__(app)
        self.headers = dict(SECURITY_HEADERS if headers is None else headers)
    
    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Response]
    ) -> Response:
        response = await call_next(request)
        for name, value in self.headers.items():
            response.headers.setdefault(name, value)
        return response
