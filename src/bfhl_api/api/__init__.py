"""
FastAPI API routes and endpoints.

- routes.py: POST /bfhl, GET /health
- dependencies.py: Dependency injection for settings and identity
- models.py: API-specific request/response models
- validation.py: Request validation error formatting
- error_handlers.py: Exception handlers for structured error responses
- middleware.py: Request tracing and security headers
"""

from bfhl_api.api import dependencies, error_handlers, models
from bfhl_api.api.routes import router

__all__ = [
    "router",
    "dependencies",
    "error_handlers",
    "models",
]
