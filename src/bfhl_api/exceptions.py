"""
Domain exceptions for the BFHL Classification API.

The classification core never raises for valid input; these exceptions are
raised by the HTTP layer and mapped to responses in api/error_handlers.py.
"""

from typing import Any


class BfhlError(Exception):
    """
    Base exception for all service errors.
    """
    
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize service error.
        
        Args:
            message: Human-readable error description
            details: Structured error data for logging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
    
    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InputValidationError(BfhlError):
    """
    Request body rejected before classification.
    
    Carries every validation message, not just the first one.
    """
    
    def __init__(self, errors: list[str], message: str = "Validation failed"):
        """
        Initialize input validation error.
        
        Args:
            errors: Client-facing messages, one per problem found
            message: Summary message
        """
        super().__init__(message, {"errors": errors})
        self.errors = errors
