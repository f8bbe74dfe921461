"""
Translate FastAPI request validation errors into client-facing messages.

FastAPI reports pydantic errors with a location tuple such as
``("body", "data", 3)``; each one is mapped to a short sentence about the
``data`` field. Every problem is reported, duplicates removed, order kept.
"""

from typing import Any, Iterable

from fastapi.exceptions import RequestValidationError

from bfhl_api.api.models import MAX_DATA_ITEMS
from bfhl_api.exceptions import InputValidationError

BODY_NOT_OBJECT = "Request body must be a JSON object"

DATA_FIELD_MESSAGES = {
    "missing": "Data field is required",
    "list_type": "Data must be an array",
    "too_short": "Data array must contain at least 1 item",
    "too_long": f"Data array cannot contain more than {MAX_DATA_ITEMS} items",
}


def format_error(error: dict[str, Any]) -> str:
    """
    Map one pydantic error dict to a message.
    
    Args:
        error: Entry of RequestValidationError.errors()
        
    Returns:
        Client-facing message
    """
    error_type = error.get("type", "")
    loc = tuple(error.get("loc", ()))
    
    # Whole body missing, malformed JSON, or a JSON value that is not an object
    if error_type == "json_invalid" or loc in ((), ("body",)):
        return BODY_NOT_OBJECT
    
    field_path = loc[1:] if loc[0] == "body" else loc
    
    if field_path and field_path[0] == "data":
        if len(field_path) == 1:
            return DATA_FIELD_MESSAGES.get(error_type, f"Data {error.get('msg', 'is invalid')}")
        index = field_path[1]
        if error_type == "string_type":
            return f'"data[{index}]" must be a string'
        return f'"data[{index}]" {error.get("msg", "is invalid")}'
    
    return f"{'.'.join(str(part) for part in field_path)}: {error.get('msg', 'is invalid')}"


def format_errors(errors: Iterable[dict[str, Any]]) -> list[str]:
    """Format all errors, dropping duplicate messages."""
    return list(dict.fromkeys(format_error(error) for error in errors))


def to_input_validation_error(exc: RequestValidationError) -> InputValidationError:
    """Convert a FastAPI RequestValidationError into the domain exception."""
    return InputValidationError(format_errors(exc.errors()))
