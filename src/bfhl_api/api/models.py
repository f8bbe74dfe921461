"""
API-specific request and response models for FastAPI endpoints.

These models wrap the core ClassificationResult with the identity fields
and the ``is_success`` envelope used by every response.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field

from bfhl_api.models.identity import IdentityConfig
from bfhl_api.models.output_models import ClassificationResult

MAX_DATA_ITEMS = 1000


class BfhlRequest(BaseModel):
    """Request body for POST /bfhl. Unknown keys are ignored."""
    
    data: list[str] = Field(
        description="Items to classify (empty strings allowed)",
        min_length=1,
        max_length=MAX_DATA_ITEMS,
        examples=[["a", "1", "334", "4", "R", "$"]]
    )


class BfhlResponse(BaseModel):
    """Successful response for POST /bfhl."""
    
    is_success: bool = True
    user_id: str = Field(description="User identifier", examples=["john_doe_17091999"])
    email: str = Field(description="Contact email", examples=["john@xyz.com"])
    roll_number: str = Field(description="Registration number", examples=["ABCD123"])
    odd_numbers: list[str] = Field(default_factory=list)
    even_numbers: list[str] = Field(default_factory=list)
    alphabets: list[str] = Field(default_factory=list)
    special_characters: list[str] = Field(default_factory=list)
    sum: str = Field(default="0", description="Decimal sum of all numbers")
    concat_string: str = Field(default="")
    
    @classmethod
    def from_result(
        cls, identity: IdentityConfig, result: ClassificationResult
    ) -> "BfhlResponse":
        """Merge identity fields with a classification result."""
        return cls(**identity.to_dict(), **result.model_dump())


class ErrorResponse(BaseModel):
    """Standard error response format."""
    
    is_success: bool = False
    message: str = Field(
        description="Human-readable error message",
        examples=["Validation failed", "Internal server error"]
    )
    errors: Optional[list[str]] = Field(
        default=None,
        description="Individual validation messages (validation failures only)"
    )


class RootResponse(BaseModel):
    """Service banner returned by GET /."""
    
    message: str
    version: str
    environment: str
    endpoint: str = "POST /bfhl"


class HealthResponse(BaseModel):
    """Response for health check endpoint."""
    
    status: str = Field(
        description="Overall health status",
        examples=["healthy"]
    )
    version: str = Field(
        description="Service version",
        examples=["1.0.0"]
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Health check timestamp (UTC)"
    )
