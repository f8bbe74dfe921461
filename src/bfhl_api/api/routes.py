"""
API routes for the BFHL classification endpoint and health check.
"""

import structlog
from fastapi import APIRouter, Depends, status

from bfhl_api.api.dependencies import get_identity, get_settings
from bfhl_api.api.models import (
    BfhlRequest,
    BfhlResponse,
    ErrorResponse,
    HealthResponse,
)
from bfhl_api.api.responses import AsciiJSONResponse
from bfhl_api.classification import classify
from bfhl_api.config import Settings
from bfhl_api.models.identity import IdentityConfig
from bfhl_api.monitoring.metrics import record_classification

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.post(
    "/bfhl",
    response_model=BfhlResponse,
    status_code=status.HTTP_200_OK,
    summary="Classify array items",
    description="""
    Split the items of `data` into odd numbers, even numbers, alphabets and
    special characters, sum the numbers, and build the concat string from
    the alphabetic items (joined, reversed, alternating caps).
    """,
    responses={
        200: {"description": "Classification completed"},
        400: {"model": ErrorResponse, "description": "Invalid request body"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)
async def classify_items(
    request: BfhlRequest,
    identity: IdentityConfig = Depends(get_identity),
) -> AsciiJSONResponse:
    """
    Classify the items of a request.
    
    Args:
        request: Validated BfhlRequest
        identity: Identity fields (injected)
    
    Returns:
        BfhlResponse body (identity fields + classification result)
    """
    result = classify(request.data)
    record_classification(result)
    
    logger.info(
        "Classification completed",
        item_count=len(request.data),
        numbers=len(result.odd_numbers) + len(result.even_numbers),
        alphabets=len(result.alphabets),
        special_characters=len(result.special_characters),
    )
    
    # Echoed items may contain lone surrogates; they must leave as \u escapes
    response = BfhlResponse.from_result(identity, result)
    return AsciiJSONResponse(content=response.model_dump())


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    settings: Settings = Depends(get_settings),
) -> HealthResponse:
    """The service has no downstream dependencies; reaching it means healthy."""
    return HealthResponse(status="healthy", version=settings.APP_VERSION)
