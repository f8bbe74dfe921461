"""
Data models for the BFHL Classification API.

Includes:
- Enums (ItemCategory)
- Output models (ClassificationResult)
- IdentityConfig (frozen dataclass injected into the HTTP layer)
"""

from bfhl_api.models.enums import ItemCategory
from bfhl_api.models.identity import IdentityConfig
from bfhl_api.models.output_models import ClassificationResult

__all__ = [
    "ItemCategory",
    "ClassificationResult",
    "IdentityConfig",
]
