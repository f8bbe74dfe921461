"""
Classification core: pure functions, no configuration, no I/O.
"""

from bfhl_api.classification.classifier import classify, classify_item
from bfhl_api.classification.text_utils import build_concat_string

__all__ = [
    "classify",
    "classify_item",
    "build_concat_string",
]
