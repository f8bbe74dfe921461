"""
JSON response class used by every route.

Items are echoed back verbatim, and JSON input may carry lone UTF-16
surrogates ("\\ud800") that cannot be encoded as UTF-8. Rendering with
``ensure_ascii=True`` writes them back as escapes instead of failing.
"""

import json
from typing import Any

from fastapi.responses import JSONResponse


class AsciiJSONResponse(JSONResponse):
    """JSONResponse that escapes all non-ASCII characters."""
    
    def render(self, content: Any) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=True,
            allow_nan=False,
            indent=None,
            separators=(",", ":"),
        ).encode("ascii")
