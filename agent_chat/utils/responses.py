"""Response utilities."""

from typing import Any, Optional

from fastapi.responses import JSONResponse


def error_response(message: str, *, status_code: int, detail: Optional[Any] = None) -> JSONResponse:
    """Create a standardized error response."""
    payload = {"error": message}
    if detail:
        payload["detail"] = detail
    return JSONResponse(payload, status_code=status_code)
