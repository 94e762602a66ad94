from pydantic import BaseModel
from typing import Any, Dict, Optional


class ApiResponse(BaseModel):
    """Envelope returned by every endpoint except the raw picture ones."""
    success: bool
    message: str
    data: Optional[Dict[str, Any]] = None


def ok(message: str, data: Optional[Dict[str, Any]] = None) -> ApiResponse:
    return ApiResponse(success=True, message=message, data=data)


def failure(message: str, data: Optional[Dict[str, Any]] = None) -> ApiResponse:
    return ApiResponse(success=False, message=message, data=data)
